from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field, field_validator, model_validator
from typing import Dict
import logging
import sys
import time

from binset import BinSet

# Configure logging to stdout so we can see it in the terminal
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(levelname)s - %(message)s',
    handlers=[logging.StreamHandler(sys.stdout)]
)
logger = logging.getLogger(__name__)

# Upper bound on moldings a single request may need
MAX_BARS = 10000

app = FastAPI()

# Enable CORS for local development
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


class SolverRequest(BaseModel):
    stock_length: int = Field(default=2200, gt=0, description="Length of one stock molding in mm")
    pieces: Dict[int, int] = Field(..., description="Dictionary of piece lengths to quantities")

    @field_validator('pieces')
    @classmethod
    def validate_pieces(cls, v):
        if not v:
            raise ValueError("Must specify at least one piece")
        for length, quantity in v.items():
            if length <= 0:
                raise ValueError(f"Piece length must be positive, got {length}")
            if quantity <= 0:
                raise ValueError(f"Quantity must be positive, got {quantity}")
        return v

    @model_validator(mode="after")
    def validate_size(self):
        # each piece needs at most ceil(length / stock) moldings
        bars = sum(-(-length // self.stock_length) * quantity for length, quantity in self.pieces.items())
        if bars > MAX_BARS:
            raise ValueError(f"Request could need up to {bars} moldings, limit is {MAX_BARS}")
        return self


class BarPlan(BaseModel):
    bar_number: int
    cuts: list[int]
    used_mm: int
    waste_mm: int


class SolverResponse(BaseModel):
    bars_needed: int
    bar_plans: list[BarPlan]
    total_waste: int
    efficiency_percent: float


def solve_cutting_stock(stock_length: int, pieces: Dict[int, int]) -> SolverResponse:
    """
    Build a cut list with the greedy best-fit heuristic.

    Pieces are cut longest first. A piece longer than the stock takes whole
    moldings and the remainder is fitted like any other piece.

    Args:
        stock_length: Length of each stock molding in mm
        pieces: Dictionary mapping piece lengths to quantities needed

    Returns:
        SolverResponse with the cutting plan
    """
    start_time = time.time()

    logger.info("=" * 60)
    logger.info("🔧 Starting cut list calculation")
    logger.info(f"📏 Stock length: {stock_length}mm")
    logger.info(f"📦 Pieces requested: {pieces}")

    # Expand pieces into flat list, longest first
    cuts = []
    for length, count in pieces.items():
        cuts.extend([length] * count)
    cuts.sort(reverse=True)
    logger.info(f"📊 Total pieces to cut: {len(cuts)}")

    moldings = BinSet(stock_length)
    moldings.extend(cuts)

    bar_plans = [
        BarPlan(
            bar_number=i,
            cuts=list(molding.pieces),
            used_mm=molding.used_length(),
            waste_mm=molding.remaining_length(),
        )
        for i, molding in enumerate(moldings, 1)
    ]
    total_waste = moldings.total_waste()

    # Calculate efficiency
    total_material_needed = sum(cuts)
    total_material_used = len(moldings) * stock_length
    efficiency = (total_material_needed / total_material_used * 100) if total_material_used > 0 else 0

    elapsed_time = time.time() - start_time

    logger.info(f"📋 Results:")
    logger.info(f"   - Moldings needed: {len(bar_plans)}")
    logger.info(f"   - Total waste: {total_waste}mm")
    logger.info(f"   - Efficiency: {round(efficiency, 1)}%")
    logger.info(f"⏱️  Total time: {elapsed_time:.2f} seconds")
    logger.info("=" * 60)

    return SolverResponse(
        bars_needed=len(bar_plans),
        bar_plans=bar_plans,
        total_waste=total_waste,
        efficiency_percent=round(efficiency, 1)
    )


@app.get("/")
async def root():
    return {"message": "Molding Cut Calculator API"}


@app.get("/api")
async def api_root():
    return {"message": "Molding Cut Calculator API"}


@app.post("/api/solve", response_model=SolverResponse)
def solve(request: SolverRequest):
    """
    Compute the cut list for the requested pieces.
    """
    try:
        logger.info("📥 Received solve request")
        result = solve_cutting_stock(request.stock_length, request.pieces)
        logger.info("📤 Sending response to client")
        return result
    except ValueError as e:
        logger.error(f"❌ Validation error: {str(e)}")
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.error(f"❌ Unexpected error: {str(e)}")
        raise HTTPException(status_code=500, detail=f"Error computing cut list: {str(e)}")

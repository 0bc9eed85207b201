import sys
from typing import List

from binset import BinSet, InvalidLength

# ---------- INPUT ----------
STOCK = 2200  # mm

pieces = [2110, 2110, 2110, 2110, 940, 850]
# ---------------------------


def cut_list(stock: int, lengths: List[int]) -> BinSet:
    # longest first, the greedy fit depends on it
    moldings = BinSet(stock)
    moldings.extend(sorted(lengths, reverse=True))
    return moldings


def main() -> None:
    try:
        moldings = cut_list(STOCK, pieces)
    except InvalidLength as e:
        sys.exit(f"Invalid input: {e}")

    # ---------- OUTPUT ----------
    print(f"Number of fixed length pieces: {len(moldings)}")
    for i, molding in enumerate(moldings, 1):
        print(f"Piece: {i}, {molding}")


if __name__ == "__main__":
    main()

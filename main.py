"""
Local development server for the Molding Cut Calculator.
Run this file to try the API locally.
"""
import uvicorn

# The app (routes, CORS, logging) lives in api/index.py
from api.index import app, MAX_BARS

HOST = "0.0.0.0"
PORT = 8000

if __name__ == "__main__":
    print("\n" + "="*60)
    print("🔧 Molding Cut Calculator - Local Development Server")
    print("="*60)
    print(f"\n✅ Server starting at: http://localhost:{PORT}")
    print(f"📋 API docs at: http://localhost:{PORT}/docs")
    print(f"📦 Requests are limited to {MAX_BARS} moldings")
    print("\n💡 Press Ctrl+C to stop the server\n")

    uvicorn.run(
        "api.index:app",
        host=HOST,
        port=PORT,
        reload=True,
        log_level="info"
    )

"""
Main entry point for the FastAPI application.
Run this file to start the FastAPI server.

Usage:
    python run_fastapi.py

Or with uvicorn directly:
    uvicorn forum_api.fastapi_app:create_fastapi_app --factory --host 0.0.0.0 --port 5001
"""

from dotenv import load_dotenv

# Load environment variables
load_dotenv()

import uvicorn

from forum_api.config.settings import Config

if __name__ == "__main__":
    print(f"Starting Forum API ({Config.PERSISTENCE_BACKEND} persistence)...")
    print(f"Server running on http://{Config.HOST}:{Config.PORT}")
    print(f"API docs available at http://{Config.HOST}:{Config.PORT}/docs")

    uvicorn.run(
        "forum_api.fastapi_app:create_fastapi_app",
        factory=True,
        host=Config.HOST,
        port=Config.PORT,
        reload=Config.DEBUG,
        log_level="info" if Config.DEBUG else "warning",
    )

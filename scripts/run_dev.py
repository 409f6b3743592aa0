"""
Development server launcher.

Loads .env and serves the pick'em API with uvicorn in reload mode.

Usage:
    python scripts/run_dev.py [--port 8000]
"""

import argparse
import sys
from pathlib import Path

project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from dotenv import load_dotenv

load_dotenv()

import uvicorn

if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Run the pick'em API for development")
    parser.add_argument("--host", default="0.0.0.0")
    parser.add_argument("--port", type=int, default=8000)
    args = parser.parse_args()

    print("=" * 60)
    print("CFB Pick'em Development Server")
    print("=" * 60)
    print(f"API:  http://localhost:{args.port}/api/v1")
    print(f"Docs: http://localhost:{args.port}/docs")
    print("Press Ctrl+C to stop")
    print("=" * 60)

    uvicorn.run("app.main:create_app", factory=True, host=args.host, port=args.port, reload=True,
                log_level="info")

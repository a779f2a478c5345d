#!/usr/bin/env python
"""Script to run the Taskboard API server."""
import os
import sys
from pathlib import Path

# Get the directory where this script is located
script_dir = Path(__file__).resolve().parent

# Add the project root to Python path
sys.path.insert(0, str(script_dir))

# Change to project root so a relative sqlite DATABASE_URL lands here
os.chdir(script_dir)

# Now run uvicorn
import uvicorn

if __name__ == "__main__":
    uvicorn.run(
        "taskboard.main:app",
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", "8000")),
        reload=os.getenv("RELOAD", "true").lower() in ("1", "true", "yes", "on"),
    )

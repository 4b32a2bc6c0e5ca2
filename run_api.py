"""FastAPI development server launcher.

Usage:
    python run_api.py

The server will start on http://localhost:8000
API docs available at http://localhost:8000/api/docs
"""

from nudgequest.main import main

if __name__ == "__main__":
    print("Starting NudgeQuest API...")
    print("API docs: http://localhost:8000/api/docs")
    print("Health check: http://localhost:8000/api/health")
    print("\nPress Ctrl+C to stop\n")

    main()

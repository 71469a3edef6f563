# run_dev.py
"""
Local development launcher for FastAPI.
Equivalent to: `uvicorn moviedialogue.app:app --reload --host 0.0.0.0 --port 8080`
"""

import uvicorn

from moviedialogue.settings import settings

if __name__ == "__main__":
    uvicorn.run(
        "moviedialogue.app:app",
        host="0.0.0.0",
        port=settings.PORT,
        reload=True,
    )

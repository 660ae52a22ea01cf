import uvicorn
from internship_portal.core.config import settings

if __name__ == "__main__":
    # HOST / PORT come from the environment or .env (default 0.0.0.0:8000)
    uvicorn.run(
        "main:app",
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower()
    )

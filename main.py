from fastapi import FastAPI, Depends
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from internship_portal.routers import applications
from sqlalchemy.orm import Session
from internship_portal.database.database import engine, Base, get_db, check_db_connection
from internship_portal.services.application_store import ApplicationStore, StoreError
from internship_portal.core.config import settings
from internship_portal.core.logging import configure_logging
import logging

# Import every model so the tables are registered before create_all
from internship_portal.models import internship_application

configure_logging()
logger = logging.getLogger("internship_portal.main")

# Create database tables
Base.metadata.create_all(bind=engine)

app = FastAPI(
    title="Internship Application API",
    description="Collects internship applications and lists them for review",
    version="1.0.0"
)

# Log registered routes on startup to help debugging
@app.on_event("startup")
async def log_registered_routes():
    try:
        routes = []
        for route in app.router.routes:
            path = getattr(route, "path", None) or str(route)
            methods = getattr(route, "methods", None)
            routes.append({"path": path, "methods": sorted(methods) if methods else []})
        logger.info(f"Registered routes: {routes}")
    except Exception:
        logger.exception("Failed to list registered routes on startup")

logger.info(f"Configured CORS origins: {settings.cors_origins}")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Anything a route lets escape still answers in the {"error": ...} shape,
# without leaking the exception text to the caller.
@app.middleware("http")
async def catch_unhandled_errors(request, call_next):
    try:
        return await call_next(request)
    except Exception:
        logger.exception(f"Unhandled exception in {request.method} {request.url.path}")
        return JSONResponse(status_code=500, content={"error": "Internal server error"})

# Routers
app.include_router(applications.router, tags=["applications"])

@app.get("/")
async def root():
    return {"message": "Internship application API is running"}


@app.get("/health")
async def health_check():
    return {"status": "healthy"}

@app.get("/db-status")
def database_status(db: Session = Depends(get_db)):
    """Database connection status and number of stored applications"""
    connection_status = check_db_connection()
    if connection_status["status"] != "connected":
        return connection_status

    try:
        total = ApplicationStore(db).count()
    except StoreError:
        return {"status": "error", "message": "Failed to count applications"}

    return {**connection_status, "total_applications": total}

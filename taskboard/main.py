import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import AUTO_CREATE_TABLES, CORS_ORIGINS, LOG_FILE, LOG_LEVEL
from .database import create_tables
from .errors import register_exception_handlers
from .logging_setup import setup_logging
from .routers import tasks

setup_logging(LOG_LEVEL, LOG_FILE)
logger = logging.getLogger(__name__)

# Create FastAPI app
app = FastAPI(
    title="Taskboard API",
    description="Team task-tracking dashboard API",
    version="1.0.0"
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

# Include routers
app.include_router(tasks.router, prefix="/api", tags=["tasks"])


# Create tables on startup
@app.on_event("startup")
def on_startup():
    if AUTO_CREATE_TABLES:
        create_tables()
        logger.info("Tasks table ready")
    else:
        logger.info("AUTO_CREATE_TABLES is off; expecting the tasks table to be provisioned by migrate.py")


@app.get("/")
def read_root():
    return {"message": "Taskboard API"}


@app.get("/health")
def health_check():
    return {"status": "healthy"}

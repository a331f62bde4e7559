import logging
from datetime import datetime, timezone

from fastapi import FastAPI
from contextlib import asynccontextmanager
from restaurant.db.init_db import create_database, migrate_plaintext_passwords
from restaurant.db.base import Base
from restaurant.db.session import engine, SessionLocal
from restaurant.core.config import settings
from restaurant.core.errors import register_exception_handlers
from restaurant.api.router import api_router

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup: Ensure DB exists, create tables, hash any legacy passwords
    create_database()
    Base.metadata.create_all(bind=engine)

    db = SessionLocal()
    try:
        migrate_plaintext_passwords(db)
    finally:
        db.close()

    logger.info("%s started", settings.PROJECT_NAME)
    yield


from fastapi.middleware.cors import CORSMiddleware

app = FastAPI(title=settings.PROJECT_NAME, lifespan=lifespan)

# Set all CORS enabled origins
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

app.include_router(api_router, prefix=settings.API_PREFIX)

@app.get("/")
def read_root():
    return {
        "success": True,
        "message": "Restaurant Management API is running",
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }

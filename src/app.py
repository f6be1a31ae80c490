"""
User Directory Backend API Server
Core functionality: list, create and look up users
"""

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from config.settings import ALLOWED_ORIGINS, STORE_BACKEND
from database.connection import init_database, close_database
from api.routes import health, users
from utils.error_handling import setup_error_handling

logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager"""
    if STORE_BACKEND == "postgres":
        await init_database()
    logger.info(f"User store backend: {STORE_BACKEND}")
    yield
    if STORE_BACKEND == "postgres":
        await close_database()

# FastAPI app initialization
app = FastAPI(
    title="User Directory Backend",
    description="Backend API for creating and looking up users",
    version="1.0.0",
    lifespan=lifespan
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["*"],
)

# Setup centralized error handling
setup_error_handling(app)

# Include API routes
app.include_router(health.router, tags=["Health"])
app.include_router(users.router, prefix="/api/users", tags=["Users"])

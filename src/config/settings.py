"""
Configuration settings for the User Directory Backend
"""

import os
import logging

logger = logging.getLogger(__name__)

# Environment configuration
ENV = os.getenv("ENV", "PROD")  # PROD or QA
PORT = int(os.getenv("PORT", 8080))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
DATABASE_URL = os.getenv("DATABASE_URL")

# Store backend: "postgres" or "memory"
STORE_BACKEND = os.getenv("STORE_BACKEND", "postgres" if DATABASE_URL else "memory").lower()
SUPPORTED_STORE_BACKENDS = ("postgres", "memory")

logger.info(f"Environment: {ENV}, store backend: {STORE_BACKEND}")

# Validate required environment variables
if STORE_BACKEND not in SUPPORTED_STORE_BACKENDS:
    raise ValueError(
        f"STORE_BACKEND must be one of {', '.join(SUPPORTED_STORE_BACKENDS)}, got '{STORE_BACKEND}'"
    )
if STORE_BACKEND == "postgres" and not DATABASE_URL:
    raise ValueError("DATABASE_URL environment variable is required for the postgres store backend")

# CORS settings
ALLOWED_ORIGINS = [
    origin.strip()
    for origin in os.getenv("ALLOWED_ORIGINS", "http://localhost:3000").split(",")
    if origin.strip()
]

"""
Entry point for the User Directory Backend

Command-line options override the matching environment variables. They are
applied before config.settings is imported, since settings are read at import.
"""

import argparse
import sys
import os
import logging
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

# Add src directory to Python path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), 'src'))

logger = logging.getLogger(__name__)

# CLI option -> environment variable read by config.settings
ENV_OVERRIDES = {
    "port": "PORT",
    "store_backend": "STORE_BACKEND",
    "database_url": "DATABASE_URL",
    "log_level": "LOG_LEVEL",
}

def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Run the User Directory Backend")
    parser.add_argument("--host", default="0.0.0.0", help="Interface to bind")
    parser.add_argument("--port", type=int, help="Port to listen on (env: PORT)")
    parser.add_argument("--store-backend", choices=["postgres", "memory"], help="User store (env: STORE_BACKEND)")
    parser.add_argument("--database-url", help="Postgres DSN (env: DATABASE_URL)")
    parser.add_argument("--log-level", choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="Log level (env: LOG_LEVEL)")
    return parser.parse_args(argv)

def apply_overrides(args, environ=os.environ):
    """Copy the options that were given onto the environment"""
    for option, env_name in ENV_OVERRIDES.items():
        value = getattr(args, option)
        if value is not None:
            environ[env_name] = str(value)

def main(argv=None):
    args = parse_args(argv)
    apply_overrides(args)

    from config.settings import PORT, LOG_LEVEL
    from app import app

    logging.basicConfig(level=LOG_LEVEL)

    import uvicorn
    logger.info(f"Starting User Directory Backend on {args.host}:{PORT}")
    uvicorn.run(app, host=args.host, port=PORT, log_level=LOG_LEVEL.lower())

if __name__ == "__main__":
    main()

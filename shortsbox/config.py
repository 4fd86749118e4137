"""
Configuration for the shorts service.

Loads environment variables from a ``.env`` file in the project root
and exposes them as typed module-level values with safe defaults.
"""

import os
from pathlib import Path
from typing import List

from dotenv import load_dotenv

_project_root = Path(__file__).resolve().parent.parent
load_dotenv(_project_root / ".env")


# =============================================================================
# Application Environment
# =============================================================================

# "development", "staging" or "production"
APP_ENV: str = os.getenv("APP_ENV", "development")

DEBUG: bool = os.getenv("DEBUG", "false").lower() == "true"

LOG_LEVEL: str = os.getenv("LOG_LEVEL", "DEBUG" if DEBUG else "INFO").upper()


# =============================================================================
# HTTP Server
# =============================================================================

HOST: str = os.getenv("HOST", "127.0.0.1")

PORT: int = int(os.getenv("PORT", "8000"))

# Browser origins allowed to call the API, comma separated.
# Default: the local Next.js dev server.
CORS_ORIGINS: str = os.getenv(
    "CORS_ORIGINS", "http://localhost:3000,http://127.0.0.1:3000"
)


# =============================================================================
# Helper Functions
# =============================================================================

def is_production() -> bool:
    """Check if running in production environment."""
    return APP_ENV.lower() == "production"


def get_cors_origins() -> List[str]:
    """Return ``CORS_ORIGINS`` as a list, skipping blank entries."""
    return [o.strip() for o in CORS_ORIGINS.split(",") if o.strip()]

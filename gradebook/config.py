# /gradebook/config.py

"""
Runtime settings for the gradebook service.

Every value is read from the environment once, at import time, with a default
that is suitable for local development.
"""

import os
from typing import List, Optional

# The SQLAlchemy URL of the backing store. SQLite is the local default.
DATABASE_URL: str = os.getenv("DATABASE_URL", "sqlite:///./gradebook.db")

LOG_LEVEL: str = os.getenv("GRADEBOOK_LOG_LEVEL", "INFO").upper()

# Optional JSON fixture file that is loaded into an empty store on startup.
SEED_PATH: Optional[str] = os.getenv("GRADEBOOK_SEED_PATH") or None

# Length of the "recent grades" list shown on the dashboard.
RECENT_GRADES_LIMIT: int = int(os.getenv("GRADEBOOK_RECENT_GRADES", "5"))


def _split_origins(raw: str) -> List[str]:
    origins = [origin.strip() for origin in raw.split(",") if origin.strip()]
    return origins or ["*"]


CORS_ORIGINS: List[str] = _split_origins(os.getenv("GRADEBOOK_CORS_ORIGINS", "*"))

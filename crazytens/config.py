"""
Configuration - Environment-driven defaults.

    CRAZYTENS_BASE         Numeral system for new games (default "doz")
    CRAZYTENS_HAND_SIZE    Cards dealt per player each round (default 5)
    CRAZYTENS_SEED         Seed for reproducible games (default unset)
    CRAZYTENS_LOG_LEVEL    Logging level for the CLI (default WARNING)
    CRAZYTENS_SESSION_TTL  Seconds before an ended session is purged (default 3600)
"""

import os

DEFAULT_BASE = os.getenv("CRAZYTENS_BASE", "doz")
DEFAULT_HAND_SIZE = int(os.getenv("CRAZYTENS_HAND_SIZE", "5"))
DEFAULT_SEED = int(os.environ["CRAZYTENS_SEED"]) if os.getenv("CRAZYTENS_SEED") else None
LOG_LEVEL = os.getenv("CRAZYTENS_LOG_LEVEL", "WARNING").upper()
SESSION_TTL_SECONDS = int(os.getenv("CRAZYTENS_SESSION_TTL", "3600"))

import os
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(dotenv_path=env_path)

APP_VERSION = "0.1.0"

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./timesync.db")

# Server
API_HOST = os.getenv("API_HOST", "0.0.0.0")
API_PORT = int(os.getenv("API_PORT", "3000"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Overall deadline for a request (fetch + evaluate), in seconds
REQUEST_TIMEOUT_SECONDS = float(os.getenv("REQUEST_TIMEOUT_SECONDS", "30"))

# CORS origins, comma-separated
ALLOWED_ORIGINS = [
    origin.strip()
    for origin in os.getenv(
        "ALLOWED_ORIGINS", "http://localhost:3000,http://localhost:5173"
    ).split(",")
    if origin.strip()
]

# Availability matching defaults
MATCH_DEFAULT_MIN_PER_GROUP = int(os.getenv("MATCH_DEFAULT_MIN_PER_GROUP", "1"))
MATCH_DEFAULT_COUNT = int(os.getenv("MATCH_DEFAULT_COUNT", "5"))
MATCH_MAX_COUNT = int(os.getenv("MATCH_MAX_COUNT", "100"))

# Rate limiting for the match endpoint
RATE_LIMIT_ENABLED = os.getenv("RATE_LIMIT_ENABLED", "true").lower() == "true"
MATCH_RATE_LIMIT = int(os.getenv("MATCH_RATE_LIMIT", "60"))
MATCH_RATE_WINDOW_SECONDS = int(os.getenv("MATCH_RATE_WINDOW_SECONDS", "60"))

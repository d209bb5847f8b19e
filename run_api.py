"""
TimeSync API Server Runner
Run with: python run_api.py
"""

import logging
import sys
from pathlib import Path

import uvicorn

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent))

from timesync.config import API_HOST, API_PORT, LOG_LEVEL

# Configure logging
logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)

logger = logging.getLogger(__name__)

if __name__ == "__main__":
    logger.info(f"Starting TimeSync API on {API_HOST}:{API_PORT}...")
    try:
        uvicorn.run("timesync.main:app", host=API_HOST, port=API_PORT, log_level=LOG_LEVEL.lower())
    except KeyboardInterrupt:
        logger.info("API server stopped by user")
    except Exception as e:
        logger.error(f"API server crashed: {e}")
        sys.exit(1)

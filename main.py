"""
Entry point for the Users & Movies API
"""

import sys
import os
import logging
from dotenv import load_dotenv

# Load environment variables from .env file before settings are read
load_dotenv()

# Add src directory to Python path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "src"))

from app import app
from config.settings import PORT

logger = logging.getLogger(__name__)

if __name__ == "__main__":
    import uvicorn
    logger.info(f"Starting Users & Movies API on port {PORT}")
    uvicorn.run(app, host="0.0.0.0", port=PORT)

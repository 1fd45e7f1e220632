import os
from dotenv import load_dotenv

load_dotenv()

# ------------------------------------------------------------------------------
# APPLICATION
# ------------------------------------------------------------------------------
APP_TITLE = os.getenv("APP_TITLE", "String Analyzer Service")
APP_DESCRIPTION = "Analyze strings, store their properties in memory and query them"
APP_VERSION = os.getenv("APP_VERSION", "1.0.0")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv("CORS_ORIGINS", "*").split(",")
    if origin.strip()
]

HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", 8000))

# ------------------------------------------------------------------------------
# STORAGE
# ------------------------------------------------------------------------------
# In-memory only: every process (and every store instance) starts empty.
STORE_URL = "sqlite://"

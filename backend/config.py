import os
from pathlib import Path
from dotenv import load_dotenv

load_dotenv()

# Base paths
BASE_DIR = Path(__file__).parent.parent
DATA_DIR = BASE_DIR / "data"

# Article store (single SQLite file)
SQLITE_DB_PATH = os.getenv("SQLITE_DB_PATH", str(DATA_DIR / "mydb.sqlite"))

# Server settings
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "8080"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# CORS - "*" allows any origin
CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]

# Abort startup if the article table cannot be created/seeded
STRICT_SCHEMA_INIT = os.getenv("STRICT_SCHEMA_INIT", "false").lower() == "true"

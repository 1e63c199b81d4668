import os

from .config import Config

SECRET_KEY = Config.SECRET_KEY
DB_CONFIG = Config.db_config()

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
MAX_UPLOAD_BYTES = Config.MAX_UPLOAD_BYTES

ADMIN_USERNAME = Config.ADMIN_USERNAME
ADMIN_PASSWORD = Config.ADMIN_PASSWORD

# If enabled, app will apply schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
# Optional: also seed demo data on startup
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))

import os

from .config import Config

SECRET_KEY = "test-secret"
DB_CONFIG = {**Config.db_config(), "database": os.getenv("DB_NAME", "overtime_test_db")}

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"
MAX_UPLOAD_BYTES = Config.MAX_UPLOAD_BYTES

ADMIN_USERNAME = "admin"
ADMIN_PASSWORD = "admin123"

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))

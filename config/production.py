import os

from .config import Config

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")
DB_CONFIG = Config.db_config()

DEBUG = False
LOG_LEVEL = Config.LOG_LEVEL
MAX_UPLOAD_BYTES = Config.MAX_UPLOAD_BYTES

ADMIN_USERNAME = Config.ADMIN_USERNAME
ADMIN_PASSWORD = Config.ADMIN_PASSWORD

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))

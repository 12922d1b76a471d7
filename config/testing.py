from .config import DB_CONFIG, Config

SECRET_KEY = "test-secret"
DB_CONFIG = dict(DB_CONFIG)

SESSION_LIFETIME_MINUTES = 60
TGL_MASUK_CUTOFF = "2025-11-26"
ADMIN_USERNAME = "admin"
ADMIN_PASSWORD = "admin123"
PORT = Config.PORT

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

AUTO_INIT_DB = False
AUTO_SEED_DB = False

from .config import DB_CONFIG, Config, _flag

SECRET_KEY = Config.SECRET_KEY
DB_CONFIG = dict(DB_CONFIG)

SESSION_LIFETIME_MINUTES = Config.SESSION_LIFETIME_MINUTES
TGL_MASUK_CUTOFF = Config.TGL_MASUK_CUTOFF
ADMIN_USERNAME = Config.ADMIN_USERNAME
ADMIN_PASSWORD = Config.ADMIN_PASSWORD
PORT = Config.PORT

DEBUG = True
LOG_LEVEL = "DEBUG"

# If enabled, app will apply schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = _flag("AUTO_INIT_DB", "1")
# Optional: also seed the admin account on startup
AUTO_SEED_DB = _flag("AUTO_SEED_DB", "1")

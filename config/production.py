import os

from .config import DB_CONFIG, Config

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")
DB_CONFIG = dict(DB_CONFIG)

SESSION_LIFETIME_MINUTES = Config.SESSION_LIFETIME_MINUTES
TGL_MASUK_CUTOFF = Config.TGL_MASUK_CUTOFF
ADMIN_USERNAME = Config.ADMIN_USERNAME
ADMIN_PASSWORD = os.getenv("ADMIN_PASSWORD")
PORT = Config.PORT

DEBUG = False
LOG_LEVEL = Config.LOG_LEVEL
SESSION_COOKIE_SECURE = True

AUTO_INIT_DB = Config.AUTO_INIT_DB
AUTO_SEED_DB = Config.AUTO_SEED_DB

import os

from .config import *  # noqa: F401,F403
from .config import env_flag

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# If enabled, app will create the kv_store table on startup (idempotent)
AUTO_INIT_DB = env_flag("AUTO_INIT_DB", "1")

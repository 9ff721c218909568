from .config import *  # noqa: F401,F403

SECRET_KEY = "test-secret"

STORAGE_BACKEND = "file"
CAMERA_SOURCE = "none"
GEMINI_API_KEY = ""
ADMIN_PIN = "0000"
TIMEZONE = "America/Sao_Paulo"

DEBUG = False
TESTING = True
AUTO_INIT_DB = False

"""Settings shared by every environment; each module overrides what differs."""

import os


def env_flag(name: str, default: str = "0") -> bool:
    return bool(int(os.environ.get(name, default)))


SECRET_KEY = os.environ.get("SECRET_KEY", "dev-secret-key")

# file | mysql
STORAGE_BACKEND = os.environ.get("STORAGE_BACKEND", "file").lower()
DATA_DIR = os.environ.get("DATA_DIR", "data")

DB_CONFIG = {
    "host": os.environ.get("DB_HOST", "localhost"),
    "port": int(os.environ.get("DB_PORT", "3306")),
    "user": os.environ.get("DB_USER", "root"),
    "password": os.environ.get("DB_PASSWORD", ""),
    "database": os.environ.get("DB_NAME", "timeclock_db"),
}
AUTO_INIT_DB = env_flag("AUTO_INIT_DB", "0")

# Kiosk
ADMIN_PIN = os.environ.get("ADMIN_PIN", "0000")
TIMEZONE = os.environ.get("TIMEZONE", os.environ.get("TZ", "America/Sao_Paulo"))
# "none" when the browser sends the selfie, otherwise a device index or stream URL
CAMERA_SOURCE = os.environ.get("CAMERA_SOURCE", "none")
REQUIRE_CAMERA_READY = env_flag("REQUIRE_CAMERA_READY", "0")

WEBHOOK_TIMEOUT = float(os.environ.get("WEBHOOK_TIMEOUT", "10"))

# AI assistant
GEMINI_API_KEY = os.environ.get("GEMINI_API_KEY", os.environ.get("API_KEY", ""))
GEMINI_MODEL = os.environ.get("GEMINI_MODEL", "gemini-2.5-flash")

LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
DEBUG = False

import os

API_CONFIG = {
    "base_url": os.getenv("API_BASE_URL", "https://please-set-API_BASE_URL/api"),
    "token": os.getenv("API_TOKEN", ""),
    "timeout": float(os.getenv("API_TIMEOUT", "30")),
}

GEOLOCATION_CONFIG = {
    "enabled": bool(int(os.getenv("GEOLOCATION_ENABLED", "1"))),
    "latitude": os.getenv("GEO_LATITUDE", ""),
    "longitude": os.getenv("GEO_LONGITUDE", ""),
    "timeout": float(os.getenv("GEO_TIMEOUT", "10")),
}

SESSION_FILE = os.getenv("SESSION_FILE", os.path.expanduser("~/.attendance_dashboard/session.json"))

TICK_SECONDS = 1.0

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

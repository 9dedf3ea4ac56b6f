import os

API_CONFIG = {
    "base_url": os.getenv("API_BASE_URL", "http://localhost:8080/api"),
    "token": os.getenv("API_TOKEN", ""),
    "timeout": float(os.getenv("API_TIMEOUT", "30")),
}

# Workstation coordinates used as the device position on clock-in
GEOLOCATION_CONFIG = {
    "enabled": bool(int(os.getenv("GEOLOCATION_ENABLED", "1"))),
    "latitude": os.getenv("GEO_LATITUDE", ""),
    "longitude": os.getenv("GEO_LONGITUDE", ""),
    "timeout": float(os.getenv("GEO_TIMEOUT", "10")),
}

# JSON record {"username", "role", "empId"} written by the login flow
SESSION_FILE = os.getenv("SESSION_FILE", ".session.json")

TICK_SECONDS = 1.0

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

import os

API_CONFIG = {
    "base_url": os.getenv("API_BASE_URL", "http://testserver/api"),
    "token": "test-token",
    "timeout": 5.0,
}

GEOLOCATION_CONFIG = {
    "enabled": True,
    "latitude": "12.9716",
    "longitude": "77.5946",
    "timeout": 1.0,
}

SESSION_FILE = os.getenv("SESSION_FILE", "")

TICK_SECONDS = 0.01

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

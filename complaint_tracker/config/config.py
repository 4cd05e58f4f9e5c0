import os

APP_TITLE = os.getenv("APP_TITLE", "complaint_tracker")
APP_VERSION = os.getenv("APP_VERSION", "0.0.1")
API_PREFIX = "/api/v1"

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

import os

API_URL = os.getenv("API_URL", "http://localhost:4000")

APP_NAME = "AlgoConfig"

REQUEST_TIMEOUT = float(os.getenv("REQUEST_TIMEOUT", "8"))  # secondes

LAST_SAVED_HIGHLIGHT_SECONDS = 4

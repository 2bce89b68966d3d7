# app/config.py
import os

CONTRIBUTORS_UPSTREAM_URL = os.getenv(
    "CONTRIBUTORS_UPSTREAM_URL", "https://jsonplaceholder.typicode.com/users"
)
UPSTREAM_TIMEOUT_SECONDS = float(os.getenv("UPSTREAM_TIMEOUT_SECONDS", 10))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

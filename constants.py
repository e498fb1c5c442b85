import os

REDIS_URL = os.getenv("REDIS_URL", "redis://localhost:6379")
REDIS_TOKEN = os.getenv("REDIS_TOKEN", None)

IO_PREFIX = os.getenv("IO_PREFIX", "io")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_FILE = os.getenv("LOG_FILE", None)

HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", 8000))

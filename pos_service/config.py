# config.py
import os

SERVICE_NAME = os.environ.get("SERVICE_NAME", "pos-service")
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")

HOST = os.environ.get("HOST", "0.0.0.0")
PORT = int(os.environ.get("PORT", "4000"))

DB_FILE = os.environ.get("DB_FILE", "db.json")
SEED_FILE = os.environ.get("SEED_FILE")

CACHE_TYPE = os.environ.get("CACHE_TYPE", "NullCache")
CACHE_HOST = os.environ.get("CACHE_HOST")
CACHE_PORT = os.environ.get("CACHE_PORT", "6379")
CACHE_DB = os.environ.get("CACHE_DB", "0")
CACHE_TIMEOUT = int(os.environ.get("CACHE_TIMEOUT", "60"))

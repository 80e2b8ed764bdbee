import os

DATA_DIR = os.getenv("DATA_DIR", "/var/lib/bizdesk")
STORAGE_BACKEND = os.getenv("STORAGE_BACKEND", "json")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
DEBUG = False

FLOOR_NET_SALARY_AT_ZERO = bool(int(os.getenv("FLOOR_NET_SALARY_AT_ZERO", "0")))

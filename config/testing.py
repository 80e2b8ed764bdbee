import os

DATA_DIR = os.getenv("DATA_DIR", "data-test")
STORAGE_BACKEND = "memory"

LOG_LEVEL = "WARNING"
DEBUG = False
TESTING = True

FLOOR_NET_SALARY_AT_ZERO = False

import os

DATA_DIR = os.getenv("DATA_DIR", "data")
STORAGE_BACKEND = os.getenv("STORAGE_BACKEND", "json")

LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
DEBUG = True

# Day deductions may push net salary below zero unless this is enabled
FLOOR_NET_SALARY_AT_ZERO = bool(int(os.getenv("FLOOR_NET_SALARY_AT_ZERO", "0")))

import os

ENGINE_VERSION = os.getenv("ENGINE_VERSION", "v1_legacy")

LOG_LEVEL = "WARNING"

SNAPSHOT_DAYS_BACK = 2
SNAPSHOT_DAYS_FORWARD = 5
SNAPSHOT_CHUNK_SIZE = 100

DEBUG = False
TESTING = True

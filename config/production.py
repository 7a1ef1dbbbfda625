import os

ENGINE_VERSION = os.getenv("ENGINE_VERSION", "v1_legacy")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

SNAPSHOT_DAYS_BACK = int(os.getenv("SNAPSHOT_DAYS_BACK", "30"))
SNAPSHOT_DAYS_FORWARD = int(os.getenv("SNAPSHOT_DAYS_FORWARD", "90"))
SNAPSHOT_CHUNK_SIZE = int(os.getenv("SNAPSHOT_CHUNK_SIZE", "5000"))

DEBUG = False

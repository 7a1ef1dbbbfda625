import os

# Organization engine version: v1_legacy | v2_write_based | v2_simplified
ENGINE_VERSION = os.getenv("ENGINE_VERSION", "v1_legacy")

LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# Historical snapshot window around today
SNAPSHOT_DAYS_BACK = int(os.getenv("SNAPSHOT_DAYS_BACK", "30"))
SNAPSHOT_DAYS_FORWARD = int(os.getenv("SNAPSHOT_DAYS_FORWARD", "90"))
SNAPSHOT_CHUNK_SIZE = int(os.getenv("SNAPSHOT_CHUNK_SIZE", "5000"))

DEBUG = True

"""Application settings."""

import os
from pathlib import Path

# Logging
LOG_DIR = Path(os.getenv("HR_LOG_DIR", "logs"))
LOG_LEVEL = os.getenv("HR_LOG_LEVEL", "INFO")
LOG_RETENTION = os.getenv("HR_LOG_RETENTION", "7 days")

# Cache
CACHE_TTL_SECONDS = float(os.getenv("HR_CACHE_TTL_SECONDS", "300"))
MAX_CACHE_SIZE = int(os.getenv("HR_MAX_CACHE_SIZE", "1000"))
CACHE_MONITOR_INTERVAL = float(os.getenv("HR_CACHE_MONITOR_INTERVAL", "60"))

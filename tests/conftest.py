"""Global test fixtures."""

import os

# Keep logfire quiet and local during tests; must happen before any app is built
os.environ.setdefault("LOGFIRE_IGNORE_NO_CONFIG", "1")
os.environ.pop("LOGFIRE_TOKEN", None)
os.environ.pop("BRAIN_LOG_FILE", None)

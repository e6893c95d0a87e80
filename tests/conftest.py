"""Root conftest — shared test configuration."""

import os

# Deterministic logging settings when the shell defines none
os.environ.setdefault("SETKIT_LOG_LEVEL", "INFO")
os.environ.setdefault("SETKIT_LOG_FORMAT", "json")

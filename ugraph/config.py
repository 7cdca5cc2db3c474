"""
Configuration constants for ugraph.

Graph defaults and logging settings live here. Values that may vary per
environment are read from environment variables (a local .env file is
honoured).
"""

import os

from dotenv import load_dotenv

load_dotenv()

# =============================================================================
# Graph Configuration
# =============================================================================

# Weight given to an edge when connect() is called without one
DEFAULT_EDGE_WEIGHT = 1.0

# Returned by weight_of() for two vertices that are not adjacent
NO_EDGE_WEIGHT = -1.0

# =============================================================================
# Logging Configuration
# =============================================================================

# Log level used by scripts (DEBUG, INFO, WARNING, ERROR).
# The library itself never configures handlers.
LOG_LEVEL = os.environ.get("UGRAPH_LOG_LEVEL") or os.environ.get("LOG_LEVEL", "INFO")

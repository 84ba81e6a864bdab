"""
Configuration constants for the Dijkstra visualizer.

Every tunable lives here.  Deployment-specific values are read from
environment variables; everything else is a plain module constant.
"""

import os

# =============================================================================
# Server Configuration
# =============================================================================

# Flask session signing key - override in any shared deployment
SECRET_KEY = os.environ.get("DIJKSTRA_SECRET_KEY", "dijkstra-visualizer-dev-key")

HOST = os.environ.get("DIJKSTRA_HOST", "127.0.0.1")
PORT = int(os.environ.get("DIJKSTRA_PORT", "5000"))
DEBUG = os.environ.get("DIJKSTRA_DEBUG", "0").lower() in ("1", "true", "yes")

# Browser workspaces kept in memory; the least recently used is evicted first
MAX_WORKSPACES = int(os.environ.get("DIJKSTRA_MAX_WORKSPACES", "256"))

# =============================================================================
# Logging Configuration
# =============================================================================

LOG_LEVEL = os.environ.get("DIJKSTRA_LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"

# =============================================================================
# Canvas Configuration
# =============================================================================

CANVAS_WIDTH = 800
CANVAS_HEIGHT = 500

# Click radius (px) that counts as hitting a node
NODE_HIT_TOLERANCE = 20

# Pixels of distance per unit of proposed edge weight
EDGE_WEIGHT_SCALE = 30

# =============================================================================
# Playback Configuration
# =============================================================================

# Browser timer interval for auto-run
AUTO_RUN_INTERVAL_MS = int(os.environ.get("DIJKSTRA_AUTO_RUN_MS", "500"))

# Seconds per step for each named speed
SPEED_PRESETS = {
    "slow":   1.0,
    "medium": AUTO_RUN_INTERVAL_MS / 1000,
    "fast":   0.2,
}
DEFAULT_SPEED = "medium"

# =============================================================================
# Random Graph Defaults
# =============================================================================

RANDOM_NUM_NODES = 6
RANDOM_EDGE_PROBABILITY = 0.4
RANDOM_WEIGHT_RANGE = (1, 10)

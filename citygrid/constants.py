# citygrid/constants.py
from typing import Tuple

# Layout
UNIT_LENGTH: float = 2.0
DEFAULT_WORLD_LENGTH: int = 5
MIN_WORLD_LENGTH: int = 5  # Corner/edge rules need at least one interior ring
DEFAULT_ROAD_PROBABILITY: float = 0.7
EDGE_MARGIN: int = 2

# Catalog roles
ROLE_BUILDINGS: str = "buildings"
ROLE_ROADS: str = "roads"
ROLE_OTHERS: str = "others"

# Loading
LOADER_WORKERS: int = 2

# Default material overlay
DEFAULT_DIFFUSE: Tuple[float, float, float] = (1.0, 1.0, 1.0)
DEFAULT_AMBIENT: Tuple[float, float, float] = (0.0, 0.0, 0.0)
DEFAULT_SPECULAR: Tuple[float, float, float] = (1.0, 1.0, 1.0)
DEFAULT_SHININESS: float = 400.0
DEFAULT_OPACITY: float = 1.0

"""Library configuration loaded from environment variables."""

import os
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
_env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(_env_path)

# Logging
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

# National Grid inverse projection
GRID_MAX_ITERATIONS: int = int(os.getenv("GRID_MAX_ITERATIONS", "20"))
GRID_CONVERGENCE_TOLERANCE: float = float(os.getenv("GRID_CONVERGENCE_TOLERANCE", "0.00001"))  # metres

# Grid reference rendering (10 digits = metres)
GRID_DEFAULT_DIGITS: int = int(os.getenv("GRID_DEFAULT_DIGITS", "10"))

# Degrees/minutes/seconds formatting (narrow no-break space)
DMS_SEPARATOR: str = os.getenv("DMS_SEPARATOR", "\u202f")

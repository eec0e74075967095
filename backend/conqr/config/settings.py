"""
Central configuration for the territory engine.
"""
import os


# Loop closure: minimum recorded points and max start/end gap (meters)
MIN_LOOP_POINTS: int = int(os.getenv("MIN_LOOP_POINTS", "10"))
LOOP_CLOSURE_METERS: float = float(os.getenv("LOOP_CLOSURE_METERS", "200"))

# Claims smaller than this are treated as GPS noise (square meters)
MIN_TERRITORY_AREA_M2: float = float(os.getenv("MIN_TERRITORY_AREA_M2", "10"))

# Overlaps smaller than this never count as an invasion (square meters)
OVERLAP_NOISE_FLOOR_M2: float = float(os.getenv("OVERLAP_NOISE_FLOOR_M2", "1"))

# Path metrics sanity limits
MAX_SEGMENT_METERS: float = float(os.getenv("MAX_SEGMENT_METERS", "1000"))
MAX_PLAUSIBLE_SPEED_MS: float = float(os.getenv("MAX_PLAUSIBLE_SPEED_MS", "100"))

"""
Tracking Module
Checks applied to raw GPS samples and recorded paths
"""
from .speed_validator import SpeedValidator, validate_speed
from .loop_detector import LoopDetector, check_loop_closure
from .path_metrics import PathMetrics, calculate_area, calculate_average_speed, calculate_distance

__all__ = [
    "LoopDetector",
    "PathMetrics",
    "SpeedValidator",
    "calculate_area",
    "calculate_average_speed",
    "calculate_distance",
    "check_loop_closure",
    "validate_speed",
]

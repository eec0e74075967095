from .geodesic_calculator import GeodesicCalculator

__all__ = ["GeodesicCalculator"]

"""
Engine Pipelines
Tracking checks on raw GPS paths and territory geometry/conquering
"""

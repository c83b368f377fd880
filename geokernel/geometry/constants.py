# geokernel/geometry/constants.py
"""Constants for geometric calculations."""

# Default tolerance for "are these two doubles the same value"
EQUALITY_EPSILON = 1e-13

# Minimum distance between two points used as independent degrees of freedom
# of a construction (line from two points, plane from three)
MIN_SEPARATION = 1e-4

# Looser tolerance for results that only carry float precision
FLOAT_PRECISION_EPSILON = 5e-6

# Operands above this magnitude get a tolerance scaled by their order of magnitude
MAGNITUDE_SCALING_THRESHOLD = 10.0

# Minimum separation between the ends of a 2D segment, and minimum x delta
# for a 2D line to be treated as non vertical
MIN_PLANAR_DELTA = 1e-7

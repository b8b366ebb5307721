# domain/geometry/constants.py
"""Constants for tuple and color arithmetic."""

# Tolerance for approximate equality and near-zero checks
EPSILON = 1e-5

# Homogeneous coordinate of points and vectors
POINT_W = 1.0
VECTOR_W = 0.0

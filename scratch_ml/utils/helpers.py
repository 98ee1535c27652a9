"""
Numeric helpers shared by K-Means and KNN.
"""

import numpy as np
from typing import Sequence


def mean(values: Sequence[float]) -> float:
    """
    Calculate the arithmetic mean of a sequence of numbers.
    
    An empty sequence yields NaN instead of raising.
    
    Args:
        values: Numbers to average
    
    Returns:
        Mean value
    """
    values = np.asarray(values, dtype=np.float64)
    with np.errstate(divide='ignore', invalid='ignore'):
        return float(np.sum(values) / values.size)


def distance(a: Sequence[float], b: Sequence[float]) -> float:
    """
    Calculate the Euclidean distance between two points.
    
    Both points must have the same number of coordinates; numpy would
    otherwise broadcast a single coordinate against the other point.
    
    Args:
        a: First point
        b: Second point of the same dimensionality
    
    Returns:
        Distance between the points
    """
    a = np.asarray(a, dtype=np.float64)
    b = np.asarray(b, dtype=np.float64)
    return float(np.sqrt(np.sum((b - a) ** 2)))

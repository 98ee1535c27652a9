"""Utility functions shared by the algorithms and runners."""

from .helpers import mean, distance
from .logging_utils import init_logging

__all__ = ['mean', 'distance', 'init_logging']

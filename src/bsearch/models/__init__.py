"""
Data models for bsearch.

This module contains the ordering primitives and configuration models.
"""

from .ordering import Ordering, Comparator
from .config import BsearchConfig, SearchConfig, LoggingConfig

__all__ = ['Ordering', 'Comparator', 'BsearchConfig', 'SearchConfig', 'LoggingConfig']

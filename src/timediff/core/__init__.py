"""Core components: the TimeDiff value type"""
from .timediff import TimeDiff

__all__ = ["TimeDiff"]

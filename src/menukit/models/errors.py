"""
Error taxonomy for reported (non-fatal) menu errors.
"""

from enum import Enum


class ErrorKind(str, Enum):
    """Categories of reported errors."""
    USAGE = "usage"                # missing receiver or required argument
    REGISTRATION = "registration"  # alias conflicts
    RESOLUTION = "resolution"      # find() misses, invalid group usage
    CALLBACK = "callback"          # user callback failed under safe mode

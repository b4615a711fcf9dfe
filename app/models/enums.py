"""
Enums for type-safe values across the application.
"""
from enum import Enum


class MessageKind(str, Enum):
    """Kind of inline message shown on the page."""
    ERROR = "error"
    NOTICE = "notice"

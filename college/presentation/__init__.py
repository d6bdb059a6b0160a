"""
Presentation module for console formatting.
"""

from .display import DisplayVisitor, format_performer, wam_color

__all__ = [
    "DisplayVisitor",
    "format_performer",
    "wam_color",
]

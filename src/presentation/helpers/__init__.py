"""
Presentation Layer Helpers
"""

from .progress_display import ProgressDisplay

__all__ = [
    'ProgressDisplay',
]

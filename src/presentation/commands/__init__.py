"""
Presentation Commands Module
All CLI command implementations
"""

from .build_command import build_command
from .inspect_command import inspect_command
from .recent_command import recent_command
from .validate_command import validate_command

__all__ = [
    'build_command',
    'inspect_command',
    'recent_command',
    'validate_command',
]

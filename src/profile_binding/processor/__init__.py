"""
profile_binding.processor

Logging profile deployment processor.

Responsibilities:
- Bind resolved log contexts onto deployment units.
- Build and attach logging configuration handles.
- Walk deployment trees applying profile precedence and inheritance.
"""

from profile_binding.processor.binder import bind_context
from profile_binding.processor.handles import ConfigurationHandle, attach_handle, make_handle
from profile_binding.processor.walker import LoggingProfileProcessor

__all__ = [
    "ConfigurationHandle",
    "LoggingProfileProcessor",
    "attach_handle",
    "bind_context",
    "make_handle",
]

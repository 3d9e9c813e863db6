"""
Adapters layer - Sources of busy events.
"""

from .file_event_source import FileEventSource, parse_minute

__all__ = ["FileEventSource", "parse_minute"]

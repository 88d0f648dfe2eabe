"""Output sinks for exporting projected occurrences."""

from backoffice.sinks.console import ConsoleSink
from backoffice.sinks.json_file import JsonFileSink

__all__ = ["ConsoleSink", "JsonFileSink"]

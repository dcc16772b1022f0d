"""Output sinks for exporting generated data."""

from iban_gen.sinks.console import ConsoleSink
from iban_gen.sinks.json_file import JsonFileSink

__all__ = ["ConsoleSink", "JsonFileSink"]

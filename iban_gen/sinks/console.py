"""Console sink for printing generated records."""

import json
from typing import Any

from iban_gen.sinks.serialization import to_dict


class ConsoleSink:
    """Output records to stdout as JSON."""

    def __init__(self, pretty: bool = True, max_records: int | None = None) -> None:
        """Initialize console sink.

        Parameters
        ----------
        pretty : bool
            Pretty-print JSON output.
        max_records : int | None
            Maximum records to print per batch (None for all).
        """
        self.pretty = pretty
        self.max_records = max_records
        self._counts: dict[str, int] = {}

    def write_batch(self, entity_type: str, records: list[Any]) -> None:
        """Write a batch of records to console as a JSON array."""
        display_records = records[: self.max_records] if self.max_records else records
        data = [to_dict(record) for record in display_records]

        if self.pretty:
            print(json.dumps(data, indent=2, ensure_ascii=False))
        else:
            print(json.dumps(data, ensure_ascii=False))

        self._counts[entity_type] = self._counts.get(entity_type, 0) + len(records)

    def close(self) -> dict[str, int]:
        """Return per-entity record counts."""
        return dict(self._counts)

"""JSON file sink for exporting generated records."""

import json
from pathlib import Path
from typing import Any

from iban_gen.logging import get_logger
from iban_gen.sinks.serialization import to_dict

logger = get_logger(__name__)


class JsonFileSink:
    """Output records to JSON files, one file per entity type."""

    def __init__(self, output_dir: str | Path, pretty: bool = False) -> None:
        """Initialize JSON file sink.

        Parameters
        ----------
        output_dir : str | Path
            Directory to write JSON files.
        pretty : bool
            Pretty-print JSON output.
        """
        self.output_dir = Path(output_dir)
        self.output_dir.mkdir(parents=True, exist_ok=True)
        self.pretty = pretty
        self._counts: dict[str, int] = {}

    def write_batch(self, entity_type: str, records: list[Any]) -> Path:
        """Write a batch of records to ``<entity_type>.json``."""
        file_path = self.output_dir / f"{entity_type}.json"

        data = [to_dict(record) for record in records]

        with open(file_path, "w", encoding="utf-8") as f:
            if self.pretty:
                json.dump(data, f, indent=2, ensure_ascii=False)
            else:
                json.dump(data, f, ensure_ascii=False)

        self._counts[entity_type] = len(records)
        return file_path

    def close(self) -> dict[str, int]:
        """Log a summary and return per-entity record counts."""
        logger.info("JSON files written to: %s", self.output_dir)
        for entity_type, count in self._counts.items():
            logger.info(
                "  %s: %d records",
                entity_type,
                count,
                extra={"extra": {"entity_type": entity_type, "records": count}},
            )
        return dict(self._counts)

"""JSON file sink for exporting ledger snapshots."""

import json
import logging
from pathlib import Path
from typing import Any

from bank_ledger.exceptions import SinkError
from bank_ledger.sinks.serialization import to_dict

logger = logging.getLogger(__name__)


class JsonFileSink:
    """Write each batch of records to ``<output_dir>/<entity_type>.json``."""

    def __init__(self, output_dir: str | Path, pretty: bool = False) -> None:
        """Initialize JSON file sink.

        Parameters
        ----------
        output_dir : str | Path
            Directory to write JSON files; created if missing.
        pretty : bool
            Pretty-print JSON output.
        """
        self.output_dir = Path(output_dir)
        try:
            self.output_dir.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise SinkError(f"Cannot create output directory {self.output_dir}: {exc}") from exc
        self.pretty = pretty
        self._counts: dict[str, int] = {}

    def write_batch(self, entity_type: str, records: list[Any]) -> None:
        """Write a batch of records, replacing any previous file for the entity."""
        file_path = self.output_dir / f"{entity_type}.json"
        data = [to_dict(record) for record in records]

        try:
            with open(file_path, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2 if self.pretty else None, ensure_ascii=False)
        except OSError as exc:
            raise SinkError(f"Cannot write {file_path}: {exc}") from exc

        self._counts[entity_type] = len(records)
        logger.debug("Wrote %d %s records to %s", len(records), entity_type, file_path)

    def close(self) -> None:
        """Log a summary of written files."""
        logger.info("JSON files written to: %s", self.output_dir)
        for entity_type, count in self._counts.items():
            logger.info("  %s: %d records", entity_type, count)

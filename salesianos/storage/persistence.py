"""Handles saving and loading JSON snapshots and the run log."""

import json
import logging
from pathlib import Path
from typing import Any

from rich.console import Console

from salesianos.exceptions import StorageError
from salesianos.utils.files import ensure_directory

RUN_LOG_FILENAME = 'scraping_log.txt'
ALL_DATA_FILENAME = 'all_data.json'
SUMMARY_FILENAME = 'summary.json'


class OutputStorage:
    """Manages the JSON snapshots written by a scrape run.

    Every write replaces the previous file wholesale; only the run log is
    appended to across runs.

    Attributes:
        output_dir: Directory the snapshots are written to
        console: Rich console instance for formatted output

    """

    def __init__(self, output_dir: Path | str, console: Console | None = None):
        """Initialize the storage manager.

        Args:
            output_dir: Directory for snapshot files
            console: Rich console instance for formatted output. Defaults to None (creates new Console).

        """
        self.output_dir = Path(output_dir)
        self.console = console or Console()
        self.logger = logging.getLogger(__name__)

    @property
    def run_log_path(self) -> Path:
        """Path of the append-only run log."""
        return self.output_dir / RUN_LOG_FILENAME

    def write(self, filename: str, record: Any) -> bool:
        """Serialize a record to a pretty-printed JSON file.

        Args:
            filename: File name relative to the output directory
            record: JSON-serializable data

        Returns:
            True if the file was written, False otherwise.

        """
        filepath = self.output_dir / filename
        try:
            ensure_directory(filepath.parent)
            with open(filepath, 'w', encoding='utf-8') as f:
                json.dump(record, f, indent=2, ensure_ascii=False)
        except (OSError, StorageError, TypeError, ValueError) as e:
            self.logger.error(f'Failed to save {filepath}: {e}')
            self.console.print(f'[danger]✗ Failed to save file {filename}: {e}[/danger]')
            return False

        self.logger.info(f'Saved {filepath}')
        self.console.print(f'[info]Data saved to {filepath}[/info]')
        return True

    def load(self, filename: str) -> Any | None:
        """Load a JSON file from the output directory.

        Args:
            filename: File name relative to the output directory

        Returns:
            Parsed data, or None if not found or unreadable.

        """
        filepath = self.output_dir / filename
        if not filepath.exists():
            return None

        try:
            with open(filepath, encoding='utf-8') as f:
                return json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            self.logger.error(f'Error loading {filepath}: {e}')
            self.console.print(f'[danger]Error loading file {filename}: {e}[/danger]')
            return None

    def exists(self, filename: str) -> bool:
        """Check whether a snapshot file exists."""
        return (self.output_dir / filename).exists()

    def append_log(self, text: str):
        """Append text to the run log, creating it if needed.

        Args:
            text: Text to append, including its trailing newlines

        """
        ensure_directory(self.output_dir)
        with open(self.run_log_path, 'a', encoding='utf-8') as f:
            f.write(text)

"""Debug output for scrape runs.

Handles saving of raw page HTML for inspecting selector misses.
"""

import logging
from pathlib import Path

from rich.console import Console

from salesianos.config import file_slug
from salesianos.utils.files import ensure_directory


class DebugManager:
    """Saves raw HTML snapshots when debug output is enabled."""

    def __init__(self, debug_dir: Path | str, console: Console | None = None, enabled: bool = True):
        """Initialize DebugManager.

        Args:
            debug_dir: Directory receiving the HTML snapshots.
            console: Rich console instance for output.
            enabled: Whether debug output is enabled.

        """
        self.console = console or Console()
        self.enabled = enabled
        self.debug_dir = Path(debug_dir)
        self.logger = logging.getLogger(__name__)

    def save_debug_html(self, name: str, html: str) -> Path | None:
        """Save raw HTML under debug_dir/<slug>.html.

        Failures are reported but never interrupt the scrape.

        Args:
            name: Page name (e.g. 'main_page' or a sport display name).
            html: Raw HTML content to save.

        Returns:
            Path of the written file, or None if nothing was written.

        """
        if not self.enabled:
            return None

        filepath = self.debug_dir / f'{file_slug(name)}.html'
        try:
            ensure_directory(self.debug_dir)
            filepath.write_text(html, encoding='utf-8')
        except Exception as e:
            self.logger.warning(f'Failed to save debug HTML for {name}: {e}')
            self.console.print(f'[warning]Failed to save debug HTML for {name}: {e}[/warning]')
            return None

        self.console.print(f'  [dim]↻ Debug HTML saved to: {filepath}[/dim]')
        return filepath

"""
cli.py
=======
Command line entry point for the scraper and report generator.

Usage:
    salesianos scrape     # Scrape the event site into JSON snapshots
    salesianos process    # Render HTML/CSV reports from the snapshots
    salesianos both       # Scrape, then render reports
    salesianos help       # Show available commands
    salesianos            # Interactive prompt
"""

import argparse
import logging
import sys
from collections.abc import Callable

import logfire
from rich.console import Console
from rich.panel import Panel
from rich.prompt import Prompt
from rich.table import Table
from rich.theme import Theme

from salesianos.config import ScraperConfig
from salesianos.core.fetcher import PageFetcher
from salesianos.exceptions import SalesianosError
from salesianos.outputs import ReportBuilder
from salesianos.pipeline import ScrapeRunner
from salesianos.utils.logging import setup_local_logging

COMMAND_HELP = {
    'scrape': 'Scrape the main page and every sport page into JSON files',
    'process': 'Generate HTML and CSV reports from the scraped JSON files',
    'both': 'Scrape, then generate reports (reports are skipped if scraping fails)',
    'help': 'Show this help',
    'exit': 'Leave the interactive prompt',
}

logger = logging.getLogger(__name__)


class ScraperApp:
    """Dispatches CLI commands to the scrape runner and report builder.

    Attributes:
        config: Scraper configuration shared by every component
        console: Rich console instance for formatted output
        commands: Dispatch table from command name to handler

    """

    def __init__(self, config: ScraperConfig | None = None, console: Console | None = None):
        """Initialize the app.

        Args:
            config: Scraper configuration. Defaults to the compiled-in settings.
            console: Rich console instance. Defaults to a themed Console.

        """
        self.config = config or ScraperConfig()
        self.console = console or Console(
            theme=Theme(
                {
                    'info': 'dim cyan',
                    'warning': 'magenta',
                    'danger': 'bold red',
                    'success': 'bold green',
                    'step': 'bold blue',
                }
            )
        )
        self.commands: dict[str, Callable[[], bool]] = {
            'scrape': self.scrape,
            'process': self.process,
            'both': self.both,
            'help': self.show_help,
        }

    def dispatch(self, command: str) -> bool:
        """Run a command by name.

        Args:
            command: One of the names in COMMAND_HELP other than 'exit'

        Returns:
            True if the command succeeded, False otherwise.

        """
        handler = self.commands.get(command)
        if handler is None:
            self.console.print(f'[danger]Unknown command: {command}[/danger]')
            self.show_help()
            return False
        return handler()

    def scrape(self) -> bool:
        """Run the scraper. Individual sport failures do not make this fail."""
        try:
            with PageFetcher(self.config, console=self.console) as fetcher:
                ScrapeRunner(self.config, fetcher=fetcher, console=self.console).run()
        except Exception as e:
            logger.exception('Scrape failed')
            self.console.print(f'[danger]Scraping process failed: {e}[/danger]')
            return False
        self.console.print('[success]Web scraping completed successfully![/success]')
        return True

    def process(self) -> bool:
        """Render reports from the last scrape."""
        try:
            ReportBuilder(self.config, console=self.console).build()
        except (SalesianosError, OSError) as e:
            logger.exception('Report generation failed')
            self.console.print(f'[danger]Error processing data: {e}[/danger]')
            return False
        return True

    def both(self) -> bool:
        """Scrape, then render reports; reports are skipped when scraping fails."""
        if not self.scrape():
            self.console.print('[danger]Scraping failed - skipping report generation[/danger]')
            return False
        if not self.process():
            return False

        self.console.print(
            Panel(
                f'Raw data directory: {self.config.output_dir}\n'
                f'Processed reports: {self.config.reports_dir}\n\n'
                f'Open {self.config.reports_dir / "index.html"} to view the reports.\n'
                'CSV exports for each sport are also available in the reports directory.',
                title='SCRAPING AND PROCESSING COMPLETED SUCCESSFULLY',
                style='bold green',
            )
        )
        return True

    def show_help(self) -> bool:
        """Print the command table."""
        table = Table(title='Available commands')
        table.add_column('Command', style='cyan')
        table.add_column('Description')
        for name, description in COMMAND_HELP.items():
            table.add_row(name, description)
        self.console.print(table)
        return True

    def interactive(self) -> int:
        """Prompt for commands until 'exit' or end of input.

        Returns:
            0 if every command succeeded, 1 otherwise.

        """
        self.show_help()
        exit_code = 0
        while True:
            try:
                command = Prompt.ask('[step]Command[/step]', choices=list(COMMAND_HELP), console=self.console)
            except (EOFError, KeyboardInterrupt):
                self.console.print()
                break
            if command == 'exit':
                break
            if not self.dispatch(command):
                exit_code = 1
        return exit_code


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with one subcommand per command."""
    parser = argparse.ArgumentParser(
        prog='salesianos',
        description='Scrape Juegos Nacionales Salesianos 2025 results and generate reports',
    )
    subparsers = parser.add_subparsers(dest='command', metavar='{scrape,process,both,help,exit}')
    for name, description in COMMAND_HELP.items():
        subparsers.add_parser(name, help=description)
    return parser


def main(argv: list[str] | None = None, config: ScraperConfig | None = None) -> int:
    """Main entry point.

    Args:
        argv: Command line arguments. Defaults to sys.argv[1:].
        config: Scraper configuration. Defaults to the compiled-in settings.

    Returns:
        Process exit code: 0 on success, 1 on failure.

    """
    args = build_parser().parse_args(argv)
    app = ScraperApp(config)

    if args.command == 'exit':
        return 0
    if args.command == 'help':
        app.show_help()
        return 0

    logfire.configure(send_to_logfire='if-token-present', console=False, service_name='salesianos')
    try:
        log_file = setup_local_logging(app.config.logs_dir, level='INFO')
    except SalesianosError as e:
        app.console.print(f'[danger]Cannot prepare output directory: {e}[/danger]')
        return 1
    logger.info(f'Logging to {log_file}')

    if args.command is None:
        return app.interactive()
    return 0 if app.dispatch(args.command) else 1


def run():
    """Console script entry point."""
    sys.exit(main())


if __name__ == '__main__':
    run()

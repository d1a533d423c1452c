# recordtable/src/recordtable/core/cli_app.py
"""
Command-line application: render a YAML file of records as a table or CSV.
"""

import sys
import logging
from argparse import ArgumentParser, Namespace
from pathlib import Path
from typing import List, Optional

from rich.console import Console
from rich.markup import escape
from rich.theme import Theme

from .config import OUTPUT_FORMATS, TableConfig, load_config
from .exceptions import ConfigError, RecordLoadError, TableError
from ..output import generate_csv, generate_table
from ..records import field_names, load_records

logger = logging.getLogger(__name__)

custom_theme = Theme({
    "info": "cyan",
    "warning": "yellow",
    "error": "bold red",
})


class CLIApplication:
    """Main CLI application coordinator."""

    def __init__(self):
        self.config: Optional[TableConfig] = None
        self.console = Console(stderr=True, theme=custom_theme)

    def create_parser(self) -> ArgumentParser:
        """Create the argument parser."""
        from argparse import RawDescriptionHelpFormatter
        from .. import __version__

        parser = ArgumentParser(
            prog='recordtable',
            description='Render a YAML list of records as an aligned table or CSV',
            formatter_class=RawDescriptionHelpFormatter,
            epilog=self._get_examples_text()
        )

        parser.add_argument(
            'file',
            help="YAML file with records ('-' reads standard input)"
        )

        parser.add_argument(
            '--version',
            action='version',
            version=f'%(prog)s {__version__}'
        )

        parser.add_argument(
            '--fields', '-f',
            help='Comma-separated fields to show, in order (default: all)'
        )

        parser.add_argument(
            '--format',
            choices=OUTPUT_FORMATS,
            help='Override default output format'
        )

        parser.add_argument(
            '--strict',
            action='store_true',
            help='Fail on selected fields the records do not have'
        )

        parser.add_argument(
            '--config',
            type=Path,
            help='Path to configuration file'
        )

        parser.add_argument(
            '--no-color',
            action='store_true',
            help='Disable colored messages'
        )

        parser.add_argument(
            '--verbose', '-v',
            action='store_true',
            help='Enable verbose output'
        )

        parser.add_argument(
            '--debug',
            action='store_true',
            help='Enable debug mode'
        )

        return parser

    def run(self, args: Optional[List[str]] = None) -> int:
        """
        Run the CLI application.

        Returns:
            Exit code (0 for success, non-zero for error)
        """
        parser = self.create_parser()
        parsed_args = parser.parse_args(args)

        try:
            self._load_configuration(parsed_args)
            self._setup_logging()

            issues = self.config.validate()
            if issues:
                raise ConfigError("; ".join(issues))

            return self._render(parsed_args)

        except KeyboardInterrupt:
            self.console.print("[warning]Operation cancelled by user[/warning]")
            return 130  # Standard exit code for Ctrl+C
        except TableError as e:
            self.console.print(f"[error]Error:[/error] {escape(str(e))}")
            if self.config is not None and self.config.debug_mode:
                self.console.print_exception()
            return e.exit_code
        except Exception as e:
            self.console.print(f"[error]Unexpected error:[/error] {escape(str(e))}")
            if self.config is not None and self.config.debug_mode:
                self.console.print_exception()
            return 1

    def _load_configuration(self, args: Namespace):
        """Load configuration from file and command line."""
        if args.config:
            self.config = TableConfig.load_from_file(args.config)
        else:
            self.config = load_config()

        overrides = {}
        if args.format:
            overrides['default_output_format'] = args.format
        if args.no_color:
            overrides['color_output'] = False
        if args.verbose:
            overrides['verbose_logging'] = True
        if args.debug:
            overrides['debug_mode'] = True

        if overrides:
            self.config = self.config.merge_with_args(**overrides)

        self.console.no_color = not self.config.color_output

    def _setup_logging(self):
        """Send log records to standard error at the configured level."""
        if self.config.debug_mode:
            level = logging.DEBUG
        elif self.config.verbose_logging:
            level = logging.INFO
        else:
            level = logging.WARNING
        logging.basicConfig(
            level=level,
            stream=sys.stderr,
            format='%(levelname)s %(name)s: %(message)s'
        )

    def _read_input(self, file_arg: str) -> str:
        """Read the raw input document."""
        if file_arg == '-':
            return sys.stdin.read()
        try:
            return Path(file_arg).read_text(encoding='utf-8')
        except OSError as e:
            raise RecordLoadError(file_arg, e.strerror or str(e))

    def _render(self, args: Namespace) -> int:
        """Load records and print them in the selected format."""
        source = '<stdin>' if args.file == '-' else args.file
        records = load_records(self._read_input(args.file), source)

        if args.fields:
            fields = [f.strip() for f in args.fields.split(',') if f.strip()]
        else:
            fields = field_names(records)

        logger.info("Rendering %d records as %s", len(records), self.config.default_output_format)

        if self.config.default_output_format == 'csv':
            generate_csv(records, fields, self.config, strict=args.strict)
        else:
            generate_table(records, fields, self.config, strict=args.strict)

        return 0

    def _get_examples_text(self) -> str:
        """Get examples text for help."""
        return """
Examples:
  # Aligned table of every field
  recordtable users.yaml

  # Selected columns as CSV
  recordtable users.yaml --fields name,age --format csv

  # Read from a pipe
  cat users.yaml | recordtable -

Configuration:
  Configuration file: ~/.recordtable/config.yaml
  Environment variables: RECORDTABLE_FORMAT, RECORDTABLE_CSV_DELIMITER, RECORDTABLE_DEBUG
"""


def main():
    """Main entry point for the CLI application."""
    app = CLIApplication()
    exit_code = app.run()
    sys.exit(exit_code)

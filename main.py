#!/usr/bin/env python3
"""Account Statement PDF Generator.

Reads a JSON account statement, renders it as an A4 PDF and opens the
result in the system's default viewer.

Usage:
    python main.py
    python main.py --input statement.json --output statement.pdf --logo logo.png
    python main.py --no-open
"""

import argparse
import sys
from typing import List, Optional

from src.config.settings import Settings
from src.pdf_generator.finalizer import PDFFinalizer, ViewerLauncher
from src.pdf_generator.renderer import StatementRenderer
from src.statement.loader import StatementLoader
from src.utils.exceptions import StatementError
from src.utils.logger import get_logger, setup_logger


class AccountStatementGenerator:
    """Runs the load, render, write and open pipeline once."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        launcher: Optional[ViewerLauncher] = None
    ) -> None:
        """Initialize the generator.

        Args:
            settings: Generator settings. Read from the environment when None.
            launcher: Viewer launcher. Detects the host platform when None.
        """
        self.settings = settings if settings is not None else Settings.from_env()
        self.logger = get_logger("src.cli")
        self.loader = StatementLoader()
        self.finalizer = PDFFinalizer()
        self.launcher = launcher if launcher is not None else ViewerLauncher()

    def generate(self) -> str:
        """Generate the PDF and optionally open it.

        Returns:
            Path of the written PDF.

        Raises:
            StatementError: On any fatal condition.
        """
        settings = self.settings
        if not settings.validate():
            raise StatementError(
                "Invalid settings: input, output and logo paths and the currency symbol must be non-empty"
            )

        # An unsupported platform must fail before anything is written
        if settings.open_viewer:
            self.launcher.check_supported()

        statement = self.loader.load(settings.input_file)

        renderer = StatementRenderer(
            logo_path=settings.logo_file,
            currency_symbol=settings.currency_symbol,
            creation_date=settings.creation_date,
        )
        result = renderer.render(statement)

        output_path = self.finalizer.write(result.pdf, settings.output_file)
        pages = self.finalizer.page_count(output_path)
        self.logger.info(f"PDF created: {output_path} ({pages} page(s))")
        print("PDF generated successfully.")

        if settings.open_viewer:
            self.launcher.launch(output_path)

        return output_path


def parse_arguments(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Render a JSON account statement as a PDF document",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    # Use account_statement.json and logo.png from the current directory
    python main.py

    # Custom files, without opening a viewer
    python main.py --input march.json --output march.pdf --no-open
        """
    )

    parser.add_argument(
        '--input',
        type=str,
        default=None,
        help='Statement JSON file (default: account_statement.json)'
    )
    parser.add_argument(
        '--output',
        type=str,
        default=None,
        help='PDF file to write (default: account_statement.pdf)'
    )
    parser.add_argument(
        '--logo',
        type=str,
        default=None,
        help='Logo image placed on page one (default: logo.png)'
    )
    parser.add_argument(
        '--no-open',
        action='store_true',
        help='Do not open the generated PDF'
    )
    parser.add_argument(
        '--log-level',
        type=str,
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help='Logging level (default: INFO)'
    )

    return parser.parse_args(argv)


def build_settings(args: argparse.Namespace) -> Settings:
    """Environment settings overridden by command line arguments."""
    settings = Settings.from_env()
    settings.update({
        "input_file": args.input,
        "output_file": args.output,
        "logo_file": args.logo,
        "log_level": args.log_level,
    })
    if args.no_open:
        settings.open_viewer = False
    return settings


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point.

    Returns:
        Exit code (0 for success, 1 for error).
    """
    args = parse_arguments(argv)
    settings = build_settings(args)
    setup_logger(
        "src",
        log_file=settings.log_file,
        level=settings.get_log_level(),
        log_format=settings.log_format,
    )
    logger = get_logger("src.cli")

    try:
        AccountStatementGenerator(settings).generate()
        return 0

    except StatementError as e:
        logger.error(str(e))
        return 1
    except KeyboardInterrupt:
        print("\nOperation cancelled by user")
        return 130
    except Exception as e:
        logger.exception(f"Unexpected error: {str(e)}")
        return 1


if __name__ == "__main__":
    sys.exit(main())

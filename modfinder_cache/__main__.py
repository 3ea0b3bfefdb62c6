"""
Main entry point for the modfinder-cache application.
"""

import logging
import sys

import typer
from rich.console import Console

from modfinder_cache.cli.app import app
from modfinder_cache.cli.formatters import format_error_with_suggestions
from modfinder_cache.exceptions import ModCacheError


def main() -> None:
    """Runs the CLI and turns uncaught errors into a panel and exit status 1."""
    console = Console()

    try:
        app()
    except (typer.Exit, typer.Abort):
        pass
    except KeyboardInterrupt:
        console.print("\n[yellow]Interrupted; the cache may be mid-transfer.[/yellow]")
        sys.exit(130)
    except ModCacheError as e:
        console.print(format_error_with_suggestions(e))
        sys.exit(1)
    except Exception as e:
        console.print(format_error_with_suggestions(e, {"type": "Unexpected"}))
        logging.getLogger("modfinder_cache").debug("Full traceback:", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()

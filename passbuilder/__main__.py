"""
CLI interface for passbuilder.
"""

import logging
import sys
import threading
import time

import click

from .builder import PasswordBuilder
from .categories import CharacterCategory, parse_categories
from .exceptions import PassBuilderException
from .utils.validation import (
    get_validation_error_message,
    sanitize_chars,
    unclassifiable_chars,
)

logger = logging.getLogger(__name__)

# Seconds before a copied password is cleared from the clipboard
CLIPBOARD_CLEAR_DELAY = 60


def _parse_chars(option: str, value: str) -> str:
    """Validate an --exclude/--include value, exiting on error."""
    chars = sanitize_chars(value)
    if chars is None:
        click.echo(f"Error: {option}: {get_validation_error_message(value)}", err=True)
        sys.exit(1)
    return chars


def _copy_to_clipboard(value: str) -> None:
    """Copy a password to the clipboard and clear it after a delay."""
    try:
        import pyperclip
        pyperclip.copy(value)
        click.echo("🔐 Password copied to clipboard.", err=True)

        def clear_clipboard() -> None:
            time.sleep(CLIPBOARD_CLEAR_DELAY)
            try:
                pyperclip.copy("")
            except pyperclip.PyperclipException as e:
                logger.debug(f"Could not clear clipboard: {e}")

        clear_thread = threading.Thread(target=clear_clipboard, daemon=True)
        clear_thread.start()

    except ImportError:
        click.echo("pyperclip not installed. Install with: pip install pyperclip", err=True)
    except Exception as e:
        click.echo(f"Could not copy to clipboard: {e}", err=True)


@click.command()
@click.argument("min_length", default=PasswordBuilder.DEFAULT_MIN_LENGTH, type=click.IntRange(min=4))
@click.argument("max_length", default=PasswordBuilder.DEFAULT_MAX_LENGTH, type=click.IntRange(min=4))
@click.argument("count", default=1, type=click.IntRange(min=1))
@click.option(
    "--categories",
    "-c",
    default="all",
    help="Comma-separated categories: digits, upper, lower, special, all (default: all)",
)
@click.option("--xml-safe", is_flag=True, help="Exclude XML-unsafe characters (\" ' < > &)")
@click.option("--exclude", "-x", default="", help="Characters that must never appear")
@click.option("--include", "-i", default="", help="Characters to add to their category")
@click.option("--copy", is_flag=True, help="Copy the last password to the clipboard")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def cli(min_length: int, max_length: int, count: int, categories: str, xml_safe: bool,
        exclude: str, include: str, copy: bool, verbose: bool) -> None:
    """Generate random passwords containing every selected character category."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    try:
        selected: CharacterCategory = parse_categories(categories)
    except ValueError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    exclude = _parse_chars("--exclude", exclude)
    include = _parse_chars("--include", include)

    ignored = unclassifiable_chars(include)
    if ignored:
        click.echo(f"Warning: ignoring characters without a category: {ignored}", err=True)

    password = None
    try:
        with PasswordBuilder(selected, xml_safe, min_length, max_length, exclude, include) as builder:
            for _ in range(count):
                password = builder.next()
                click.echo(password)
    except PassBuilderException as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    if copy and password is not None:
        _copy_to_clipboard(password)


def main() -> None:
    """Main entry point for the CLI application."""
    cli()


if __name__ == "__main__":
    main()

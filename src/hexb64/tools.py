import logging
import sys
from typing import Optional

from rich.console import Console
from rich.markup import escape

from .modules.constants import USAGE
from .modules.errors import ConversionError

console_stderr = Console(stderr=True, emoji=False, highlight=False)


def eprint(*args, **kwargs):
    """Print plain text to stderr, without rich markup or wrapping."""
    console_stderr.print(*args, markup=False, soft_wrap=True, **kwargs)


def strip_whitespace(text):
    """
    Remove every whitespace character, wherever it appears."""
    return "".join(text.split())


def report_error(error: ConversionError, usage: Optional[str] = None):
    """Write ``error`` to stderr, followed by usage text when it asks for it.

    Without a resolved mode there is no single usage to show, so both are
    printed.
    """
    console_stderr.print(f"[red]Error:[/red] {escape(error.message)}", soft_wrap=True)
    if error.show_usage:
        if usage is not None:
            eprint(usage)
        else:
            eprint("\n\n".join(USAGE.values()))


def enable_debug_logging():
    logging.basicConfig(
        level=logging.DEBUG,
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
    )

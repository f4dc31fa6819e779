#!/usr/bin/env python
"""
hexb64 converts between hex and base64 text.

The same program is installed under two names. Run as ``hexb64`` it turns
hex into base64; run as ``b64hex`` it turns base64 (classic or URL-safe)
into hex. The result is printed only after the whole input has been decoded
and re-encoded, so a failed run never writes to stdout.
"""

import logging
import sys
from pathlib import Path
from typing import BinaryIO, List, Optional

import click

from .cli import parse_arguments
from .modules.constants import DEFAULT_PROGRAM_NAME
from .modules.converter import convert
from .modules.data_types import Mode, ParsedArguments
from .modules.errors import ConversionError, InputError
from .modules.input_source import acquire_input
from .tools import enable_debug_logging, report_error, strip_whitespace

logger = logging.getLogger(__name__)


def program_name(argv: List[str]) -> str:
    """Base filename the program was invoked as."""
    if not argv or not argv[0]:
        return DEFAULT_PROGRAM_NAME
    return Path(argv[0]).name


def run(argv: Optional[List[str]] = None, stdin: Optional[BinaryIO] = None) -> int:
    """
    Run one conversion and return the process exit status.

    Args:
        argv: Full argument vector, program name first; defaults to sys.argv
        stdin: Stream to read input from when no data argument is given

    Returns:
        0 on success, 1 on any failure
    """
    if argv is None:
        argv = sys.argv

    mode = None
    try:
        mode = Mode.from_program_name(program_name(argv))

        parsed = parse_arguments(mode, argv[1:])
        if not isinstance(parsed, ParsedArguments):
            return parsed or 0
        if parsed.verbose:
            enable_debug_logging()
        logger.debug(f"Mode resolved: {mode.name}")

        raw = acquire_input(parsed.data, stdin)
        if not strip_whitespace(raw):
            raise InputError("No input data provided.", show_usage=True)
        logger.debug("Input acquired")

        output = convert(raw, parsed.config)
    except ConversionError as e:
        logger.debug(f"Failed with {e.kind} error")
        report_error(e, mode.usage if mode is not None else None)
        return e.exit_code

    click.echo(output)
    logger.debug("Done")
    return 0


def main():
    sys.exit(run())


if __name__ == '__main__':
    main()

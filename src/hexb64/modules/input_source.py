"""
Input acquisition: the data argument if there is one, otherwise all of stdin.

Nothing is validated here; the codecs decide what is acceptable.
"""

import logging
from typing import BinaryIO, Optional

import click

from .errors import InputError

logger = logging.getLogger(__name__)


def read_stream(stream: BinaryIO) -> str:
    """
    Read ``stream`` to end-of-stream and return it as text.

    Bytes that are not valid UTF-8 become U+FFFD, which no codec accepts.

    Raises:
        InputError: if reading fails
    """
    try:
        raw = stream.read()
    except OSError as e:
        raise InputError(f"Failed to read stdin: {e}") from e

    if isinstance(raw, bytes):
        raw = raw.decode("utf-8", errors="replace")
    logger.debug(f"Read {len(raw)} characters from stdin")
    return raw


def acquire_input(data: Optional[str], stdin: Optional[BinaryIO] = None) -> str:
    """
    Return the raw input for this run.

    Args:
        data: The data argument, or None to read standard input
        stdin: Stream to read instead of the process's standard input

    Returns:
        The raw input text
    """
    if data is not None:
        logger.debug("Using data argument as input")
        return data

    if stdin is None:
        stdin = click.get_binary_stream("stdin")
    return read_stream(stdin)

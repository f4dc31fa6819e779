"""
Command-line parsing for the hexb64 and b64hex invocation names.

Each mode has its own click command, so a flag that belongs to the other
mode is simply unknown. Click forwards unknown options into ``tokens``
instead of failing, which lets the data check below reject them with the
whole token the user typed.
"""

import logging
from typing import Optional, Sequence, Union

import click

from . import __version__
from .modules.constants import (B64HEX_NAME, HEXB64_NAME, LOW_FLAG, UP_FLAG,
                                URL_FLAG)
from .modules.data_types import (Alphabet, HexCase, InvocationConfig, Mode,
                                 ParsedArguments)
from .modules.errors import ArgumentError

logger = logging.getLogger(__name__)

CONTEXT_SETTINGS = dict(ignore_unknown_options=True)


def data_from_tokens(tokens: Sequence[str]) -> Optional[str]:
    """Return the single data token, or None when there is none.

    Raises:
        ArgumentError: on a token starting with ``-`` or a second data token
    """
    data = None
    for token in tokens:
        if token.startswith("-") or data is not None:
            raise ArgumentError.misplaced(token)
        data = token
    return data


@click.command(name=HEXB64_NAME, context_settings=CONTEXT_SETTINGS)
@click.option(URL_FLAG, "url", is_flag=True, help="Use URL-safe base64 output")
@click.option("--verbose", is_flag=True, help="Log each conversion step to stderr")
@click.version_option(__version__)
@click.argument("tokens", nargs=-1, type=click.UNPROCESSED)
def hexb64_command(url, verbose, tokens):
    """Convert hex (0x prefix allowed, any case) to base64.

    If no data is given, it is read from stdin."""
    config = InvocationConfig(
        mode=Mode.HEX_TO_BASE64,
        alphabet=Alphabet.URL_SAFE if url else Alphabet.CLASSIC,
    )
    return ParsedArguments(config=config, data=data_from_tokens(tokens), verbose=verbose)


@click.command(name=B64HEX_NAME, context_settings=CONTEXT_SETTINGS)
@click.option(LOW_FLAG, "low", is_flag=True, help="Hex output lowercase (default)")
@click.option(UP_FLAG, "up", is_flag=True, help="Hex output uppercase")
@click.option("--verbose", is_flag=True, help="Log each conversion step to stderr")
@click.version_option(__version__)
@click.argument("tokens", nargs=-1, type=click.UNPROCESSED)
def b64hex_command(low, up, verbose, tokens):
    """Convert base64 (classic or URL-safe) to hex.

    If no data is given, it is read from stdin."""
    if low and up:
        raise ArgumentError(f"Conflicting flags: {LOW_FLAG} and {UP_FLAG}", token=UP_FLAG)
    config = InvocationConfig(
        mode=Mode.BASE64_TO_HEX,
        hex_case=HexCase.UPPER if up else HexCase.LOWER,
    )
    return ParsedArguments(config=config, data=data_from_tokens(tokens), verbose=verbose)


COMMANDS = {
    Mode.HEX_TO_BASE64: hexb64_command,
    Mode.BASE64_TO_HEX: b64hex_command,
}


def parse_arguments(mode: Mode, args: Sequence[str]) -> Union[ParsedArguments, int]:
    """
    Parse the tokens after the program name for ``mode``.

    Args:
        mode: The resolved conversion mode
        args: Command-line tokens, excluding the program name

    Returns:
        The parsed arguments, or an exit status when click handled the
        request itself (``--help``, ``--version``)

    Raises:
        ArgumentError: for any token the mode does not accept
    """
    command = COMMANDS[mode]
    try:
        result = command.main(
            args=list(args), prog_name=mode.value, standalone_mode=False
        )
    except click.UsageError as e:
        raise ArgumentError(e.format_message()) from e

    if isinstance(result, ParsedArguments):
        logger.debug(f"Parsed arguments: {result}")
    return result

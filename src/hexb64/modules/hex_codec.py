"""
Hex text to bytes and back.

Decoding tolerates whitespace anywhere, a single leading ``0x``/``0X`` and
digits in either case. Encoding emits two zero-padded digits per byte with
no prefix or separators.
"""

import logging

from ..tools import strip_whitespace
from .constants import HEX_DIGITS, HEX_PREFIXES
from .data_types import HexCase
from .errors import HexDecodeError

logger = logging.getLogger(__name__)


def normalize_hex(text: str) -> str:
    """
    Drop whitespace, then one leading 0x/0X prefix.

    Args:
        text: Raw hex text

    Returns:
        The bare hex digits
    """
    text = strip_whitespace(text)
    if text.startswith(HEX_PREFIXES):
        text = text[2:]
    return text


def hex_decode(text: str) -> bytes:
    """
    Decode hex text into bytes, most-significant nibble first.

    Args:
        text: Hex text, optionally prefixed and spaced

    Returns:
        The decoded bytes

    Raises:
        HexDecodeError: bare prefix, odd length, or a non-hex character
    """
    digits = normalize_hex(text)

    if not digits and strip_whitespace(text):
        raise HexDecodeError("Empty hex string after 0x prefix")

    if len(digits) % 2 != 0:
        raise HexDecodeError(
            f"Hex string must have even length (got {len(digits)} characters)"
        )

    for position, char in enumerate(digits):
        if char not in HEX_DIGITS:
            raise HexDecodeError(
                f"Invalid hex character {char!r} at position {position}",
                fragment=char,
            )

    logger.debug(f"Decoded {len(digits) // 2} bytes from hex")
    return bytes.fromhex(digits)


def hex_encode(data: bytes, case: HexCase = HexCase.LOWER) -> str:
    """Render ``data`` as hex digits in the requested case."""
    encoded = data.hex()
    if case is HexCase.UPPER:
        return encoded.upper()
    return encoded

"""
Base64 text to bytes and back, in the classic and URL-safe alphabets.

Input is not tagged with its alphabet, so decoding tries each alphabet in
``DECODE_ORDER`` and returns the first success. The special characters of
the two alphabets are disjoint, so text that uses only the shared characters
decodes to the same bytes either way.
"""

import base64
import logging
from typing import Callable, Dict, Optional, Tuple

from ..tools import strip_whitespace
from .constants import BASE64_PAD, URL_SAFE_CHARS
from .data_types import Alphabet
from .errors import Base64DecodeError

logger = logging.getLogger(__name__)

DECODE_ORDER: Tuple[Alphabet, ...] = (Alphabet.CLASSIC, Alphabet.URL_SAFE)


def _check_padding(text: str, alphabet: Alphabet) -> str:
    """Return ``text`` without trailing padding, rejecting padding that does not fit.

    Padding may be missing, but when present it must follow at least one
    character and bring the total length to a multiple of four.
    """
    body = text.rstrip(BASE64_PAD)
    pad_count = len(text) - len(body)
    if pad_count and (not body or pad_count > 2 or (len(body) + pad_count) % 4):
        raise Base64DecodeError("Invalid padding", alphabet=alphabet)
    return body


def _decode_classic(text: str) -> bytes:
    # Strict: every character must be in A-Za-z0-9+/ and padding is required
    _check_padding(text, Alphabet.CLASSIC)
    try:
        return base64.b64decode(text, validate=True)
    except ValueError as e:
        raise Base64DecodeError(str(e), alphabet=Alphabet.CLASSIC) from e


def _decode_url_safe(text: str) -> bytes:
    # Padding is optional here; whatever is missing gets restored
    body = _check_padding(text, Alphabet.URL_SAFE)

    for position, char in enumerate(body):
        if char == BASE64_PAD:
            raise Base64DecodeError(
                f"Invalid padding at position {position}",
                alphabet=Alphabet.URL_SAFE,
            )
        if char not in URL_SAFE_CHARS:
            raise Base64DecodeError(
                f"Invalid character {char!r} at position {position}",
                alphabet=Alphabet.URL_SAFE,
            )

    if len(body) % 4 == 1:
        raise Base64DecodeError(
            f"Invalid input length {len(body)}", alphabet=Alphabet.URL_SAFE
        )

    padded = body + BASE64_PAD * (-len(body) % 4)
    return base64.urlsafe_b64decode(padded)


_DECODERS: Dict[Alphabet, Callable[[str], bytes]] = {
    Alphabet.CLASSIC: _decode_classic,
    Alphabet.URL_SAFE: _decode_url_safe,
}


def decode_with_alphabet(text: str, alphabet: Alphabet) -> bytes:
    """
    Decode base64 text using a single alphabet.

    Args:
        text: Base64 text; whitespace is ignored
        alphabet: Which alphabet to accept

    Returns:
        The decoded bytes

    Raises:
        Base64DecodeError: if the text is not valid in ``alphabet``
    """
    return _DECODERS[alphabet](strip_whitespace(text))


def b64_decode(text: str) -> bytes:
    """
    Decode base64 text written in either supported alphabet.

    Alphabets are tried in ``DECODE_ORDER``. When none accepts the text, the
    reason reported is the one from the last attempt.

    Raises:
        Base64DecodeError: if no alphabet accepts the text
    """
    last_error: Optional[Base64DecodeError] = None

    for alphabet in DECODE_ORDER:
        try:
            data = decode_with_alphabet(text, alphabet)
        except Base64DecodeError as e:
            logger.debug(f"{alphabet.value} base64 decode failed: {e.reason}")
            last_error = e
            continue
        logger.debug(f"Decoded {len(data)} bytes as {alphabet.value} base64")
        return data

    raise Base64DecodeError(
        f"Failed to decode as classic or URL-safe base64: {last_error.reason}",
        alphabet=last_error.alphabet,
    ) from last_error


def b64_encode(data: bytes, alphabet: Alphabet = Alphabet.CLASSIC) -> str:
    """Encode ``data`` as padded base64 in the requested alphabet."""
    if alphabet is Alphabet.URL_SAFE:
        encoded = base64.urlsafe_b64encode(data)
    else:
        encoded = base64.b64encode(data)
    return encoded.decode("ascii")

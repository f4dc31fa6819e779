"""
Pairs each mode with its decoder and encoder.
"""

import logging

from .base64_codec import b64_decode, b64_encode
from .data_types import InvocationConfig, Mode
from .hex_codec import hex_decode, hex_encode

logger = logging.getLogger(__name__)


def convert(text: str, config: InvocationConfig) -> str:
    """
    Decode ``text`` and re-encode it in the direction ``config`` selects.

    Raises:
        HexDecodeError: in hex to base64 mode, if ``text`` is not valid hex
        Base64DecodeError: in base64 to hex mode, if no alphabet accepts ``text``
    """
    if config.mode is Mode.HEX_TO_BASE64:
        data = hex_decode(text)
        logger.debug("Decoded hex input")
        output = b64_encode(data, config.alphabet)
        logger.debug(f"Encoded as {config.alphabet.value} base64")
    else:
        data = b64_decode(text)
        logger.debug("Decoded base64 input")
        output = hex_encode(data, config.hex_case)
        logger.debug(f"Encoded as {config.hex_case.value}case hex")
    return output

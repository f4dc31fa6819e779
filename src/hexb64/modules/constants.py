"""
Central constants for hexb64.

Invocation names, flags, alphabets and usage text shared across the package.
"""

import string

# Invocation names, one per conversion direction
HEXB64_NAME = "hexb64"
B64HEX_NAME = "b64hex"
DEFAULT_PROGRAM_NAME = HEXB64_NAME  # used when argv is empty

# Flags
URL_FLAG = "-url"
LOW_FLAG = "-low"
UP_FLAG = "-up"

# Hex
HEX_PREFIXES = ("0x", "0X")
HEX_DIGITS = frozenset(string.hexdigits)

# Base64
BASE64_PAD = "="
URL_SAFE_CHARS = frozenset(string.ascii_letters + string.digits + "-_")

# Usage text printed after argument errors
HEXB64_USAGE = (
    "Usage: hexb64 [-url] [data]\n"
    "  -url   Use URL-safe base64 output\n"
    "  data   Hex input (0x prefix allowed, any case). If omitted, read from stdin."
)
B64HEX_USAGE = (
    "Usage: b64hex [-low|-up] [data]\n"
    "  -low   Hex output lowercase (default)\n"
    "  -up    Hex output uppercase\n"
    "  data   Base64 input (classic or URL-safe). If omitted, read from stdin."
)
USAGE = {
    HEXB64_NAME: HEXB64_USAGE,
    B64HEX_NAME: B64HEX_USAGE,
}

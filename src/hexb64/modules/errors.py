"""
Errors raised while converting.

Every error ends the run: the driver reports it once on stderr and exits
with ``exit_code``.
"""

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .data_types import Alphabet


class ConversionError(Exception):
    """Base class for all hexb64 failures."""

    kind = "error"
    exit_code = 1

    def __init__(self, message: str, show_usage: bool = False):
        super().__init__(message)
        self.message = message
        self.show_usage = show_usage


class UnknownModeError(ConversionError):
    """The program was invoked under a name that selects no mode."""

    kind = "unknown mode"

    def __init__(self, name: str):
        super().__init__(
            f"Unknown mode for executable name: {name}\n"
            "Use links or copies named 'b64hex' or 'hexb64'.",
            show_usage=True,
        )
        self.name = name


class ArgumentError(ConversionError):
    """Bad, conflicting or excess command-line tokens."""

    kind = "argument"

    def __init__(self, message: str, token: Optional[str] = None):
        super().__init__(message, show_usage=True)
        self.token = token

    @classmethod
    def misplaced(cls, token: str) -> "ArgumentError":
        return cls(f"Unknown or misplaced argument: {token}", token=token)


class InputError(ConversionError):
    """Input could not be read, or there was none."""

    kind = "input"


class HexDecodeError(ConversionError):
    """Malformed hex text."""

    kind = "hex decode"

    def __init__(self, reason: str, fragment: Optional[str] = None):
        super().__init__(reason)
        self.reason = reason
        self.fragment = fragment


class Base64DecodeError(ConversionError):
    """Text that no supported base64 alphabet accepts."""

    kind = "base64 decode"

    def __init__(self, reason: str, alphabet: Optional["Alphabet"] = None):
        super().__init__(reason)
        self.reason = reason
        self.alphabet = alphabet

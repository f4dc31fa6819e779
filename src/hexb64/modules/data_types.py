"""
Data types for hexb64.

The conversion mode, output options, and the per-run invocation config.
All of them are fixed once the command line has been parsed.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .constants import B64HEX_NAME, HEXB64_NAME, USAGE
from .errors import UnknownModeError


class Mode(Enum):
    """Conversion direction, selected by the program's invocation name."""

    HEX_TO_BASE64 = HEXB64_NAME
    BASE64_TO_HEX = B64HEX_NAME

    @classmethod
    def from_program_name(cls, name: str) -> "Mode":
        """Resolve the mode from the base filename the program ran as.

        The match is exact and case-sensitive.

        Raises:
            UnknownModeError: if ``name`` is neither ``hexb64`` nor ``b64hex``
        """
        try:
            return cls(name)
        except ValueError:
            raise UnknownModeError(name) from None

    @property
    def usage(self) -> str:
        return USAGE[self.value]


class HexCase(Enum):
    """Digit case for hex output."""

    LOWER = "lower"
    UPPER = "upper"


class Alphabet(Enum):
    """Base64 alphabets."""

    CLASSIC = "classic"  # + and /
    URL_SAFE = "URL-safe"  # - and _


@dataclass(frozen=True)
class InvocationConfig:
    """Resolved mode plus output formatting flags."""

    mode: Mode
    alphabet: Alphabet = Alphabet.CLASSIC
    hex_case: HexCase = HexCase.LOWER


@dataclass(frozen=True)
class ParsedArguments:
    """Result of parsing the command line for one mode."""

    config: InvocationConfig
    data: Optional[str] = None
    verbose: bool = False
"""
Value objects passed between the engine, the batch processor and the ledger.
"""

from dataclasses import dataclass, field
from datetime import datetime

from .errors import InvalidOptionError
from .registry import Scheme

DEFAULT_CAESAR_SHIFT = 3
MIN_CAESAR_SHIFT = 1
MAX_CAESAR_SHIFT = 25


@dataclass(frozen=True)
class ConversionOptions:
    """
    The only knobs a scheme consults.

    reverse selects decode instead of encode; caesar_shift is read by the
    Caesar cipher alone and must lie in [1, 25].
    """
    reverse: bool = False
    caesar_shift: int = DEFAULT_CAESAR_SHIFT

    def __post_init__(self):
        if isinstance(self.caesar_shift, bool) or not isinstance(self.caesar_shift, int):
            raise InvalidOptionError("caesar_shift", self.caesar_shift, "an integer")
        if not MIN_CAESAR_SHIFT <= self.caesar_shift <= MAX_CAESAR_SHIFT:
            raise InvalidOptionError(
                "caesar_shift",
                self.caesar_shift,
                f"between {MIN_CAESAR_SHIFT} and {MAX_CAESAR_SHIFT}",
            )

    @classmethod
    def clamped(cls, reverse: bool = False, caesar_shift: int = DEFAULT_CAESAR_SHIFT) -> "ConversionOptions":
        """Build options, pulling an out-of-range shift back into [1, 25]."""
        shift = max(MIN_CAESAR_SHIFT, min(MAX_CAESAR_SHIFT, int(caesar_shift)))
        return cls(reverse=reverse, caesar_shift=shift)


@dataclass(frozen=True)
class ConversionResult:
    """One completed conversion, as stored in the history ledger."""
    input: str
    output: str
    scheme: Scheme
    reverse: bool = False
    timestamp: datetime = field(default_factory=datetime.now)

    @property
    def direction(self) -> str:
        return "decoded" if self.reverse else "encoded"

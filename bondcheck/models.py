from dataclasses import dataclass, field
from typing import Optional, Tuple

from .errors import BondCheckError


@dataclass(frozen=True)
class Bond:
    """A bond number from the user's own list."""
    number: str
    denomination: Optional[float] = None


@dataclass(frozen=True)
class WinningBond:
    """A bond number published as a winner, with its prize label."""
    number: str
    prize: str
    denomination: Optional[float] = None


@dataclass(frozen=True)
class MatchResult:
    bond_number: str
    prize: str
    denomination: Optional[float] = None


@dataclass(frozen=True)
class ReadResult:
    """
    Outcome of reading one uploaded file.

    Either `tokens` holds the extracted numbers (success) or `error` holds the
    reason the read failed. A failed result never carries tokens.
    """
    file_name: str
    tokens: Tuple[str, ...] = field(default_factory=tuple)
    error: Optional[BondCheckError] = None

    @classmethod
    def success(cls, file_name: str, tokens) -> "ReadResult":
        return cls(file_name=file_name, tokens=tuple(tokens))

    @classmethod
    def failure(cls, file_name: str, error: BondCheckError) -> "ReadResult":
        return cls(file_name=file_name, error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

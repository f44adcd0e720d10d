"""
Per-user checking state.

A CheckerSession holds the user's bond list, the winning list and the result
of the last check. One instance lives in each Streamlit session; nothing is
shared between users and nothing is persisted.

Rules:
  - a successful load replaces that list wholesale and clears the matches
  - a failed load changes nothing (list, loaded flag and matches are kept)
  - matches only change through check_matches()
"""

import logging
from typing import Callable, List, Tuple

from . import config
from .errors import BondCheckError, MissingInputs, UnsupportedFormat
from .matcher import find_matches
from .models import Bond, MatchResult, ReadResult, WinningBond
from .readers import read_own_numbers, read_winning_numbers

logger = logging.getLogger(__name__)


class CheckerSession:

    def __init__(self, prize_label: str = config.DEFAULT_PRIZE_LABEL):
        self.prize_label = prize_label
        self.reset()

    def reset(self) -> None:
        self._own_bonds: Tuple[Bond, ...] = ()
        self._winning_bonds: Tuple[WinningBond, ...] = ()
        self._matches: Tuple[MatchResult, ...] = ()
        self._own_loaded = False
        self._winning_loaded = False
        self._checked = False

    # ---------- snapshots ----------
    @property
    def own_bonds(self) -> Tuple[Bond, ...]:
        return self._own_bonds

    @property
    def winning_bonds(self) -> Tuple[WinningBond, ...]:
        return self._winning_bonds

    @property
    def matches(self) -> Tuple[MatchResult, ...]:
        return self._matches

    @property
    def own_loaded(self) -> bool:
        return self._own_loaded

    @property
    def winning_loaded(self) -> bool:
        return self._winning_loaded

    @property
    def has_checked(self) -> bool:
        """True once check_matches() ran against the current lists."""
        return self._checked

    @property
    def ready(self) -> bool:
        return bool(self._own_bonds) and bool(self._winning_bonds)

    # ---------- loading ----------
    def _read(self, reader: Callable, category: str, file_name: str, data: bytes) -> ReadResult:
        try:
            tokens = reader(file_name, data)
        except UnsupportedFormat as e:
            logger.warning("%s upload rejected: %s", category, e)
            return ReadResult.failure(file_name, e)
        except BondCheckError as e:
            logger.error("Error parsing %s file '%s': %s", category, file_name, e, exc_info=True)
            return ReadResult.failure(file_name, e)
        return ReadResult.success(file_name, tokens)

    def _clear_matches(self) -> None:
        self._matches = ()
        self._checked = False

    def load_own_bonds(self, file_name: str, data: bytes) -> ReadResult:
        """Read the user's own bond list (.csv / .xlsx / .xls)."""
        result = self._read(read_own_numbers, "own bonds", file_name, data)
        if not result.ok:
            return result

        self._own_bonds = tuple(Bond(number=n) for n in result.tokens)
        self._own_loaded = True
        self._clear_matches()
        logger.info("Loaded %d own bonds from '%s'", len(self._own_bonds), file_name)
        return result

    def load_winning_bonds(self, file_name: str, data: bytes) -> ReadResult:
        """Read the winning list (.txt / .pdf scanned for numbers, or .csv / .xlsx / .xls)."""
        result = self._read(read_winning_numbers, "winning bonds", file_name, data)
        if not result.ok:
            return result

        self._winning_bonds = tuple(WinningBond(number=n, prize=self.prize_label) for n in result.tokens)
        self._winning_loaded = True
        self._clear_matches()
        logger.info("Loaded %d winning numbers from '%s'", len(self._winning_bonds), file_name)
        return result

    # ---------- matching ----------
    def check_matches(self) -> List[MatchResult]:
        """
        Match the own list against the winning list and keep the result.

        Raises:
            MissingInputs: either list is empty
        """
        if not self.ready:
            raise MissingInputs(
                own_missing=not self._own_bonds,
                winning_missing=not self._winning_bonds,
            )

        found = find_matches(self._own_bonds, self._winning_bonds)
        self._matches = tuple(found)
        self._checked = True
        logger.info(
            "Checked %d own bonds against %d winning numbers: %d matches",
            len(self._own_bonds), len(self._winning_bonds), len(found),
        )
        return found

"""
bondcheck - prize bond checking core.

Reads a personal list of bond numbers and a published list of winning
numbers, then reports which of the personal bonds won.

Modules:
    config   : constants (extensions, number pattern, labels, templates)
    errors   : exception hierarchy
    models   : Bond / WinningBond / MatchResult / ReadResult
    readers  : tabular (csv/xlsx/xls) and pattern (txt/pdf) readers
    matcher  : exact-number matching and preview helpers
    session  : per-user state holding both lists and the match results
    report   : Excel report and sample template builders
"""

from .errors import BondCheckError, UnsupportedFormat, ReadFailure, MissingInputs
from .models import Bond, WinningBond, MatchResult, ReadResult
from .readers import read_tabular, read_text_numbers, extract_six_digit_numbers
from .matcher import find_matches, filter_by_number, summarise
from .session import CheckerSession

__all__ = [
    "BondCheckError",
    "UnsupportedFormat",
    "ReadFailure",
    "MissingInputs",
    "Bond",
    "WinningBond",
    "MatchResult",
    "ReadResult",
    "read_tabular",
    "read_text_numbers",
    "extract_six_digit_numbers",
    "find_matches",
    "filter_by_number",
    "summarise",
    "CheckerSession",
]

from typing import Dict, List, Sequence, TypeVar

from .models import Bond, MatchResult, WinningBond

T = TypeVar("T")


def find_matches(own_bonds: Sequence[Bond], winning_bonds: Sequence[WinningBond]) -> List[MatchResult]:
    """
    Return the user's bonds that appear in the winning list.

    Numbers are compared as exact strings: no trimming, case folding or
    leading-zero handling ("012345" does not match "12345"). Results follow
    the order of `own_bonds`, and a bond listed twice by the user is reported
    twice. The denomination comes from the user's bond, the prize label from
    the winning entry.
    """
    # later duplicates overwrite earlier ones
    winning_map: Dict[str, WinningBond] = {wb.number: wb for wb in winning_bonds}

    found: List[MatchResult] = []
    for bond in own_bonds:
        winning = winning_map.get(bond.number)
        if winning is None:
            continue
        found.append(MatchResult(
            bond_number=bond.number,
            prize=winning.prize,
            denomination=bond.denomination,
        ))
    return found


def filter_by_number(entries: Sequence[T], query: str) -> List[T]:
    """Entries whose number contains `query` (all entries for an empty query)."""
    q = (query or "").strip()
    if not q:
        return list(entries)
    return [e for e in entries if q in e.number]


def summarise(matches: Sequence[MatchResult]) -> str:
    n = len(matches)
    if n == 0:
        return "No winning bonds found. Better luck next time!"
    return f"You have {n} winning bond{'s' if n > 1 else ''}!"

"""
Downloadable files: the Excel results report and the sample input templates.
"""

import io
from typing import Sequence

import pandas as pd

from . import config
from .models import Bond, MatchResult, WinningBond


def matches_frame(matches: Sequence[MatchResult]) -> pd.DataFrame:
    return pd.DataFrame(
        [{"Bond Number": m.bond_number, "Prize": m.prize, "Denomination": m.denomination} for m in matches],
        columns=["Bond Number", "Prize", "Denomination"],
    )


def bonds_frame(bonds: Sequence) -> pd.DataFrame:
    """Preview table (#, number) for either bond list."""
    return pd.DataFrame(
        [{"#": i, "Bond Number": b.number} for i, b in enumerate(bonds, start=1)],
        columns=["#", "Bond Number"],
    )


def build_match_report(
    own_bonds: Sequence[Bond],
    winning_bonds: Sequence[WinningBond],
    matches: Sequence[MatchResult],
) -> bytes:
    """
    Excel workbook with three sheets:
      - Summary   : counts
      - Matches   : one row per match, in the user's list order
      - My_Bonds  : every own bond with a Won flag
    """
    won = {m.bond_number for m in matches}

    summary_rows = [
        {"Metric": "My bonds", "Value": len(own_bonds)},
        {"Metric": "My unique bonds", "Value": len({b.number for b in own_bonds})},
        {"Metric": "Winning numbers", "Value": len(winning_bonds)},
        {"Metric": "Matches", "Value": len(matches)},
    ]
    summary_df = pd.DataFrame(summary_rows)
    own_df = pd.DataFrame(
        [{"Bond Number": b.number, "Won": b.number in won} for b in own_bonds],
        columns=["Bond Number", "Won"],
    )

    xlsx_buffer = io.BytesIO()
    with pd.ExcelWriter(xlsx_buffer, engine="openpyxl") as writer:
        summary_df.to_excel(writer, index=False, sheet_name=config.REPORT_SHEET_SUMMARY)
        matches_frame(matches).to_excel(writer, index=False, sheet_name=config.REPORT_SHEET_MATCHES)
        own_df.to_excel(writer, index=False, sheet_name=config.REPORT_SHEET_MY_BONDS)
    return xlsx_buffer.getvalue()


def sample_bonds_workbook() -> bytes:
    """A one-column workbook of bond numbers, no header row."""
    buf = io.BytesIO()
    with pd.ExcelWriter(buf, engine="openpyxl") as writer:
        pd.DataFrame({"bond": config.SAMPLE_BONDS}).to_excel(
            writer, index=False, header=False, sheet_name="Bonds"
        )
    return buf.getvalue()


def sample_draw_result_text() -> bytes:
    return config.SAMPLE_DRAW_RESULT.encode("utf-8")

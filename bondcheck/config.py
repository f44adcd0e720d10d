import re

# =============================================================
# CONFIG (accepted inputs, number format, labels)
# =============================================================
TABULAR_EXTENSIONS = ("csv", "xlsx", "xls")
TEXT_EXTENSIONS = ("txt", "pdf")

OWN_BOND_EXTENSIONS = TABULAR_EXTENSIONS
WINNING_BOND_EXTENSIONS = TEXT_EXTENSIONS + TABULAR_EXTENSIONS

# Exactly six ASCII digits with a word boundary on both sides.
# "1234567" and "A123456" do not match; "No.123456," does.
SIX_DIGIT_NUMBER = re.compile(r"\b\d{6}\b", re.ASCII)

DEFAULT_PRIZE_LABEL = "Prize Winner"
TEXT_ENCODING = "utf-8-sig"   # strips a leading BOM
CSV_DELIMITER = ","

# =============================================================
# REPORT LAYOUT
# =============================================================
REPORT_SHEET_SUMMARY = "Summary"
REPORT_SHEET_MATCHES = "Matches"
REPORT_SHEET_MY_BONDS = "My_Bonds"
REPORT_FILE_NAME = "prize_bond_results.xlsx"

# =============================================================
# SAMPLE TEMPLATES
# =============================================================
SAMPLE_BONDS_FILE_NAME = "sample_bonds.xlsx"
SAMPLE_DRAW_FILE_NAME = "DRAW-RESULT.txt"

SAMPLE_BONDS = [
    "123456", "234567", "345678", "456789", "567890",
    "678901", "789012", "890123", "901234", "999999",
]

SAMPLE_DRAW_RESULT = """\
LIST OF PRIZE BONDS DRAW
Held at: City Office        Draw No. 42        Denomination: Rs. 750/-

First Prize of Rs. 1,500,000/-
123456

Second Prize of Rs. 500,000/- Each
345678    999999    054321

Third Prize of Rs. 9,300/- Each
111222  222333  333444  444555  555666  666777
777888  888999  999000  000111  123123  321321
"""

"""
File readers for bond lists.

Two kinds of input are understood:

Tabular files (.csv, .xlsx, .xls)
    Every populated cell is a token. Cells are flattened row by row
    (first sheet only for workbooks, no header row), trimmed, and empty
    cells are dropped. Nothing is validated: a cell holding "Serial No"
    is returned like any other token.

Text documents (.txt, .pdf)
    The whole text is scanned for standalone 6-digit numbers. Each distinct
    number is returned once, in the order it first appears.

All readers take the file name (for the extension) and the raw bytes, and
either return a tuple of strings or raise UnsupportedFormat / ReadFailure.
"""

import csv
import io
import logging
from typing import Iterable, List, Tuple

import fitz  # PyMuPDF
import pandas as pd

from . import config
from .errors import ReadFailure, UnsupportedFormat

logger = logging.getLogger(__name__)


# =============================================================
# HELPERS
# =============================================================
def file_extension(file_name: str) -> str:
    """Lowercased extension without the dot ('' when there is none)."""
    name = str(file_name or "")
    if "." not in name:
        return ""
    return name.rsplit(".", 1)[-1].strip().lower()


def decode_text(data: bytes) -> str:
    return data.decode(config.TEXT_ENCODING, errors="replace")


def cell_text(val) -> str:
    """
    Render a spreadsheet cell as text.

    Whole-number floats lose the trailing '.0' so a bond stored as a number
    (123456.0) comes back as '123456'.
    """
    if isinstance(val, bool):
        return str(val).lower()
    if isinstance(val, float) and val.is_integer():
        return str(int(val))
    return str(val)


def keep_non_empty(values: Iterable) -> List[str]:
    """Trim every value and drop the ones that end up empty."""
    out = []
    for val in values:
        if val is None:
            continue
        s = cell_text(val).strip()
        if s:
            out.append(s)
    return out


# =============================================================
# TABULAR READER
# =============================================================
def _csv_cells(data: bytes) -> List[str]:
    text = decode_text(data)
    reader = csv.reader(io.StringIO(text, newline=""), delimiter=config.CSV_DELIMITER)
    cells: List[str] = []
    for row in reader:
        cells.extend(row)
    return cells


def _workbook_cells(data: bytes) -> List:
    # header=None: the first row is data, not column names.
    # No NA parsing: "NA", "None", "#N/A" are tokens like any other text.
    # No engine: pandas picks openpyxl or xlrd from the bytes, not the name.
    df = pd.read_excel(
        io.BytesIO(data),
        sheet_name=0,
        header=None,
        dtype=object,
        keep_default_na=False,
        na_filter=False,
    )
    cells = []
    for row in df.itertuples(index=False, name=None):
        for val in row:
            if pd.isna(val):
                continue
            cells.append(val)
    return cells


def read_tabular(file_name: str, data: bytes) -> Tuple[str, ...]:
    """
    Read a CSV or Excel file into a flat, row-major tuple of trimmed tokens.

    Raises:
        UnsupportedFormat: extension is not csv / xlsx / xls
        ReadFailure: the bytes cannot be parsed as that format
    """
    ext = file_extension(file_name)
    if ext not in config.TABULAR_EXTENSIONS:
        raise UnsupportedFormat(file_name, config.TABULAR_EXTENSIONS)

    try:
        if ext == "csv":
            cells = _csv_cells(data)
        else:
            cells = _workbook_cells(data)
    except Exception as e:
        raise ReadFailure(file_name, f"Unable to read {ext.upper()} file") from e

    tokens = tuple(keep_non_empty(cells))
    logger.debug("read_tabular(%s): %d cells -> %d tokens", file_name, len(cells), len(tokens))
    return tokens


# =============================================================
# PATTERN READER
# =============================================================
def extract_six_digit_numbers(text: str) -> Tuple[str, ...]:
    """
    Return every distinct standalone 6-digit number in `text`, in order of
    first appearance. Longer or shorter digit runs are ignored, never cut.
    """
    if not text:
        return ()
    seen = {}
    for m in config.SIX_DIGIT_NUMBER.finditer(text):
        seen.setdefault(m.group(0), None)
    return tuple(seen)


def pdf_text(data: bytes) -> str:
    """Plain text of every page of a PDF, pages separated by newlines."""
    with fitz.open(stream=data, filetype="pdf") as doc:
        return "\n".join(page.get_text("text") for page in doc)


def read_text_numbers(file_name: str, data: bytes) -> Tuple[str, ...]:
    """
    Scan a .txt or .pdf document for 6-digit numbers.

    Raises:
        UnsupportedFormat: extension is not txt / pdf
        ReadFailure: the document cannot be opened or decoded
    """
    ext = file_extension(file_name)
    if ext not in config.TEXT_EXTENSIONS:
        raise UnsupportedFormat(file_name, config.TEXT_EXTENSIONS)

    try:
        text = pdf_text(data) if ext == "pdf" else decode_text(data)
    except Exception as e:
        raise ReadFailure(file_name, f"Unable to read {ext.upper()} file") from e

    numbers = extract_six_digit_numbers(text)
    logger.debug("read_text_numbers(%s): %d chars -> %d numbers", file_name, len(text), len(numbers))
    return numbers


# =============================================================
# DISPATCH PER CATEGORY
# =============================================================
def read_own_numbers(file_name: str, data: bytes) -> Tuple[str, ...]:
    """Own bond list: spreadsheets and CSV only."""
    ext = file_extension(file_name)
    if ext not in config.OWN_BOND_EXTENSIONS:
        raise UnsupportedFormat(file_name, config.OWN_BOND_EXTENSIONS)
    return read_tabular(file_name, data)


def read_winning_numbers(file_name: str, data: bytes) -> Tuple[str, ...]:
    """Winning list: text documents are scanned, tabular files are read cell by cell."""
    ext = file_extension(file_name)
    if ext not in config.WINNING_BOND_EXTENSIONS:
        raise UnsupportedFormat(file_name, config.WINNING_BOND_EXTENSIONS)
    if ext in config.TEXT_EXTENSIONS:
        return read_text_numbers(file_name, data)
    return read_tabular(file_name, data)

"""
Exceptions raised by the readers and the session.

Readers raise UnsupportedFormat / ReadFailure; the session converts them into
a failed ReadResult so callers never see a half-loaded list.
"""


class BondCheckError(Exception):
    """Base class for all bondcheck errors."""


class UnsupportedFormat(BondCheckError):
    """File extension is not accepted by the reader that was asked to read it."""

    def __init__(self, file_name: str, accepted=()):
        self.file_name = file_name
        self.accepted = tuple(accepted)
        msg = f"Unsupported file format: '{file_name}'"
        if self.accepted:
            msg += f" (expected one of: {', '.join('.' + e for e in self.accepted)})"
        super().__init__(msg)


class ReadFailure(BondCheckError):
    """File could not be read or its contents could not be parsed."""

    def __init__(self, file_name: str, reason: str = "File reading failed"):
        self.file_name = file_name
        self.reason = reason
        super().__init__(f"{reason}: '{file_name}'")


class MissingInputs(BondCheckError):
    """A check was requested before both lists were loaded."""

    def __init__(self, own_missing: bool, winning_missing: bool):
        self.own_missing = own_missing
        self.winning_missing = winning_missing
        super().__init__("Please upload both files first!")

class ProshiftersError(Exception):
    """Base class for errors raised while reading or tallying a schedule."""


class ScheduleFormatError(ProshiftersError, ValueError):
    """The schedule grid does not have the expected header rows or metadata columns."""


class SheetNotFoundError(ProshiftersError, KeyError):
    """The workbook does not contain the requested sheet."""

    def __init__(self, sheet_name: str, input_file: str):
        super().__init__(sheet_name)
        self.sheet_name = sheet_name
        self.input_file = input_file

    def __str__(self):
        return f"'{self.sheet_name}' sheet not found in {self.input_file}"

"""
Exceptions raised while splitting a workbook.
"""


class SplitError(ValueError):
    """Base class for all failures of a split operation."""


class WorkbookValidationError(SplitError):
    """Raised when the source workbook or split parameters are unusable."""


class ShortRowError(SplitError):
    """Raised when a row does not reach the split column and short rows are fatal."""


class CellConversionError(SplitError):
    """Raised when a cell value cannot be rendered as text."""


class SheetCreateError(SplitError):
    """Raised when an output sheet cannot be created for a group key."""


class RowWriteError(SplitError):
    """Raised when a converted row cannot be written to its output sheet."""

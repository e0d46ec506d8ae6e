"""Parameters that control label placement and field separation in CSV documents."""

from __future__ import annotations

import os
from dataclasses import dataclass, field

_PLATFORM_HAS_CR = os.name == "nt"


@dataclass(frozen=True)
class LabelParams:
    """Which row holds the column labels and which column holds the row labels.

    ``column_name_idx`` is the zero-based row index of the column labels;
    -1 disables lookup of columns by name and exposes every row as data.
    ``row_name_idx`` is the zero-based column index of the row labels;
    -1 disables lookup of rows by name and exposes every column as data.
    """

    column_name_idx: int = 0
    row_name_idx: int = 0

    def __post_init__(self) -> None:
        for name in ("column_name_idx", "row_name_idx"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise TypeError(f"{name} must be an int, got {type(value).__name__}")


@dataclass(frozen=True)
class SeparatorParams:
    """How fields are separated and how lines end.

    ``separator`` is the single column separator character, ``trim`` strips
    leading and trailing whitespace from cells that are read, and ``has_cr``
    selects CR/LF line endings instead of LF for new documents (defaulting to
    the platform convention).
    """

    separator: str = ","
    trim: bool = False
    has_cr: bool = field(default=_PLATFORM_HAS_CR)

    def __post_init__(self) -> None:
        if not isinstance(self.separator, str) or len(self.separator) != 1:
            raise ValueError(
                f"separator must be a single character, got {self.separator!r}"
            )
"""Reading and writing the CSV text format, including UTF-16 detection."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Sequence

__all__ = [
    "ParsedCsv",
    "UTF8",
    "UTF16_LE",
    "UTF16_BE",
    "unquote_cell",
    "quote_cell",
    "parse_csv",
    "format_csv",
    "decode_csv_bytes",
    "encode_csv_text",
]

UTF8 = "utf-8"
UTF16_LE = "utf-16-le"
UTF16_BE = "utf-16-be"

_BOM_UTF16_LE = b"\xff\xfe"
_BOM_UTF16_BE = b"\xfe\xff"
_BOMS = {UTF16_LE: _BOM_UTF16_LE, UTF16_BE: _BOM_UTF16_BE}

_SPACE = " \t\n\v\f\r"
_QUOTE = '"'


@dataclass
class ParsedCsv:
    """Rows of cell text read from CSV, and whether the text used CR/LF line ends."""

    rows: list[list[str]] = field(default_factory=list)
    has_cr: bool = False


def _check_separator(separator: str) -> None:
    if not isinstance(separator, str) or len(separator) != 1:
        raise ValueError(f"separator must be a single character, got {separator!r}")


def unquote_cell(cell: str) -> str:
    """Strip surrounding quotes from ``cell`` and collapse doubled quotes.

    Cells shorter than two characters are returned unchanged.
    """
    if len(cell) < 2:
        return cell
    if cell[0] == _QUOTE and cell[-1] == _QUOTE:
        cell = cell[1:-1]
    return cell.replace('""', '"')


def quote_cell(cell: str, separator: str = ",") -> str:
    """Return ``cell`` as CSV text, quoted when it holds a separator or quote."""
    _check_separator(separator)
    if separator not in cell and _QUOTE not in cell:
        return cell
    return _QUOTE + cell.replace(_QUOTE, '""') + _QUOTE


def parse_csv(text: str, separator: str = ",", trim: bool = False) -> ParsedCsv:
    """Split CSV ``text`` into rows of cells.

    A quote toggles quoting only at the start of a cell or inside a cell that
    began with a quote. Carriage returns are dropped and counted; a line feed
    always ends the row, even inside quotes. CR/LF line ends are assumed when
    more than half of the line feeds come with a carriage return.
    """
    _check_separator(separator)
    rows: list[list[str]] = []
    row: list[str] = []
    cell: list[str] = []
    quoted = False
    cr = lf = 0

    def finish_cell() -> None:
        value = unquote_cell("".join(cell))
        row.append(value.strip(_SPACE) if trim else value)
        cell.clear()

    for ch in text:
        if ch == _QUOTE:
            if not cell or cell[0] == _QUOTE:
                quoted = not quoted
            cell.append(ch)
        elif ch == separator:
            if quoted:
                cell.append(ch)
            else:
                finish_cell()
        elif ch == "\r":
            cr += 1
        elif ch == "\n":
            lf += 1
            finish_cell()
            rows.append(row)
            row = []
            quoted = False
        else:
            cell.append(ch)

    if cell or row:
        finish_cell()
        rows.append(row)

    return ParsedCsv(rows=rows, has_cr=cr > lf // 2)


def format_csv(
    rows: Iterable[Sequence[str]], separator: str = ",", has_cr: bool = False
) -> str:
    """Join rows of cell text into CSV text, ending every row with a line break."""
    _check_separator(separator)
    line_end = "\r\n" if has_cr else "\n"
    return "".join(
        separator.join(quote_cell(cell, separator) for cell in row) + line_end
        for row in rows
    )


def decode_csv_bytes(data: bytes) -> tuple[str, str]:
    """Decode raw CSV bytes, returning the text and the encoding used.

    A UTF-16 byte order mark selects UTF-16 and is consumed. Anything else is
    read as UTF-8, with undecodable bytes kept so that they write back as is.
    """
    head = data[:2]
    if head == _BOM_UTF16_LE:
        return data[2:].decode(UTF16_LE), UTF16_LE
    if head == _BOM_UTF16_BE:
        return data[2:].decode(UTF16_BE), UTF16_BE
    return data.decode(UTF8, errors="surrogateescape"), UTF8


def encode_csv_text(text: str, encoding: str = UTF8) -> bytes:
    """Encode CSV text for writing; UTF-16 output starts with a byte order mark."""
    if encoding == UTF8:
        return text.encode(UTF8, errors="surrogateescape")
    try:
        bom = _BOMS[encoding]
    except KeyError:
        raise ValueError(f"unsupported encoding: {encoding!r}") from None
    return bom + text.encode(encoding)
"""A CSV document with access to cells, rows and columns by index or label."""

from __future__ import annotations

import dataclasses
import io
import operator
import os
from typing import IO, Any, Iterable, Union

from .converter import Converter, converter_for
from .params import LabelParams, SeparatorParams
from .parser import UTF8, decode_csv_bytes, encode_csv_text, format_csv, parse_csv

__all__ = ["Document"]

Key = Union[int, str]
ConverterSpec = Union[Converter, type]
PathLike = Union[str, bytes, "os.PathLike[str]", "os.PathLike[bytes]"]


def _resize(row: list[str], size: int) -> None:
    """Grow ``row`` with empty cells or cut it down to exactly ``size`` cells."""
    if len(row) > size:
        del row[size:]
    else:
        row.extend([""] * (size - len(row)))


def _value(row: list[str], index: int) -> str:
    if not 0 <= index < len(row):
        raise IndexError(f"column index out of range: {index}")
    return row[index]


class Document:
    """Cells of a CSV document, addressed by zero-based index or by label.

    ``source`` is a path to read, a readable text or binary stream, or
    ``None`` (or an empty path) for a new, empty document. Indices count
    data cells only: the label row and label column are skipped.
    """

    def __init__(
        self,
        source: PathLike | IO[Any] | None = None,
        label_params: LabelParams | None = None,
        separator_params: SeparatorParams | None = None,
        has_default_converter: bool = False,
    ) -> None:
        self._labels = label_params if label_params is not None else LabelParams()
        self._separator = (
            separator_params if separator_params is not None else SeparatorParams()
        )
        self._has_default = has_default_converter
        self._path: PathLike | None = None
        self._encoding = UTF8
        self._rows: list[list[str]] = []
        self._column_map: dict[str, int] | None = None
        self._row_map: dict[str, int] | None = None

        if source is None:
            return
        if hasattr(source, "read"):
            self._read_stream(source)
        elif os.fspath(source):
            self.load(source)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(path={self._path!r}, rows={len(self._rows)}, "
            f"label_params={self._labels!r}, separator_params={self._separator!r})"
        )

    @property
    def path(self) -> PathLike | None:
        """The file the document was loaded from or last saved to."""
        return self._path

    @property
    def label_params(self) -> LabelParams:
        return self._labels

    @property
    def separator_params(self) -> SeparatorParams:
        return self._separator

    @property
    def has_default_converter(self) -> bool:
        return self._has_default

    def copy(self) -> Document:
        """Return an independent copy of the document."""
        other = Document(None, self._labels, self._separator, self._has_default)
        other._path = self._path
        other._encoding = self._encoding
        other._rows = [list(row) for row in self._rows]
        return other

    # Reading and writing

    def load(self, path: PathLike) -> None:
        """Replace the document's contents with the CSV file at ``path``."""
        with open(path, "rb") as handle:
            data = handle.read()
        text, encoding = decode_csv_bytes(data)
        self._path = path
        self._encoding = encoding
        self._ingest(text)

    def save(self, target: PathLike | IO[Any] | None = None) -> None:
        """Write the document to a stream, to a new path, or to its own path."""
        text = format_csv(self._rows, self._separator.separator, self._separator.has_cr)
        if target is not None and hasattr(target, "write"):
            if isinstance(target, (io.RawIOBase, io.BufferedIOBase)):
                target.write(encode_csv_text(text, UTF8))
            else:
                target.write(text)
            return
        if target is not None and os.fspath(target):
            self._path = target
        if self._path is None or not os.fspath(self._path):
            raise ValueError("no path to save the document to")
        with open(self._path, "wb") as handle:
            handle.write(encode_csv_text(text, self._encoding))

    def _read_stream(self, stream: IO[Any]) -> None:
        data = stream.read()
        if isinstance(data, (bytes, bytearray)):
            text, _ = decode_csv_bytes(bytes(data))
        else:
            text = data
        self._ingest(text)

    def _ingest(self, text: str) -> None:
        parsed = parse_csv(text, self._separator.separator, self._separator.trim)
        self._rows = parsed.rows
        self._separator = dataclasses.replace(self._separator, has_cr=parsed.has_cr)
        self._changed()

    # Index and label resolution

    @property
    def _col_offset(self) -> int:
        return self._labels.row_name_idx + 1

    @property
    def _row_offset(self) -> int:
        return self._labels.column_name_idx + 1

    def _changed(self) -> None:
        self._column_map = None
        self._row_map = None

    @staticmethod
    def _index(value: Any, what: str) -> int:
        index = operator.index(value)
        if index < 0:
            raise IndexError(f"{what} index out of range: {index}")
        return index

    def _columns_by_name(self) -> dict[str, int]:
        if self._column_map is None:
            cni = self._labels.column_name_idx
            if 0 <= cni < len(self._rows):
                self._column_map = {name: i for i, name in enumerate(self._rows[cni])}
            else:
                self._column_map = {}
        return self._column_map

    def _rows_by_name(self) -> dict[str, int]:
        if self._row_map is None:
            rni = self._labels.row_name_idx
            if rni >= 0:
                self._row_map = {
                    row[rni]: i for i, row in enumerate(self._rows) if len(row) > rni
                }
            else:
                self._row_map = {}
        return self._row_map

    def _column_index(self, column: Key) -> int:
        """Return the position of ``column`` within a stored row."""
        if isinstance(column, str):
            if self._labels.column_name_idx >= 0:
                index = self._columns_by_name().get(column)
                if index is not None and index >= self._col_offset:
                    return index
            raise KeyError(f"column not found: {column}")
        return self._index(column, "column") + self._col_offset

    def _row_index(self, row: Key) -> int:
        """Return the position of ``row`` among the stored rows."""
        if isinstance(row, str):
            if self._labels.row_name_idx >= 0:
                index = self._rows_by_name().get(row)
                if index is not None and index >= self._row_offset:
                    return index
            raise KeyError(f"row not found: {row}")
        return self._index(row, "row") + self._row_offset

    def _row_at(self, index: int) -> list[str]:
        if not 0 <= index < len(self._rows):
            raise IndexError(f"row index out of range: {index}")
        return self._rows[index]

    def _width(self) -> int:
        return len(self._rows[0]) if self._rows else 0

    def _converter(self, spec: ConverterSpec) -> Converter:
        if isinstance(spec, Converter):
            return spec
        return converter_for(spec, self._has_default)

    def _texts(self, values: Iterable[Any], spec: ConverterSpec | None) -> list[str]:
        if spec is not None:
            converter = self._converter(spec)
            return [converter.to_text(value) for value in values]
        return [self._converter_for_value(value).to_text(value) for value in values]

    def _converter_for_value(self, value: Any) -> Converter:
        try:
            return converter_for(type(value), self._has_default)
        except TypeError:
            return Converter(self._has_default)

    # Columns

    def get_column(self, column: Key, converter: ConverterSpec = str) -> list[Any]:
        """Return the data cells of ``column``, converted."""
        col = self._column_index(column)
        conv = self._converter(converter)
        return [conv.to_value(_value(row, col)) for row in self._rows[self._row_offset:]]

    def set_column(
        self, column: Key, values: Iterable[Any], converter: ConverterSpec | None = None
    ) -> None:
        """Write ``values`` into ``column``, growing the document as needed."""
        col = self._column_index(column)
        texts = self._texts(values, converter)
        width = self._width()
        while len(texts) + self._row_offset > len(self._rows):
            self._rows.append([""] * width)
        if col + 1 > width:
            for row in self._rows:
                _resize(row, col + 1 + self._col_offset)
        for index, text in enumerate(texts, start=self._row_offset):
            row = self._rows[index]
            if col >= len(row):
                raise IndexError(f"column index out of range: {col}")
            row[col] = text
        self._changed()

    def remove_column(self, column: Key) -> None:
        """Delete ``column`` from every row."""
        col = self._column_index(column)
        if any(col >= len(row) for row in self._rows):
            raise IndexError(f"column index out of range: {col}")
        for row in self._rows:
            del row[col]
        self._changed()

    def column_count(self) -> int:
        """Number of data columns, judged by the first row."""
        if not self._rows:
            return 0
        return max(len(self._rows[0]) - self._col_offset, 0)

    # Rows

    def get_row(self, row: Key, converter: ConverterSpec = str) -> list[Any]:
        """Return the data cells of ``row``, converted."""
        cells = self._row_at(self._row_index(row))
        conv = self._converter(converter)
        return [conv.to_value(text) for text in cells[self._col_offset:]]

    def set_row(
        self, row: Key, values: Iterable[Any], converter: ConverterSpec | None = None
    ) -> None:
        """Write ``values`` into ``row``, growing the document as needed."""
        index = self._row_index(row)
        texts = self._texts(values, converter)
        width = self._width()
        while index + 1 > len(self._rows):
            self._rows.append([""] * width)
        if len(texts) > width:
            for cells in self._rows:
                _resize(cells, len(texts) + self._col_offset)
        target = self._rows[index]
        for col, text in enumerate(texts, start=self._col_offset):
            if col >= len(target):
                raise IndexError(f"column index out of range: {col}")
            target[col] = text
        self._changed()

    def remove_row(self, row: Key) -> None:
        """Delete ``row`` from the document."""
        index = self._row_index(row)
        self._row_at(index)
        del self._rows[index]
        self._changed()

    def row_count(self) -> int:
        """Number of data rows."""
        return max(len(self._rows) - self._row_offset, 0)

    # Cells

    def get_cell(self, column: Key, row: Key, converter: ConverterSpec = str) -> Any:
        """Return the cell at ``column`` and ``row``, converted."""
        col = self._column_index(column)
        index = self._row_index(row)
        return self._converter(converter).to_value(_value(self._row_at(index), col))

    def set_cell(
        self, column: Key, row: Key, value: Any, converter: ConverterSpec | None = None
    ) -> None:
        """Write ``value`` into the cell at ``column`` and ``row``."""
        col = self._column_index(column)
        index = self._row_index(row)
        (text,) = self._texts([value], converter)
        width = self._width()
        while index + 1 > len(self._rows):
            self._rows.append([""] * width)
        if col + 1 > width:
            for cells in self._rows:
                _resize(cells, col + 1)
        target = self._rows[index]
        if col >= len(target):
            raise IndexError(f"column index out of range: {col}")
        target[col] = text
        self._changed()

    # Labels

    def get_column_name(self, index: int) -> str:
        """Return the label of data column ``index``."""
        col = self._index(index, "column") + self._col_offset
        cni = self._labels.column_name_idx
        if cni < 0:
            raise IndexError(f"column name row index < 0: {cni}")
        return _value(self._row_at(cni), col)

    def set_column_name(self, index: int, name: str) -> None:
        """Set the label of data column ``index``."""
        col = self._index(index, "column") + self._col_offset
        cni = self._labels.column_name_idx
        if cni < 0:
            raise IndexError(f"column name row index < 0: {cni}")
        header = self._row_at(cni)
        _value(header, col)
        header[col] = name
        self._changed()

    def column_names(self) -> list[str]:
        """Return the labels of all data columns."""
        cni = self._labels.column_name_idx
        if cni < 0:
            return []
        return list(self._row_at(cni)[self._col_offset:])

    def get_row_name(self, index: int) -> str:
        """Return the label of data row ``index``."""
        row = self._index(index, "row") + self._row_offset
        rni = self._labels.row_name_idx
        if rni < 0:
            raise IndexError(f"row name column index < 0: {rni}")
        return _value(self._row_at(row), rni)

    def set_row_name(self, index: int, name: str) -> None:
        """Set the label of data row ``index``."""
        row = self._index(index, "row") + self._row_offset
        rni = self._labels.row_name_idx
        if rni < 0:
            raise IndexError(f"row name column index < 0: {rni}")
        cells = self._row_at(row)
        _value(cells, rni)
        cells[rni] = name
        self._changed()

    def row_names(self) -> list[str]:
        """Return the labels of all data rows."""
        rni = self._labels.row_name_idx
        if rni < 0:
            return []
        return [_value(row, rni) for row in self._rows[self._row_offset:]]
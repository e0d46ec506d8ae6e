# csvdoc

A small library for working with CSV files as labelled tables. A
`csvdoc.document.Document` holds the cells of a CSV file in memory. You can
read and change them by column, by row or one cell at a time. You can address
them by zero-based index or by label. Values are converted to and from Python
types as they are read and written.

## Install

```
pip install csvdoc
```

## Reading

By default the first row holds the column labels and the first column holds
the row labels. Indices count data cells only, so the label row and the label
column are skipped:

```python
from csvdoc.document import Document

doc = Document("prices.csv")
close = doc.get_column("Close", float)
volume = doc.get_cell("Volume", "2017-02-22", int)
print(len(close), volume, doc.row_count(), doc.column_count())
```

Columns and rows can also be given by index. `get_cell` accepts any mix of the
two:

```python
doc.get_cell(0, 0, int)
doc.get_cell("A", 0, int)
doc.get_cell(1, "2")          # converter defaults to str
```

`csvdoc.params.LabelParams(column_name_idx, row_name_idx)` selects the row
that holds column labels and the column that holds row labels. Use `-1` for
none:

```python
from csvdoc.params import LabelParams, SeparatorParams

doc = Document("data.csv", LabelParams(-1, -1))
first = doc.get_row(0, str)
```

`SeparatorParams(separator, trim, has_cr)` sets the single-character field
separator and turns on trimming of whitespace around cells as they are read.
`has_cr` chooses CR/LF line endings for new documents. By default it follows
the platform. When a document is read, the line ending is taken from the text:
CR/LF is used when more than half of the line feeds come with a carriage
return.

```python
doc = Document("semi.csv", LabelParams(), SeparatorParams(";"))
```

In place of a path you can pass a readable text or binary stream, or `None`
for an empty document. `load(path)` replaces the contents of an existing
document. `copy()` returns an independent copy.

Labels are available through `get_column_name`, `set_column_name`,
`column_names`, `get_row_name`, `set_row_name` and `row_names`.

## Errors

- A label that is not found raises `KeyError`.
- An index outside the document raises `IndexError`. So does asking for a
  label when `LabelParams` disables labels.
- Text that cannot be converted raises `csvdoc.converter.ConversionError`,
  which is a subclass of `ValueError`.

## Converting values

A converter can be given as a type (`str`, `int`, `float` or `bool`), as a
`Converter` subclass, or as a `Converter` instance. `converter_for(value_type,
has_default)` returns the standard converter for a type. The converters are:

- `StringConverter` keeps the text as it is.
- `IntConverter` reads the leading decimal integer and ignores whatever
  follows it.
- `FloatConverter` reads the leading decimal, scientific, hexadecimal,
  infinity or NaN number. A finite value that is too large is an error.
- `BoolConverter` reads `"true"` as `True` and anything else as `False`. It
  writes `1` or `0`.
- `CharConverter` reads the first character of the cell, or NUL for an empty
  cell.

A converter can return a default value instead of raising:

```python
from csvdoc.converter import IntConverter

zero_for_blanks = IntConverter(True, 0)
ages = doc.get_column("AvgAge", zero_for_blanks)
```

Create a `Document` with `has_default_converter=True` to make the standard
converters fall back to their own defaults: 0 for integers, NaN for floats,
`""` for strings. For your own encoding of values, subclass `Converter` and
override `to_value` and `to_text`:

```python
from csvdoc.converter import Converter

class SexConverter(Converter):
    def to_value(self, text):
        return {"male": 1, "female": 2}.get(text, 0)

    def to_text(self, value):
        return {1: "male", 2: "female"}.get(value, "")
```

When no converter is given to a setter, each value is converted by the
standard converter for its type. Values of any other type are written with
`str`.

## Writing

```python
doc = Document(None, LabelParams(), SeparatorParams(",", False, False))
doc.set_cell(0, 0, 3)
doc.set_cell(1, 0, 9)
doc.set_column_name(0, "A")
doc.set_column_name(1, "B")
doc.set_row_name(0, "1")
doc.save("out.csv")
```

`set_cell`, `set_row` and `set_column` grow the document as needed.
`remove_row` and `remove_column` delete by index or by label.

`save()` accepts any of these targets:

- no argument, which writes back to the path the document was loaded from or
  last saved to;
- a new path;
- a writable stream. Binary streams receive UTF-8.

Cells that contain the separator or a double quote are quoted when written,
with inner quotes doubled. Files that start with a UTF-16 byte order mark
(little- or big-endian) are read as UTF-16 and saved in the same encoding,
with the mark.

## Lower-level parsing

`csvdoc.parser` holds the text format on its own:

- `parse_csv(text, separator, trim)` returns a `ParsedCsv` with `rows` and
  `has_cr`.
- `format_csv(rows, separator, has_cr)` builds CSV text from rows.
- `quote_cell` and `unquote_cell` quote and unquote a single cell.
- `decode_csv_bytes` detects the encoding from the byte order mark and
  decodes the bytes.
- `encode_csv_text` encodes text for writing.

## What it does not do

- There is no command-line tool. This is a library only.
- A line feed always ends a row, so quoted cells cannot span lines.
- A quote in the middle of an unquoted cell is kept as it is.
- Whole documents are held in memory. There is no streaming reader.
# zoomcsv

This package reads the participant report that Zoom exports as CSV. It writes
the report back out grouped by e-mail address. It also provides a small
streaming CSV reader and a table class that you can use on their own.

## Command line

```
zoomcsv participants_export.csv
zoomcsv participants_export.csv -o grouped.csv
zoomcsv participants_export.csv --ungrouped
```

The command works in these steps:

1. It opens the export and skips a UTF-8 or UTF-16 byte-order mark at the start.
2. It looks for the participant table. The table starts at the first line that contains both `name (original name` and `email`. The match ignores ASCII letter case.
3. Everything before that line is ignored.
4. Each remaining line has trailing carriage returns, spaces and tabs removed, and is then parsed as CSV.

From each row the command takes these columns:

- `Name (original name)`
- `Email`
- `Join time`
- `Leave time`
- `Duration (minutes)`
- `Guest`
- `In waiting room`

Values are read like this:

- A duration that is not a whole number counts as 0.
- A guest or waiting-room value that cannot be read counts as false.

By default the command prints the rows to standard output in ascending e-mail order. It writes the same rows to `participants_grouped.csv`, or to the file given with `-o`/`--output`. Lines in that file end with CRLF.

Rows that share an e-mail keep their order from the file. The header is:

```
Name (Original Name),Emails (grouped),Join Time,Leave Time,Duration (Minutes),Guest,In Waiting Room
```

The "Emails (grouped)" column lists every distinct address seen for the row's name, separated by `; `. Guest and waiting-room are shown as `Yes` or `No`. After writing the file the command prints `Created <file>`.

With `--ungrouped` the command prints the participants in file order, each with its own e-mail, under the header
`Name,Email,Join time,Leave time,Duration (minutes),Guest,In waiting room`.
In this mode no file is written and lines are not trimmed.

Exit status:

| Status | Meaning |
| --- | --- |
| 0 | Success |
| 1 | The input cannot be opened |
| 2 | The participant table or one of its columns is missing |
| 3 | The output file cannot be created |

Output fields are written as they are, without CSV quoting. A name that contains a comma therefore shifts the columns of its line.

## Library

```python
from zoomcsv.reader import CsvReader, parse_csv_line
from zoomcsv.table import CsvTable
from zoomcsv.convert import to_int, to_bool
from zoomcsv.bom import skip_bom, strip_bom

parse_csv_line('a,"b,c",d')        # ['a', 'b,c', 'd']

with open("data.csv", newline="") as fh:
    for row in CsvReader(fh):
        print(row)

with open("data.csv", newline="") as fh:
    table = CsvTable(fh)
    print(table.row_count(), table.col_count(), table.header())
    print(table.cell("Email", 0))
```

### Parsing: `parse_csv_line` and `CsvReader`

- A quoted field may contain delimiters, newlines, and `""` for a literal quote.
- Spaces around fields are kept.
- A line that ends in the delimiter gets a trailing empty field.
- The delimiter defaults to `,` and must be a single character; otherwise `ValueError` is raised.
- `CsvReader` drops every carriage return.
- In `CsvReader`, a newline inside a quoted field does not end the row.

### `CsvTable`

`CsvTable` loads a whole stream and uses the first row as column names. It raises these errors:

- `ValueError` for empty input.
- `KeyError` for an unknown column.
- `IndexError` for a row index outside the table.

A row shorter than the header gives empty strings for its missing cells.

### Converting values

`to_int` accepts an optional sign and digits, with optional leading whitespace. The value must fit in a 32-bit signed integer. Anything else raises `ValueError`.

`to_bool` decides by the first character of the text:

- `1`, `T`, `t`, `Y` and `y` mean true.
- `0`, `F`, `f`, `N` and `n` mean false.
- Empty text or any other first character raises `ValueError`.

### Byte-order marks

`skip_bom(stream)` consumes a UTF-8 or UTF-16 byte-order mark at the stream's position and returns it. It works on binary streams, and on text streams where the mark is `\ufeff`. If there is no mark it leaves the stream where it was and returns an empty value.

`strip_bom(data)` removes a leading mark from bytes or text.

### Participant reports: `zoomcsv.participants`

- `Participant` is a dataclass with these fields: `name`, `email`, `join_time`, `leave_time`, `duration`, `guest` and `in_waiting_room`.
- `icontains(haystack, needle)` is a substring test that ignores ASCII letter case.
- `extract_section(lines, trim=True)` returns the participant table text. It raises `ValueError` when no header line is found.
- `load_participants(stream, trim=True)` returns the participants in file order. The stream may be binary or text.
- `group_by_email(participants)` returns `(participant, joined_emails)` pairs in e-mail order.
- `format_row(participant, emails=None)` returns one output line without its line ending.
- `write_grouped(groups, stream, eol="\r\n")` writes the header and then the grouped rows.
- `main(argv=None)` runs the command line tool and returns its exit status.
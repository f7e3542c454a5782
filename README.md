# tysp

`tysp` reads a plain-text spreadsheet and prints it as aligned columns.

## Sheet format

Each newline-terminated line of the file is a row; text after the last
newline is not part of any row. Cells are separated by `|`; a `|` inside a
double-quoted string does not count when the number of columns is worked
out. A cell holds a stream of tokens:

- numbers such as `12`, `-3.5`, `1e3`
- strings in double quotes, such as `"total"`
- references to other cells: `@A1` or `$B2` (column letters, then a
  zero-based row number)
- the operators `+ - * / ( ) =` and the markers `^ v < >`

The first token of a cell decides what it shows: a number, a string, or
nothing at all (for a cell that starts with a reference or an operator).

Every column is at least 10 characters wide and grows to fit its widest
string or number literal. Numbers are printed right-aligned with one decimal
place, strings left-aligned, and empty cells as blanks. Two spaces follow
every cell.

A cell that cannot be read is marked as faulty. Its `error` is a
`CellError` and its `text` holds the label; faulty cells are left out of the
rendered table.

| Label     | Meaning                                        |
|-----------|------------------------------------------------|
| `BOUNDS!` | a reference points outside the sheet           |
| `INFSTR!` | a string is never closed                       |
| `TOOTOK!` | the cell reaches 64 tokens (`MAX_TOKENS`)      |

`CellError.NSENSE` (`NSENSE!`) is defined but no input currently produces it.

## Usage

Install the package, then run:

```
tysp budget.txt
```

Running `tysp` with no file prints a short usage message. If the file cannot
be opened, an error is written to standard error and the exit status is 1.

## Library use

```python
from tysp.sheet import parse_sheet, load_sheet, sheet_dimensions

sheet = parse_sheet('"item" | "cost"\n"rent" | 700\n')
print(sheet.render())
print(sheet[1, 1].number)         # 700.0
print(sheet_dimensions("a|b\n"))  # (1, 1)

sheet = load_sheet("budget.txt")
```

`Sheet` holds `rows`, `cols`, the `cells` (row by row, each a `Cell` with
its `tokens`, `type`, `number` and `text`) and the column `widths`.
Indexing a sheet with `(row, col)` outside its bounds raises `IndexError`.

### Flag parser

`tysp.cxa.parse(argv, flags)` is a small command-line flag parser. `argv`
starts with the program name; `flags` is a list of `Flag(name, id, mode)`,
where `mode` is an `ArgMode` (`NON`, `YES` or `MAY`). Long flags are written
`--name` or `--name=value`, short flags `-n`; an argument may also follow as
the next element. Everything after a lone `--` is collected as positional.

```python
from tysp.cxa import ArgMode, Flag, parse

flags = [Flag("output", "o", ArgMode.YES), Flag("verbose", "v")]
result = parse(["prog", "-o", "out.txt", "--verbose", "--", "rest"], flags)
[(f.flag.name, f.argument) for f in result.found]  # [('output', 'out.txt'), ('verbose', None)]
result.positional                                  # ['rest']
```

On a bad command line `parse` raises `CxaError`, whose `fatal` is a `Fatal`
reason (with a `message`), `index` the position in `argv` and `element` the
offending element.

## What it does not do

`tysp` only lays out the literal contents of cells. It does not evaluate
formulas, follow references, or apply the operators and `^ v < >` markers,
and it has no way to edit or save a sheet. The `tysp` command takes just a
file name and does not use the flag parser.
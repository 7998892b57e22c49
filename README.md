# kitext

Building blocks for a plain-text editor, in pure Python with no third-party
dependencies.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `kitext.numconv`: integer and text conversions. `int_to_str`,
  `ulong_to_str` and `ptr_to_hex` (upper-case hex, no prefix) format numbers;
  `hex_to_ulong` and `octal_to_ulong` read digits until a character below `'0'`
  and wrap to 32 bits; `parse_int` and `parse_ulong` return 0 when the text
  holds any stray character.
- `kitext.strcompare`: code-point comparison that treats NUL or the end of the
  text as the end of a string (`compare`, `compare_n`,
  `compare_ascii_ignore_case`, `starts_with`, `copy_n`), single-character case
  mapping (`char_upper`, `char_lower`, `is_char_lower`) and
  `is_compatible_with_codepage`, which checks that a string survives a round
  trip through an encoding.
- `kitext.search`: Boyer-Moore forward and backward search. `BMSearch` and
  `BMSearchRev` return an index or -1; `NSearch` and `NSearchRev` search from a
  start position and return a `(begin, end)` span or `None`. A `Comparison`
  value (`CASE_SENSITIVE` or `IGNORE_CASE`) chooses how characters match.
- `kitext.gapbuffer`: `GapBuffer`, a random-access sequence with `insert`,
  `insert_many`, `append`, `extend`, `remove`, `clear`, `remove_to_tail`,
  `copy` and `copy_to_tail`. Edits at the same place move no data.
- `kitext.inifile`: `IniFile` reads and writes keys in one section of an INI
  file (`get_int`, `get_bool`, `get_rect`, `get_str`, `get_str_in_section`,
  `get_path` and their `put_` counterparts). The file is read on every lookup
  and rewritten on every change. `encode_path` and `decode_path` escape paths
  that do not fit `CODEPAGE` (cp1252) as `#` followed by `%xxxx` units.
- `kitext.paths`: name helpers that accept both `/` and `\` (`name`, `ext`,
  `ext_all`, `body`, `body_all`, `with_backslash`, `dir_only`, `drive_only`,
  `compact`), file queries (`is_file`, `is_directory`, `exists`,
  `is_read_only`, `last_write_time`) and wildcard listing (`find_files`, a
  sorted generator, and `find_first`).
- `kitext.files`: `FileReader` reads a whole file into memory (missing files
  raise `FileNotFoundError` unless `always=True`); `FileWriter` writes through a
  32 KiB buffer, with `write_byte` and `write_encoded`; `Logger` appends UTF-16
  lines ending in CR LF, starting each file afresh with a byte order mark the
  first time a process writes to it. All three close cleanly as context
  managers (`FileReader` and `FileWriter`).

## Example

```python
from kitext.search import NSearch, Comparison
from kitext.gapbuffer import GapBuffer

finder = NSearch("needle", Comparison.IGNORE_CASE)
print(finder.search("hay NEEDLE hay", 0))   # (4, 10)

buf = GapBuffer(16)
buf.extend("hello")
buf.insert(0, ">")
print("".join(buf))                          # >hello
```

## What the package does not do

kitext offers parts, not an editor. It has no document model (no line store,
text positions, undo or redo), no syntax highlighting, no display or editing
window, and no command to run.
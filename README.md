# coursekit

Three small interactive console tools. Each one can also be used as a library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Huffman coder

`coursekit.huffman` builds a Huffman tree from character frequencies or from a
sample text. It encodes and decodes text as strings of `0` and `1`.

```python
from coursekit.huffman import HuffmanCoder, format_bits

coder = HuffmanCoder()
coder.build_from_text("abracadabra")
bits = coder.encode("abracadabra")
assert coder.decode(bits) == "abracadabra"
print(coder.render_tree())
print(format_bits(bits, 50))
```

The coder's methods:

- `HuffmanCoder.build` takes `(character, frequency)` pairs.
- `codes()` returns the code table.
- `serialize_tree()` returns the leaves in pre-order. Each leaf is one byte for
  the character followed by a little-endian 32-bit frequency.
- `encode_file` and `decode_file` read and write files directly.

The module-level functions `count_frequencies`, `build_tree`, `generate_codes`
and `format_bits` can also be used on their own.

`HuffmanError` is raised in these cases:

- no tree has been built;
- the character set is empty;
- the text holds a character that has no code;
- a bit string does not follow the tree.

To start the interactive menu:

```
coursekit-huffman [--source ToBeTran.txt] [--code CodeFile.txt] [--text TextFile.txt] [--count count.txt]
```

The menu takes these single-letter commands:

- `I`: enter the characters and frequencies.
- `E`: encode `--source` into `--code`.
- `D`: decode `--code` into `--text`.
- `P`: print the digits of `--code`, 50 to a line.
- `T`: print the tree.
- `Z`: build the tree from the character counts of `--count`.
- `Q`: quit.

## Line editor

`coursekit.editor.ActiveArea` holds a window of lines, numbered from a first
line number. It has these operations:

- `insert`: add a line. If the window is full, the first line is dropped and
  returned so that it can be saved.
- `delete` and `replace`: change lines in place.
- `match`: search the lines.
- `pages`: group the numbered lines for display.
- `switch`: write the window to a sink and load the next block from the source.

Line numbers outside the window raise `EditorError`.

```python
from coursekit.editor import ActiveArea

area = ActiveArea(100, 1)
area.fill(iter(["first\n", "second\n"]))
area.insert(2, "middle\n")
print(area.numbered())
```

To start the interactive editor over a text file:

```
coursekit-editor --input input.txt --output output.txt
```

Saved lines are appended to `--output`, each prefixed with its line number.
These are the lines dropped when the window is full and the whole window on
each switch. The editor does not write edited text back to `--input`.

## Employee registry

`coursekit.employees.EmployeeRegistry` stores `Employee` records up to a
capacity. It supports:

- `add`, `remove`, `get` and `update`;
- exact-match `search` by any `Field`;
- stable `sort` by any `Field`.

Adding past the capacity raises `RegistryFullError`. Removing, fetching or
updating an unknown ID raises `EmployeeNotFoundError`.

```python
from coursekit.employees import Employee, EmployeeRegistry, Field, format_employee

registry = EmployeeRegistry(100)
registry.add(Employee(id=1, name="Ann"))
registry.sort(Field.NAME)
for employee in registry.search(Field.ID, "1"):
    print(format_employee(employee))
```

Other helpers:

- `parse_int` reads a leading integer leniently; it returns 0 when there is none.
- `menu_choice(x, y)` maps a point on the 200–600 by 150–620 menu layout to a
  button number.

To start the interactive menu:

```
coursekit-employees [--capacity 100]
```

Enter the action number, 1 to 7: insert, search, delete, sort, show, update or
exit.

## What it does not do

- The employee menu is text only. It has no graphical window and no mouse
  input.
- Employee records are kept in memory only and are lost on exit.
- The Huffman coder has no command to load a saved tree. `serialize_tree` only
  produces bytes.
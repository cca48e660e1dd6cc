# drillkit

drillkit is a library. It holds worked solutions to a set of small
programming exercises, grouped by topic. It also has two helpers for
tools built around those exercises:

- one prints coloured warning and success lines;
- one writes a `rust-project.json` file so that rust-analyzer can
  understand a folder of exercise files.

## Installing

```
pip install drillkit
```

drillkit needs Python 3.11 or later and uses `rich` for its coloured
output.

## Worked solutions: `drillkit.lessons`

Each module below covers one topic. Its functions and classes are
ordinary Python, and you can call them directly.

| module | what it holds |
|--------|---------------|
| `drillkit.lessons.quizzes` | `calculate_price_of_apples`; `transformer` with the `Uppercase`, `Trim` and `Append` commands; `ReportCard` with numeric or letter grades |
| `drillkit.lessons.control_flow` | `sale_price`, `is_even`, `square`, `bigger`, `foo_if_fizz`, `animal_habitat` |
| `drillkit.lessons.baskets` | the `Fruit` enum, `default_basket`, `fill_basket`, `build_scores_table` with `Team`, `maybe_icecream` |
| `drillkit.lessons.errors` | `generate_nametag_text`, `total_cost`, `PositiveNonzeroInteger`, `parse_pos_nonzero` and their exceptions |
| `drillkit.lessons.structs` | `Order` and `create_order_template`; `Package`; `State` with the `ChangeColor`, `Echo`, `Move` and `Quit` messages; `Point`; `Wrapper` |
| `drillkit.lessons.sequences` | `vec_loop`, `vec_map`, `fill_vec`, the `Cons` list, a clone-on-write `Cow` and `abs_all` |
| `drillkit.lessons.traits` | `append_bar`; the `Licensed` mixin with `SomeSoftware` and `OtherSoftware` |
| `drillkit.lessons.progress` | `factorial`, the `Progress` enum and four counting functions |
| `drillkit.lessons.iterators` | `capitalize_first` and friends; `divide` with `DivisionError`, `NotDivisibleError` and `DivideByZeroError` |
| `drillkit.lessons.conversions` | `Person` (`parse`, `from_str`, `default`), `Color.from_values`, `byte_counter`, `char_counter`, `num_sq` |
| `drillkit.lessons.shapes` | `Rectangle` and `longest` |

Errors are raised as exceptions. They are not returned as values.

```python
from drillkit.lessons.control_flow import bigger
from drillkit.lessons.quizzes import Append, Trim, Uppercase, transformer
from drillkit.lessons.conversions import Color, Person, ParsePersonError
from drillkit.lessons.iterators import NotDivisibleError, divide

bigger(32, 42)                                   # 42
transformer([("hello", Uppercase()), (" hi ", Trim()), ("foo", Append(2))])
# ['HELLO', 'hi', 'foobarbar']

Person.from_str("Mark,20")                       # Person(name='Mark', age=20)
Person.parse("Mark,twenty")                      # Person(name='John', age=30)
try:
    Person.from_str("John,32,man")
except ParsePersonError as exc:
    print(exc.kind)                              # 'bad_len'

Color.from_values([183, 65, 14])                 # Color(red=183, green=65, blue=14)

try:
    divide(81, 6)
except NotDivisibleError as exc:
    print(exc.dividend, exc.divisor)             # 81 6
```

## Status lines: `drillkit.ui`

`warn(message)` prints a red line and `success(message)` prints a green
one. Each line starts with an emoji. When the `NO_EMOJI` environment
variable is set, the emoji is replaced with a plain `!` or `✓`.
`no_emoji()` reports whether that variable is set.

```python
from drillkit.ui import success, warn

success("Successfully ran exercises/intro1.rs")
warn("Compiling of exercises/intro2.rs failed!")
```

## rust-analyzer project files: `drillkit.project`

`RustAnalyzerProject` builds the contents of a `rust-project.json` file.
Each `.rs` file becomes one `Crate`, with edition 2021, no dependencies
and the `test` cfg enabled.

- `add_path(path)` adds a crate if the path ends in `.rs`.
- `exercises_to_json(root="./exercises")` adds every `.rs` file below
  `root`.
- `get_sysroot_src()` sets the standard-library source path. It uses
  `RUST_SRC_PATH` if that is set. Otherwise it runs `rustc --print
  sysroot` and appends `lib/rustlib/src/rust/library` to the result.
- `to_json()` returns the compact JSON text.
- `write_to_disk(path="./rust-project.json")` writes that text to a file.

```python
from drillkit.project import RustAnalyzerProject

project = RustAnalyzerProject()
project.get_sysroot_src()
project.exercises_to_json("./exercises")
if project.crates:
    project.write_to_disk()
```

## What drillkit does not do

drillkit does not install a command. It cannot do any of the following:

- read an exercise list;
- compile or run exercise files;
- check whether an exercise is finished;
- watch files for changes;
- show hints;
- reset exercises.

It provides only the library pieces described above.

## Running the tests

```
pip install "drillkit[test]"
pytest
```
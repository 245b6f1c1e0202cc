# rustlings

Support code for a course of small Rust exercises:

- `rustlings.project` writes a `rust-project.json` file so that rust-analyzer
  can treat every exercise file as its own crate.
- `rustlings.ui` prints coloured warning and success lines.
- `rustlings.lessons` holds worked solutions to many of the exercises,
  written as ordinary Python, each with its own tests.

## Installation

```
pip install .
```

For the tests:

```
pip install .[test]
pytest
```

## rust-analyzer project file

```python
from rustlings.project import RustAnalyzerProject

project = RustAnalyzerProject()
project.get_sysroot_src()
project.exercises_to_json("./exercises")
project.write_to_disk("./rust-project.json")
```

- `RustAnalyzerProject.get_sysroot_src()` uses the `RUST_SRC_PATH`
  environment variable when it is set. Otherwise it runs
  `rustc --print sysroot`, prints the toolchain it found, and sets
  `sysroot_src` to `<sysroot>/lib/rustlib/src/rust/library`. It returns the
  path.
- `RustAnalyzerProject.exercises_to_json(root)` walks `root` (default
  `./exercises`) and calls `add_path` on every entry, in sorted order.
- `RustAnalyzerProject.add_path(path)` adds a `Crate` when the path ends in
  `.rs`. A `Crate` has the path as `root_module`, edition `"2021"`, no
  `deps`, and `cfg` set to `["test"]` so that rust-analyzer also looks inside
  test blocks.
- `RustAnalyzerProject.to_json()` returns compact JSON.
  `write_to_disk(path)` writes it (default `./rust-project.json`).

## Status lines

`rustlings.ui.warn(message)` prints a red line and `rustlings.ui.success(message)`
prints a green one. Each returns the plain text it printed. A warning starts
with `⚠️` and a success with `✅`. When the `NO_EMOJI` environment variable is
set, they start with `!` and `✓` instead. `rustlings.ui.no_emoji()` reports
whether that variable is set.

## Lessons

Every module in `rustlings.lessons` is plain Python. Where a function can fail,
it raises an exception instead of returning an error value.

| Module | What it holds |
| --- | --- |
| `basics` | `bigger`, `foo_if_fizz`, `animal_habitat`, `is_even`, `sale_price`, `square`, `is_a_color_word`, `trim_me`, `compose_me`, `replace_me`, `maybe_icecream` (returns `None` after hour 23), `vec_loop` (doubles the list in place), `vec_map` (returns a new doubled list) |
| `person` | `Person`. `default_person()` gives John, aged 30. `person_from(text)` falls back to that default when the input is bad. `parse_person(text)` raises `ParsePersonError`, whose `kind` is a `PersonErrorKind` |
| `color` | `Color`. `color_from_triple` and `color_from_sequence` raise `IntoColorError` (`kind` is `BAD_LEN` or `INT_CONVERSION`) |
| `errors` | `generate_nametag_text`, `total_cost` (5 tokens per item plus a fee of 1), `purchase`, `PositiveNonzeroInteger` (raises `CreationError`), `parse_pos_nonzero` (raises `ParsePosNonzeroError` with `.creation` or `.parse_int` set) |
| `quizzes` | `calculate_price_of_apples`. `Command.uppercase()`, `Command.trim()` and `Command.append(n)` build commands, and `transformer` applies them |
| `iterators` | `capitalize_first`, `capitalize_words_vector`, `capitalize_words_string`. `divide` raises `NotDivisibleError` or `DivideByZeroError`, both subclasses of `DivisionError`. Also `result_with_list`, `list_of_results`, `factorial`, `Progress` and the `count_*` functions |
| `hashmaps` | `fruit_basket`, `Fruit`, `fill_basket`, `Team`, `build_scores_table` |
| `report_card` | `ReportCard` and its `render()` method, which accepts a grade of any printable value |
| `structs` | `Order`, `create_order_template`, `Package` (raises `ValueError` below 10 grams). `State.process` applies `ChangeColor`, `Echo`, `Move` or `Quit` messages |
| `pointers` | The cons list types `Cons` and `Nil`. `Cow` is a sequence that is copied the first time it is changed, and `abs_all` works on it |
| `traits` | `append_bar`, which appends `"Bar"` to a string, or returns a new list with `"Bar"` added at the end |

```python
from rustlings.lessons.person import parse_person, ParsePersonError

parse_person("Mark,20")      # Person(name='Mark', age=20)
try:
    parse_person("Mark")
except ParsePersonError as err:
    print(err.kind)          # PersonErrorKind.BAD_LEN
```

## What this package does not do

This package has no command-line program. It does not read an `info.toml`
exercise list. It does not compile, run, test, or lint exercises. It does not
track which exercises are done, and it has no watch mode, hints, or reset. To
work through the exercises you need `rustc` and your own workflow.
`rustlings.project` only prepares the editor support.
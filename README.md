# rustlings

A small library around a collection of compiler-checked programming
exercises. It provides coloured status lines for the terminal, a generator
for the `rust-project.json` file that lets rust-analyzer understand loose
exercise files, and worked solutions to many of the exercises written as
ordinary Python functions and classes.

## Installation

```
pip install .
```

The only runtime dependency is `rich`.

## Status lines: `rustlings.ui`

- `no_emoji()` returns `True` when the `NO_EMOJI` environment variable is set.
- `warn(message)` prints `message` in red, prefixed with `⚠️ ` (or `!` when
  `NO_EMOJI` is set), and returns the plain text of the printed line.
- `success(message)` does the same in green with the prefix `✅` (or `✓`).

```python
from rustlings.ui import success, warn

success("Successfully ran exercises/intro/intro1.rs")
warn("Compilation of exercises/intro/intro2.rs failed!")
```

## rust-analyzer support: `rustlings.project`

`RustAnalyzerProject` holds the contents of `rust-project.json`: a
`sysroot_src` string and a list of `Crate` entries. Each `Crate` has a
`root_module`, an `edition` (default `"2021"`), empty `deps` and a `cfg` of
`["test"]`, so that rust-analyzer also works inside test blocks.

- `add_path(path)` adds a crate when everything after the first dot in the
  path is `rs`.
- `exercises_to_json(root="exercises")` walks every entry below `root` in
  sorted order and passes it to `add_path`.
- `get_sysroot_src()` runs `rustc --print sysroot`, prints the toolchain it
  found and sets `sysroot_src` to `<toolchain>/lib/rustlib/src/rust/library`.
- `to_dict()` returns the project as plain dictionaries and lists.
- `write_to_disk(path="./rust-project.json")` writes it as compact JSON.

```python
from rustlings.project import RustAnalyzerProject

project = RustAnalyzerProject()
project.get_sysroot_src()
project.exercises_to_json("exercises")
if project.crates:
    project.write_to_disk()
```

## Worked solutions: `rustlings.solutions`

Grouped by topic:

- `quizzes` — `calculate_price_of_apples`, a string `transformer` driven by
  `Uppercase`, `Trim` and `Append` commands, and a generic `ReportCard`.
- `errors` — `generate_nametag_text`, `total_cost` and `buy`,
  `PositiveNonzeroInteger` (raises `CreationError`), and `parse_pos_nonzero`
  (raises `ParsePosNonzeroError`).
- `threads` — `join_all`, `complete_jobs` with a shared `JobStatus`, a
  two-sender channel with `Queue`, `send_tx` and `receive_all`, and
  `offset_sums` over shared numbers.
- `hashmaps` — `default_fruit_basket`, `fill_fruit_basket` over the `Fruit`
  enum, and `build_scores_table` producing `Team` records.
- `iterators` — `capitalize_first` and friends, `divide` with
  `NotDivisibleError` / `DivideByZeroError`, `result_with_list`,
  `list_of_results`, `factorial`, progress counting over `Progress`, a `Cons`
  list, and `abs_all`, which hands back its input unchanged when no value is
  negative.
- `structs` — `ColorClassicStruct`, `UnitLikeStruct`, `Order` and
  `create_order_template`, `Package`, and a `State` driven by `Quit`, `Echo`,
  `Move` and `ChangeColor` messages.
- `traits` — `append_bar` for strings and lists, `Licensed` software and
  `compare_license_types`, `some_func` over `SomeTrait` and `OtherTrait`, and
  a generic `Wrapper`.
- `basics` — `bigger`, `foo_if_fizz`, `is_even`, `sale_price`, `square`,
  string helpers, `maybe_icecream`, vector helpers, `longest`, `fill_vec`,
  `get_char` and `string_uppercase`.

```python
from rustlings.solutions.iterators import factorial
from rustlings.solutions.quizzes import calculate_price_of_apples

calculate_price_of_apples(41)   # 41
factorial(4)                    # 24
```

## What this package does not do

There is no command-line program. The package does not read an exercise
list, compile, run or test exercise files, watch them for changes, show
hints, reset files or track progress. Solutions for the type-conversion
exercises are not included.

## Running the tests

```
pip install ".[test]"
pytest
```
# ferrolings

Worked solutions to a set of small programming exercises, written as plain
Python, together with two helpers for working on the exercises: coloured
status messages for the terminal, and a generator for the
`rust-project.json` file that lets rust-analyzer understand loose exercise
files.

## Requirements

- Python 3.11 or newer
- `rich` (installed automatically)
- `rustc` on your `PATH`, only if you call
  `RustAnalyzerProject.get_sysroot_src()` without `RUST_SRC_PATH` set

## Installation

```
pip install ferrolings
```

## Status messages: `ferrolings.ui`

```python
from ferrolings.ui import warn, success, bold, no_emoji

success("Successfully ran exercises/intro/intro1.rs")   # green, prefixed with ✅
warn("Compiling of exercises/if/if1.rs failed!")        # red, prefixed with ⚠️
```

- `no_emoji()` is true when the environment variable `NO_EMOJI` is set to
  any value; `warn` then uses `!` and `success` uses `✓` instead of emoji.
- `bold(text)` returns a `rich.text.Text` holding `text` in bold.

## Editor support: `ferrolings.project`

`RustAnalyzerProject` holds the contents of `rust-project.json`: a
`sysroot_src` string and a list of `Crate` records (`root_module`,
`edition` of `"2021"`, empty `deps`, and `cfg` of `["test"]` so that test
blocks are analysed too).

```python
from ferrolings.project import RustAnalyzerProject

project = RustAnalyzerProject()
project.get_sysroot_src()          # RUST_SRC_PATH, or derived from `rustc --print sysroot`
project.exercises_to_json(".")     # a crate for every .rs file under ./exercises
if project.crates:
    project.write_to_disk()        # writes ./rust-project.json
```

- `get_sysroot_src()` uses `RUST_SRC_PATH` when it is set. Otherwise it
  runs `rustc --print sysroot`, prints `Determined toolchain: ...`, and sets
  `sysroot_src` to `<toolchain>/lib/rustlib/src/rust/library`.
- `path_to_json(path)` adds a crate when the text after the first dot in
  `path` is exactly `rs`.
- `exercises_to_json(root)` looks through `root/exercises` recursively, in
  sorted order.
- `to_json()` returns the project as compact JSON; `write_to_disk()` writes
  it to `./rust-project.json`.

## Worked lessons: `ferrolings.lessons`

Each module covers one topic. Where an exercise reports failure, the Python
version raises an exception.

| module           | covers                                                                                   |
|------------------|------------------------------------------------------------------------------------------|
| `basics`         | `ring_messages`, `sale_price`, `is_even`, `square`, `bigger`, `foo_if_fizz`, `maybe_icecream`, `Wrapper`, `array_and_vec`, `vec_loop`, `vec_map`, `fill_vec` |
| `strings`        | `current_favorite_color`, `is_a_color_word`, `trim_me`, `compose_me`, `replace_me`, `longest` |
| `structs`        | `ColorClassic`, `ColorTuple`, `UnitLike`, `Order`, `create_order_template`, `Package`, `Rectangle` |
| `enums`          | the messages `ChangeColor`, `Echo`, `Move`, `Quit`, and `State.process`                   |
| `hashmaps`       | `fruit_basket`, `Fruit`, `fill_fruit_basket`, `Team`, `build_scores_table`                |
| `error_handling` | `generate_nametag_text`, `total_cost`, `remaining_tokens`, `PositiveNonzeroInteger`, `CreationError`, `parse_pos_nonzero` |
| `iterators`      | `capitalize_first`, `capitalize_words_vector`, `capitalize_words_string`, `divide`, `result_with_list`, `list_of_results`, `factorial`, `Progress` and the `count_*` functions |
| `traits`         | `append_bar`, `Licensed`, `SomeSoftware`, `OtherSoftware`, `compare_license_types`, `SomeTrait`, `OtherTrait`, `some_func` |
| `smart_pointers` | `Cons`, `create_empty_list`, `create_non_empty_list`, `CopyOnWrite`, `abs_all`            |
| `quizzes`        | `calculate_price_of_apples`, `Command`, `CommandKind`, `transformer`, `ReportCard`        |

A few examples:

```python
from ferrolings.lessons.iterators import divide, factorial, NotDivisibleError
from ferrolings.lessons.quizzes import Command, CommandKind, transformer, calculate_price_of_apples
from ferrolings.lessons.hashmaps import build_scores_table
from ferrolings.lessons.error_handling import parse_pos_nonzero, ParsePosNonzeroError

divide(81, 9)                      # 9
factorial(4)                       # 24
try:
    divide(81, 6)
except NotDivisibleError as err:
    print(err.dividend, err.divisor)   # 81 6

calculate_price_of_apples(41)      # 41
transformer([("hello", Command(CommandKind.UPPERCASE)),
             ("foo", Command(CommandKind.APPEND, 1))])   # ['HELLO', 'foobar']

table = build_scores_table("England,France,4,2\nGermany,England,2,1\n")
table["England"].goals_scored      # 5

try:
    parse_pos_nonzero("-555")
except ParsePosNonzeroError as err:
    print(err.cause)               # number is negative
```

## What this package does not do

There is no command-line program. The package does not compile, run,
test or lint exercise files, does not read an exercise list, does not
track which exercises are done, does not watch files for changes, and
does not print hints or reset exercises. It offers the status messages,
the `rust-project.json` generator and the worked lessons described above.

## Running the tests

```
pip install "ferrolings[test]"
pytest
```
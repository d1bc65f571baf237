# gradekit

Tools for writing point-based grading checks, plus a couple of small data
structures to grade. Pure Python, no third-party dependencies.

## What is inside

- `gradekit.enums`: `AssertionType`, `LogEntryType` and `LeaderboardSortDirection`.
- `gradekit.logs`: `LogEntry` and `Logs`. `Logs` is a labelled, ordered log. Each
  call to `Logs.log()` records the entry and also prints it to standard output.
  A plain string passed to `log()` becomes an Info entry. Entries can be rendered
  with `entries_as_string()`, which can filter by entry type and pad the label,
  with `pass_fail_entries_as_string()`, or as a list of strings with
  `entries_as_json()`.
- `gradekit.tostring`: `to_string`, which renders values for failure messages.
  Lists and tuples become `{"a", "b"}`, booleans become `1` and `0`, and floats
  are shown with six decimals.
- `gradekit.assertions`: `assert_true`, `assert_false`, `assert_equal`,
  `assert_not_equal`, `assert_exception` and `assert_no_exception`. Each returns a
  `(passed, message)` pair. `type_to_string` names an `AssertionType`.
- `gradekit.deferred`: `DeferredAssertion`, an assertion that is recorded now and
  evaluated by `run()`. After `run()`, the `result`, `message` and `has_ran`
  attributes describe the outcome. An assertion that raises while it is checked
  counts as a failure.
- `gradekit.scoring`: `ScoredCase`, a group of deferred assertions, each worth
  points.
  - Each assertion adds its points to the points possible, unless
    `set_fixed_points_possible()` was called.
  - `run()` runs the assertions that have not run yet. It awards points, which
    are capped at the points possible. By default it stops at the first failure,
    because `fail_fast` is `True`.
  - Scores can be scaled with `set_normalized_points_possible_target()` and
    `compute_normalized_points()`.
  - `to_json()` and `to_gradescope_json()` return dictionaries.
- `gradekit.leaderboard`: `LeaderboardEntry` and `Leaderboard`.
  - Entries are keyed by name.
  - The first entry added becomes the sort key, unless `sort_key` is set.
  - `to_gradescope_json()` lists the entries ordered by name and marks the sort
    key with its order (`asc` or `desc`). It raises `ValueError` if the sort key
    names no entry.
- `gradekit.timer`: `Timer`, a stopwatch that starts on creation. After `stop()`,
  the `microseconds`, `milliseconds` and `seconds` attributes hold the elapsed
  time. `elapsed()` returns seconds, even while the timer is still running.
- `gradekit.complexity`: `Complexity`, which compares the `microseconds` of two
  timers against a constant-time, linear or polynomial prediction, within a
  relative `tolerance` (default 0.2). It prints a line whenever a prediction
  fails, and for every check when `verbose` is set.
- `gradekit.capture`: `OutputCapture`.
  - It redirects `sys.stdout` and `sys.stderr` into buffers. Capture starts on
    creation unless `defer_capture=True`.
  - It can be used as a context manager.
  - The captured text is available in the `stdout` and `stderr` properties.
  - `OutputCapture.inject_to_stdin(s)` makes `s` the next text read from
    standard input.
- `gradekit.vector`: `Vector`, a sequence with an explicit capacity.
  - The default capacity is 64. It doubles when the vector is full.
  - `pop_back()` halves it when the size is at most a third of the capacity and
    the capacity is above 16.
  - Out-of-range indices raise `IndexError`.
  - `reserve()` only ever grows the capacity.
  - `clear()` keeps the capacity.
- `gradekit.palindrome`: `is_palindrome`, which compares only the ASCII letters
  of a string and ignores case, and `main`, an interactive prompt.

## Install

```
pip install .
pip install ".[test]"   # with pytest
```

## Example

```python
from gradekit.scoring import ScoredCase
from gradekit.vector import Vector

case = ScoredCase("vector basics")
v = Vector()
v.push_back(3)
case.assert_equal(len(v), 1, 5, "size after push_back")
case.assert_exception(lambda: v.at(7), 5, "out of range index raises")

case.run()                       # log lines are printed as they are written
print(case.to_gradescope_json())  # {'score': 10, 'max_score': 10, ...}
```

```python
from gradekit.palindrome import is_palindrome

is_palindrome("A man, a plan, a canal: Panama")  # True
```

## Command

```
gradekit-palindrome
```

The command reads whitespace-separated words from standard input. For each word
it says whether the word is a palindrome. It stops at `q`, at `Q`, or at the end
of input.

## What it does not do

gradekit provides the building blocks for grading: scored cases, logs and
leaderboards, all rendered as dictionaries and lists. It does not include a
runner that gathers several cases into a suite or writes a results file. It also
does not run external programs, so it cannot compile code or check memory. Use
`json.dump` on the returned dictionaries to produce output files.

## Tests

```
pytest
```
# dining

A simulation of the dining philosophers problem. Each philosopher runs in its
own thread. It needs two forks to eat, and it shares those forks with its
neighbours. A monitor thread watches for starvation. If a meal target is
given, the monitor also checks when every philosopher has eaten enough.

The package also holds the small character, string and formatting helpers
that the simulation is built with.

## Installation

```
pip install .
```

## Running the simulation

```
philo number_of_philosophers time_to_die time_to_eat time_to_sleep [meals_each]
```

The same entry point can be started with `python -m dining.cli`.

All times are in milliseconds. Each argument may contain only the digits
`0`-`9`. The program prints one of these messages and exits with status 1:

- `Error: wrong number of arguments` when it is not given four or five arguments.
- `Error: the argument is negative.` when an argument starts with `-`.
- `Error: wrong arguments.` when an argument contains a character other than a digit.

Example:

```
philo 5 800 200 200 7
```

Each event goes to standard output on its own line, in the form
`<elapsed ms> <philosopher id> <status>`. The status is one of
`has taken a fork`, `is eating`, `is sleeping`, `is thinking` or `died`.
The output looks like this, although the exact timings vary from run to run:

```
0 1 has taken a fork
0 1 has taken a fork
0 1 is eating
200 1 is sleeping
400 1 is thinking
```

The simulation ends when a philosopher has gone `time_to_die` milliseconds
without starting a meal, which prints `<ms> <id> died`. It also ends when a
meal count is given and every philosopher has eaten that many times. Once the
simulation is over, no further status lines are printed.

A philosopher takes its two forks in index order. Even-numbered philosophers
start half a meal late. When the number of philosophers is odd, each one waits
a quarter of `time_to_eat` after thinking. A lone philosopher picks up its
only fork and waits until it dies.

## Library use

- `dining.chars` has ASCII tests and case mapping: `is_alpha`, `is_digit`,
  `is_alnum`, `is_ascii`, `is_print`, `to_upper` and `to_lower`. Each accepts
  a one-character string or an integer code. The case functions return the
  same kind of value they were given.
- `dining.text` has C-style string helpers:
  - `atoi` skips leading whitespace and reads an optional sign, then digits.
    It returns 0 when there are no digits and wraps like a 32-bit signed integer.
  - `itoa`, `split`, `strtrim`, `substr` and `strmapi` build new strings.
  - `strnstr`, `strchr` and `strrchr` return an index, or `None` when nothing
    is found. Searching for `"\0"` finds the end of the string.
  - `strncmp` and `strcmp` return the code difference of the first characters
    that differ. `strcmp` returns 1 if either argument is `None`.
- `dining.printf`:
  - `format_text(fmt, *args)` supports `%c %s %d %i %u %x %X %p %%`. An
    unknown conversion, a missing argument or a trailing lone `%` raises
    `FormatError`.
  - `print_color(color, fmt, *args, stream=None)` writes the colour string,
    the formatted text and a reset code. It returns the number of formatted
    characters written.
- `dining.config` has `parse_args(args)`, which takes the arguments without
  the program name and returns a frozen `Settings` value. Its
  `must_eat_count` is `None` when no meal target is given. Bad input raises
  `ArgumentError`. The module also has `check_positive_number(text)`.
- `dining.simulation`:
  - `Table(settings, stream=None)` holds one run. Use `run()` to start it,
    `is_over()` and `stop()` for the end of the run, and
    `print_status(philosopher, status)` to log a line.
  - `Philosopher` holds one seat.
  - `now_ms()` returns wall-clock milliseconds.
  - `precise_sleep(ms)` sleeps for at least `ms` milliseconds.

```python
from dining.config import parse_args
from dining.simulation import Table

table = Table(parse_args(["4", "410", "200", "200", "3"]))
table.run()
```

## Tests

```
pip install .[test]
pytest
```
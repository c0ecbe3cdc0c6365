# uvasolve

Solutions to a set of classic UVa Online Judge exercises: the 3n+1
problem, carry counting, Jolly Jumpers, Minesweeper, emirps, the
Fibonaccimal base and around forty-five more.

Every exercise can be used in two ways:

* as a plain function that takes Python values and returns the answer,
  such as `max_cycle_length(1, 10)` or `is_jolly([1, 4, 2, 3])`;
* as a `run_<number>(text)` function that takes the judge's input text
  and returns the expected output text. A runner stops quietly when its
  input runs out or a value fails to parse, keeping the lines it has
  produced so far.

The package has no dependencies beyond the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Library use

```python
from uvasolve.arithmetic import max_cycle_length, run_100
from uvasolve.numtheory import emirp_status, fibonaccimal
from uvasolve.grids import Flatworld, minesweeper
from uvasolve.text import tex_quotes

max_cycle_length(1, 10)             # 20
emirp_status(17)                    # "emirp"
fibonaccimal(10)                    # "10010"
minesweeper(["*...", "....", ".*..", "...."])
tex_quotes(['"To be or not to be," quoth the Bard'])

print(run_100("1 10\n100 200\n"), end="")
# 1 10 20
# 100 200 125
```

`Flatworld(max_x, max_y)` keeps the positions where robots have fallen
off the grid; `move(x, y, facing, commands)` returns the final `x`, `y`,
heading and whether the robot was lost.

The functions are grouped by theme:

* `uvasolve.arithmetic`: sums, sequences, probability and geometry
  (problems 100, 10035, 10041, 10055, 10056, 10057, 10071, 10170, 10221,
  10242, 10268, 10642, 10783, 10812, 11150).
* `uvasolve.numtheory`: digits, bases, primes and divisibility
  (problems 948, 10019, 10093, 10101, 10190, 10193, 10235, 10922, 10929,
  10931, 11005, 11063, 11332, 11417, 11461).
* `uvasolve.grids`: boards, matrices, simulation and ordering
  (problems 118, 299, 10038, 10050, 10189, 10409, 10908, 11321, 11349,
  12019).
* `uvasolve.text`: character counting and string transforms
  (problems 272, 490, 10008, 10062, 10222, 10226, 10252, 10415, 10420).

Problems 10235 and 10325 share one solver: `emirp_status` and
`run_10235`.

## Command line

The `uvasolve` command runs one exercise on judge-style input and writes
the answer to standard output. The input is read from the file given
after the problem number, or from standard input when no file is given:

```
uvasolve 100 < input.txt
uvasolve 10189 field.txt
```

An unknown problem number is rejected with the list of valid choices.
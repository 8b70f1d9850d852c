# advent2021

Solutions to several 2021 programming puzzles, as a plain Python library
that uses only the standard library.

Each puzzle lives in its own module. Functions take the puzzle input as a
sequence of lines (or a single line, where the puzzle has one) and return
the answer as an integer. Malformed input raises `ValueError`.

## Modules

### `advent2021.day16` – bit packets

- `hex_as_binary(hex_string)` expands hexadecimal text into a string of
  `'0'` and `'1'` characters.
- `PacketParser(bits)` reads packets from such a string;
  `parse_packet()` returns the value of one packet, and `version_sum`
  holds the running total of the version fields read so far.
- `evaluate(type_id, values)` applies an operator (sum, product, minimum,
  maximum, greater, less, equal; see the `PacketType` enum) to sub-packet
  values.
- `part1(row)` sums all packet versions; `part2(row)` evaluates the
  outermost packet.

### `advent2021.day18` – snailfish numbers

- `parse(s)` builds a `SnailNode` tree with its leaves linked in reading
  order.
- `SnailNode.reduce()` performs one explode or split step and returns
  `False` when there is nothing left to do; `magnitude()`, `is_pair()` and
  `equals(other)` inspect a number.
- `add(first, second)` adds two numbers (nodes or strings) and reduces the
  result fully.
- `part1(rows)` gives the magnitude of the sum of all lines;
  `part2(rows)` the largest magnitude of any sum of two different lines.

### `advent2021.day19` – beacon scanners

- `Point` is a 3-D point or vector; `vec_to(other)` and `orientations()`
  (all 48 axis permutations and sign flips, the point itself first).
- `vector_hash(vector)`, `parse_points(rows)` and `shares_space(v1, v2)`
  are the building blocks of the matching.
- `align_scanners(rows)` returns the set of all beacons and the position
  of every scanner, both relative to the first scanner. It raises
  `ValueError` if some scanner overlaps with none of the others.
- `part1(rows)` counts distinct beacons; `part2(rows)` gives the largest
  Manhattan distance between two scanners.

### `advent2021.day23` – amphipod burrow

- `Burrow(rooms, hallway)` is an immutable burrow state;
  `is_solved()` checks it and `moves()` yields `(energy, next_burrow)`
  for every legal single move.
- `move_cost(amphipod)` is the energy of one step for `A`, `B`, `C` or `D`.
- `parse_burrow(rows, depth)` reads a burrow diagram with rooms `depth`
  deep; `least_energy(start)` finds the cheapest way to sort it.
- `part1(rows)` and `part2(rows)` solve rooms two and four deep.

### `advent2021.day24` – model numbers

- `parse_pair_conds(rows)` derives the `PairCond` digit constraints from
  a MONAD program of fourteen 18-line blocks.
- `part1(rows)` and `part2(rows)` give the largest and smallest model
  numbers that satisfy them.

### `advent2021.alu` – ALU interpreter

- `compile_program(rows)` parses `inp`, `add`, `mul`, `div`, `mod` and
  `eql` instructions into `Instruction` objects.
- `Instruction.apply(state)` returns a new `AluState`; division and modulo
  truncate toward zero and raise `ZeroDivisionError` on a zero divisor.
- `run(program, digits)` executes a program on the given input digits and
  returns the final state; `is_valid_model_number(program, digits)` checks
  that register `z` ends at zero.

## Example

```python
from advent2021 import day16, day18

assert day16.part1("8A004A801A8002F478") == 16
assert day16.part2("C200B40A82") == 3
assert day18.parse("[[1,2],[[3,4],5]]").magnitude() == 143
```

## What it does not do

The package has no command-line program and does not read input files:
the caller reads the puzzle input and passes the lines in. It covers only
the puzzles listed above.
# cubesolve

Search-based solvers for the 3x3x3 Rubik's Cube, a corner pattern database
that guides the informed search, and the colour logic for reading sticker
colours out of a camera frame.

The package works with a cube object that you supply. The solvers need one
that offers `is_solved()`, `move(m)` and `invert(m)` for the moves `0..17`,
compares by state with `==` and hashes by state. The corner database also
needs `corner_index(i)` and `corner_orientation(i)` for the corners `0..7`.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Combinatorics and indexing

`cubesolve.combinatorics` provides `factorial`, `pick` (nPk) and `choose`
(nCk). `pick` raises `ValueError` when `k` is negative or larger than `n`;
`choose` returns 0 in the latter case.

```python
from cubesolve.combinatorics import factorial, pick, choose

factorial(5)   # 120
pick(8, 3)     # 336
choose(8, 3)   # 56
```

`cubesolve.permutation_indexer.PermutationIndexer(n, k=None)` gives the
lexicographic rank of a k-permutation of the digits `0..n-1` through its
Lehmer code. Digits out of range, repeated digits or a wrong length raise
`ValueError`.

```python
from cubesolve.permutation_indexer import PermutationIndexer

indexer = PermutationIndexer(3)
indexer.rank([0, 1, 2])   # 0
indexer.rank([2, 1, 0])   # 5
```

## Compact storage

`cubesolve.nibble_array.NibbleArray(size, val=0xFF)` holds one 4-bit value
per position, two to a byte, with even positions in the high nibble. It
supports `len()`, indexing (out-of-range positions raise `IndexError`),
`inflate()` to a plain list, `reset(val=0xFF)`, `storage_size()`, and the
raw bytes through `data()` and `load(raw)`.

## Pattern databases

`cubesolve.pattern_database.PatternDatabase` is the abstract base of a table
mapping a cube state to a move count. Subclasses define
`database_index(cube)`.

- `set_num_moves(cube, n)` / `set_num_moves_at(index, n)` write a value only
  when it is lower than the stored one and return whether they wrote.
- `get_num_moves(cube)` / `get_num_moves_at(index)` read a value; an empty
  slot reads as 15.
- `size`, `num_items` and `is_full` are properties.
- `to_file(path)` writes the packed table; `from_file(path)` reads it back,
  returns `False` when the file cannot be opened and raises
  `DatabaseCorruptError` when its size is wrong.
- `inflate()` returns every value as a list; `reset()` empties the table.

`cubesolve.corner_database.CornerPatternDatabase(init_val=0xFF)` indexes
states by the permutation and orientation of the eight corners, giving
100,179,840 entries (about 50 MB in memory).

## Solvers

`cubesolve.solvers` holds four searches over the 18 moves. Each copies the
cube it is given; its `cube` attribute holds the solver's own state, which is
solved after a successful `solve()`. `solve()` returns the list of moves that
takes the starting cube to the solved state and raises `NoSolutionError` when
the search ends without one.

- `DFSSolver(cube, max_search_depth=8)` – depth-limited depth-first search,
  trying moves in order.
- `IDDFSSolver(cube, max_search_depth=7)` – depth-first search with a depth
  limit growing from 1.
- `BFSSolver(cube)` – breadth-first search; finds a shortest solution.
- `IDAstarSolver(cube, database)` – best-first search under a growing cost
  bound, with `database.get_num_moves(cube)` as the estimate.
  `IDAstarSolver.from_file(cube, path)` loads a `CornerPatternDatabase` from
  `path` and raises `FileNotFoundError` when there is none to read.

## Sticker colours

`cubesolve.colors` turns camera pixels, given as BGR triples, into `Color`
values (`WHITE`, `RED`, `ORANGE`, `YELLOW`, `GREEN`, `BLUE`, `UNKNOWN`);
each has a `display_bgr` triple for drawing.

- `bgr_to_hue(bgr)` – the hue of a pixel on the 0–180 scale.
- `classify_color(bgr)` – bright, near-grey pixels are white; otherwise the
  hue picks the colour, and hues outside every range count as white.
- `median_color(frame, center_x, center_y, region=5)` – the per-channel
  median of a square patch, where `frame[y][x]` is a BGR triple; pixels
  outside the frame are ignored.
- `sample_face(frame, box_size=60)` – the 3x3 grid of colours read from a
  grid of boxes centred in the frame; raises `ValueError` if the frame is too
  small.

```python
from cubesolve.colors import Color, classify_color

classify_color((255, 255, 255)) is Color.WHITE   # True
```

## What this package does not do

- It has no cube model of its own: you bring the cube object.
- It does not build a corner pattern database; it stores, saves and loads
  one.
- It does not open a camera or draw anything on screen; `cubesolve.colors`
  works on frames you have already captured.
- It has no command-line program.
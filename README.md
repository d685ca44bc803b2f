# squaremat

A small, dependency-free library for square matrices of floating-point
numbers. It supports matrix and element-wise arithmetic, indexing by row and
column, transposition, non-negative integer powers and determinants.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Usage

```python
from squaremat.matrix import SquareMat

a = SquareMat(2)          # 2x2, every element 0.0
b = SquareMat(2, 3)       # 2x2, every element 3.0

a[0][0] = 1; a[0][1] = 2
a[1][0] = 3; a[1][1] = 4

print(a + b, a - b, -a)   # element-wise sum, difference, negation
print(a * a)              # matrix product
print(a % a)              # element-wise product
print(a % 3)              # element-wise remainder by an integer
print(a * 2, 2 * a)       # scaling by a number
print(a / 2)              # division by a number
print(a ** 2)             # non-negative integer power; a ^ 2 does the same
print(~a)                 # transpose; a.transpose() does the same
print(a.determinant())    # -2.0
print(a.size)             # 2
```

### Creating and indexing

`SquareMat(n, init_value=0.0)` builds an `n` by `n` matrix with every element
set to `init_value`. `n` must be an integer (`TypeError` otherwise) and
positive (`ValueError` otherwise).

`a[i]` returns a `Row`, a writable view of row `i`: `a[i][j] = value` changes
the matrix itself. A `Row` supports `len()` and iteration. Negative indices
are not accepted; any index outside `0..n-1` raises `IndexError`, and a
non-integer index raises `TypeError`.

### Arithmetic

- `+`, `-` and `%` between matrices work element by element; `*` between
  matrices is the matrix product. Matrices of different sizes raise
  `ValueError`.
- `*` with a number (on either side) and `/` by a number scale every element.
- `%` with an integer takes the remainder of every element with
  `math.fmod`, so the sign follows the element: `-3 % 2` gives `-1.0`,
  `3.3 % 2` gives `1.3`.
- `**` (or `^`) with `0` gives the identity matrix; a negative exponent
  raises `ValueError`.
- `determinant()` uses cofactor expansion along the first row.

### In-place operations

`+=`, `-=`, `*=`, `%=` and `/=` update the matrix itself. `increment()` and
`decrement()` add or subtract 1 from every element in place and return the
same matrix.

### Copying and assignment

`copy()` returns an independent matrix. `assign(other)` overwrites a matrix
with the contents of another, taking on its size if it differs, and returns
the matrix.

### Comparisons

Matrices compare by the **sum of their elements**: two matrices are equal
when their sums are equal, even if their sizes differ. `!=`, `<`, `<=`, `>`
and `>=` follow the same rule. Because equality works this way and matrices
are mutable, matrices are not hashable.

### Printing

`str(matrix)` gives one row per line, each element formatted with `:g` and
followed by a space:

```
1 2 
3 4 
```

`repr(matrix)` shows the size and the rows.

## Demo

A walkthrough that applies each operator to a few matrices and prints the
results:

```
squaremat-demo
```

It can also be started with `python -m squaremat.demo`. It takes no options
other than `--help`.

## Limits

Matrices are built only in code; the package does not read or write matrices
from files or parse them from text.
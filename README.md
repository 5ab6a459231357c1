# squaremat

A small pure-Python type for square matrices (`n × n`, floating-point
entries) that does its matrix work through Python operators.

## Installation

```
pip install .
```

## Usage

```python
from squaremat.matrix import SquareMat

a = SquareMat(2, 0.0)
a[0, 0], a[0, 1] = 1, 2
a[1, 0], a[1, 1] = 3, 4

b = SquareMat(2, 1.0)

print(a + b)            # element-wise sum
print(a - b)            # element-wise difference
print(a * b)            # matrix product
print(3 * a, a / 2)     # scaling by a number
print(a % b)            # element-wise (Hadamard) product
print(~a)               # transpose
print(a ** 3)           # non-negative integer power
print(a.determinant())  # -2.0
```

`SquareMat(n, init_val=0.0)` builds an `n × n` matrix with every element
set to `init_val`. Printing a matrix gives one row per line, in the form
`[ 1 2 ]`, with numbers in short general format.

### Operators and methods

| Expression            | Meaning                                             |
|-----------------------|-----------------------------------------------------|
| `m[i, j]`             | element read or write, bounds-checked (`IndexError`) |
| `m[i][j]`             | the same through a live row view                    |
| `m.n`                 | dimension                                           |
| `m.sum()`             | sum of all elements                                 |
| `m.copy()`            | independent copy                                    |
| `+`, `-`, `+=`        | element-wise addition / subtraction of matrices     |
| `-m`                  | negation                                            |
| `*`, `*=`             | matrix product, or scaling by a number (either side for `*`) |
| `/`, `/=`             | division by a non-zero number                       |
| `%`                   | element-wise product of two matrices                |
| `~m`                  | transpose                                           |
| `m ** e`              | power for integer `e >= 0` (identity when `e == 0`) |
| `m.determinant()`     | determinant by Laplace expansion (meant for small `n`) |
| `m.increment()` / `m.decrement()` | add / subtract 1 from every element in place, return `m` |
| `m.post_increment()` / `m.post_decrement()` | same, but return a copy taken before the change |

Comparisons (`==`, `!=`, `<`, `<=`, `>`, `>=`) compare the **sums of the
elements**, not the elements one by one. Because of this, matrices are
not hashable.

### Errors

- A dimension that is not positive, matrices of different dimensions in
  one operation, and a negative exponent raise `ValueError`.
- Division by zero raises `ZeroDivisionError`.
- An index out of range raises `IndexError`; a key that is neither
  `(i, j)` nor a row number raises `TypeError`.

### Limits

There is no matrix inverse and no negative power, `%` takes only another
matrix, and the determinant is computed by cofactor expansion, so its cost
grows factorially with `n`.

## Demo

```
squaremat-demo
```

or `python -m squaremat.demo`. This prints a walk-through of the
operators on a few 2×2 and 3×3 matrices and ends with the determinant of
a 3×3 example.

## Tests

```
pip install .[test]
pytest
```
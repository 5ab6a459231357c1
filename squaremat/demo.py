"""Demonstration of the SquareMat operators, printed to standard output."""

from __future__ import annotations

from squaremat.matrix import SquareMat


def _out(*parts: object) -> None:
    print("".join(str(p) for p in parts), end="")


def _bool(value: bool) -> str:
    return "true" if value else "false"


def main(argv=None) -> int:
    """Run the demonstration and return the exit status."""
    a = SquareMat(2, 3.0)
    b = SquareMat(2, -1.5)
    c = SquareMat(3, 2.0)
    d = SquareMat(3, 0.0)

    _out("A (2×2, 3.0):\n", a,
         "B (2×2,-1.5):\n", b,
         "C (3×3, 2.0):\n", c,
         "D (3×3, 0.0):\n", d, "\n")

    e = a + b
    f = a - b
    g = a * b
    h = 2 * a
    i = b * -3.0
    j = a ** 3
    k = ~a

    _out("E = A + B:\n", e,
         "F = A - B:\n", f,
         "G = A * B:\n", g,
         "H = 2 * A:\n", h,
         "I = B * (-3):\n", i,
         "J = A ^ 3:\n", j,
         "K = ~A (transpose):\n", k, "\n")

    _out("Post-increment E++\n")
    _out("Before:\n", e)
    _out("Returned (old copy):\n", e.post_increment())
    _out("After:\n", e, "\n")

    _out("Pre-decrement --F\n")
    _out("Result:\n", f.decrement(), "\n")

    for idx in range(3):
        c[idx][idx] = idx + 1

    d = c * 1.5
    m = c % d
    n = c / 2.0
    p = ~c

    _out("Modified C:\n", c,
         "D = C * 1.5:\n", d,
         "M = C % D (element-wise):\n", m,
         "N = C / 2:\n", n,
         "P = ~C:\n", p, "\n")

    _out("A == B ? ", _bool(a == b), "\n",
         "A != B ? ", _bool(a != b), "\n",
         "A  < B ? ", _bool(a < b), "\n",
         "A >= B ? ", _bool(a >= b), "\n\n")

    q = SquareMat(3, 0)
    for row, values in enumerate([(6, 1, 1), (4, -2, 5), (2, 8, 7)]):
        for col, value in enumerate(values):
            q[row][col] = value

    _out("Q (3×3):\n", q,
         f"det(Q) = {q.determinant():g}\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
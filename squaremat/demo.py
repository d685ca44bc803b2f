"""Command that walks through the matrix operators and prints the results."""

from __future__ import annotations

import argparse
import sys

from squaremat.matrix import SquareMat


def _num(value: float) -> str:
    return f"{value:g}"


def _flag(value: bool) -> str:
    return "1" if value else "0"


def _show(name: str, mat: SquareMat) -> str:
    return f"{name}\n{mat}"


def _arithmetic(out: list[str]) -> SquareMat:
    s1 = SquareMat(3, 1)
    s2 = SquareMat(3, 2)
    s3 = SquareMat(3, 4)
    out.append("init to\n")
    out += [_show("s1", s1), _show("s2", s2), _show("s3", s3)]

    s3 = s1 + s2
    out.append("s3=s1+s2\n")
    out += [_show("s1", s1), _show("s2", s2), _show("s3", s3), "\n"]

    s3 = s2 - s1
    out.append("s3=s2-s1\n")
    out += [_show("s1", s1), _show("s2", s2), _show("s3", s3), "\n"]

    s3 = -s3
    out.append("s3= -s3\n")
    out += [_show("s3", s3), "\n"]

    s3 = s1 * s2
    out.append("s3 = s1*s2\n")
    out += [_show("s1", s1), _show("s2", s2), _show("s3", s3), "\n"]

    s3 = s1 * 4
    out.append("s3 = s1*4\n")
    out += [_show("s1", s1), _show("s3", s3), "\n"]

    s3 = 4 * s1
    out.append("s3 = 4*s1\n")
    out += [_show("s1", s1), _show("s3", s3), "\n"]

    s4 = s3 % s2
    out.append("s4 = s2%ss4\n")
    out += [_show("s2", s2), _show("s3", s3), _show("s4", s4), "\n"]

    s3 = s2 % 3
    out.append("s3=s2%s3\n")
    out += [_show("s2", s2), _show("s3", s3), "\n"]

    s2 = s1 / 3
    out.append("s2=s1/3;\n")
    out += [_show("s1", s1), _show("s2", s2), "\n"]

    s3 = s2 ^ 2
    out.append("s3 = s2^2\n")
    out += [_show("s2", s2), _show("s3", s3), "\n"]

    out.append("s3++\n")
    before = s3.copy()
    s3.increment()
    out.append(f"s3\n{before}\ns3++{before}s3 now:\n{s3}\n")

    out.append(f"++s3\n{s3.increment()}\n")

    out.append("s3--\n")
    before = s3.copy()
    s3.decrement()
    out.append(f"s3\n{before}\ns3--{before}s3 now:\n{s3}\n")

    # The walkthrough labels this step "--s3" but applies a prefix increment.
    out.append(f"--s3\n{s3.increment()}\n")
    return s1, s3


def _transpose(out: list[str], s3: SquareMat) -> SquareMat:
    out.append("we will change the matrix before the transpose\n")
    value = 1
    for i in range(3):
        row = s3[i]
        for j in range(3):
            row[j] = value
            value += 1
    out.append("s2=~s3\n")
    s2 = ~s3
    out += [_show("s3", s3), _show("s2", s2), "\n"]
    out.append(f"s3[0][1] is: {_num(s3[0][1])}\n")
    return s2


def _comparisons(out: list[str]) -> None:
    a = SquareMat(4, 2.5)
    b = SquareMat(2, 4)
    c = SquareMat(4, 1)
    out += [_show("A", a), _show("B", b), _show("C", c)]
    pairs = (("A", a, "B", b), ("A", a, "C", c), ("C", c, "B", b))
    operators = (
        ("==", lambda x, y: x == y),
        ("!=", lambda x, y: x != y),
        ("<=", lambda x, y: x <= y),
        (">=", lambda x, y: x >= y),
        ("<", lambda x, y: x < y),
        (">", lambda x, y: x > y),
    )
    for symbol, op in operators:
        for left_name, left, right_name, right in pairs:
            out.append(f"{left_name}{symbol}{right_name}{_flag(op(left, right))}\n")
    out.append("\n")


def _determinants(out: list[str], s1: SquareMat, s2: SquareMat, s3: SquareMat) -> None:
    for mat in (s1, s2, s3):
        mat[0][0] = 0
    out.append("the det of the matrix are:\n")
    out.append(f"s1\n{s1}det {_num(s1.determinant())}\n")
    out.append(f"s2\n{s2}det{_num(s2.determinant())}\n")
    out.append(f"s3\n{s3}det{_num(s3.determinant())}\n")


def main(argv=None) -> int:
    """Print a walkthrough of every matrix operator to standard output."""
    parser = argparse.ArgumentParser(
        prog="squaremat",
        description="Demonstrate the square matrix operators.",
    )
    parser.parse_args(argv)

    out: list[str] = []
    s1, s3 = _arithmetic(out)
    s2 = _transpose(out, s3)
    _comparisons(out)
    _determinants(out, s1, s2, s3)
    sys.stdout.write("".join(out))
    return 0


if __name__ == "__main__":
    sys.exit(main())
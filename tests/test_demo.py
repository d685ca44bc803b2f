import re

import pytest

from squaremat.demo import main
from squaremat.matrix import SquareMat


@pytest.fixture
def output(capsys):
    assert main([]) == 0
    return capsys.readouterr().out


def test_starts_with_initial_matrices(output):
    expected = (
        "init to\n"
        f"s1\n{SquareMat(3, 1)}"
        f"s2\n{SquareMat(3, 2)}"
        f"s3\n{SquareMat(3, 4)}"
    )
    assert output.startswith(expected)


def test_sum_block_matches_package(output):
    total = SquareMat(3, 1) + SquareMat(3, 2)
    block = (
        "s3=s1+s2\n"
        f"s1\n{SquareMat(3, 1)}"
        f"s2\n{SquareMat(3, 2)}"
        f"s3\n{total}\n"
    )
    assert block in output


def test_scalar_products_agree(output):
    left = SquareMat(3, 1) * 4
    right = 4 * SquareMat(3, 1)
    assert f"s3 = s1*4\ns1\n{SquareMat(3, 1)}s3\n{left}\n" in output
    assert f"s3 = 4*s1\ns1\n{SquareMat(3, 1)}s3\n{right}\n" in output


def test_transpose_block(output):
    block = (
        "s2=~s3\n"
        "s3\n1 2 3 \n4 5 6 \n7 8 9 \n"
        "s2\n1 4 7 \n2 5 8 \n3 6 9 \n"
    )
    assert block in output
    assert "s3[0][1] is: 2\n" in output


def test_headers_appear_in_order(output):
    headers = [
        "init to\n",
        "s3=s1+s2\n",
        "s3=s2-s1\n",
        "s3= -s3\n",
        "s3 = s1*s2\n",
        "s2=s1/3;\n",
        "s3 = s2^2\n",
        "s2=~s3\n",
        "the det of the matrix are:\n",
    ]
    positions = [output.index(h) for h in headers]
    assert positions == sorted(positions)


def test_comparison_lines_are_consistent(output):
    results = dict(re.findall(r"^([ABC](?:==|!=|<=|>=|<|>)[ABC])([01])$", output, re.M))
    assert len(results) == 18
    for left, right in (("A", "B"), ("A", "C"), ("C", "B")):
        eq = results[f"{left}=={right}"]
        ne = results[f"{left}!={right}"]
        lt = results[f"{left}<{right}"]
        gt = results[f"{left}>{right}"]
        le = results[f"{left}<={right}"]
        ge = results[f"{left}>={right}"]
        assert {eq, ne} == {"0", "1"}
        assert le == ("1" if "1" in (lt, eq) else "0")
        assert ge == ("1" if "1" in (gt, eq) else "0")


def test_comparison_results_match_package(output):
    a = SquareMat(4, 2.5)
    b = SquareMat(2, 4)
    c = SquareMat(4, 1)
    assert f"A==B{int(a == b)}\n" in output
    assert f"C==B{int(c == b)}\n" in output
    assert f"A>C{int(a > c)}\n" in output


def test_first_determinant_line(output):
    s1 = SquareMat(3, 1)
    s1[0][0] = 0
    assert f"s1\n{s1}det {s1.determinant():g}\n" in output


def test_output_ends_with_three_determinants(output):
    det_lines = re.findall(r"^det ?(-?[0-9.e+-]+)$", output, re.M)
    assert len(det_lines) == 3
    assert output.endswith("\n")


def test_rejects_unknown_option():
    with pytest.raises(SystemExit) as excinfo:
        main(["--unknown"])
    assert excinfo.value.code == 2
from squaremat.demo import main
from squaremat.matrix import SquareMat


def _run(capsys):
    status = main()
    return status, capsys.readouterr().out


def test_main_returns_zero(capsys):
    status, out = _run(capsys)
    assert status == 0
    assert out.startswith("A (2×2, 3.0):\n" + str(SquareMat(2, 3.0)))


def test_determinant_line(capsys):
    _, out = _run(capsys)
    assert out.rstrip("\n").endswith("det(Q) = -306")


def test_arithmetic_sections_match_package(capsys):
    _, out = _run(capsys)
    a, b = SquareMat(2, 3.0), SquareMat(2, -1.5)
    assert "E = A + B:\n" + str(a + b) in out
    assert "G = A * B:\n" + str(a * b) in out
    assert "H = 2 * A:\n" + str(a * 2) in out
    assert "J = A ^ 3:\n" + str(a * a * a) in out


def test_post_increment_section(capsys):
    _, out = _run(capsys)
    e = SquareMat(2, 3.0) + SquareMat(2, -1.5)
    after = e.copy().increment()
    expected = "Before:\n" + str(e) + "Returned (old copy):\n" + str(e) + "After:\n" + str(after)
    assert expected in out


def test_modified_c_section(capsys):
    _, out = _run(capsys)
    c = SquareMat(3, 2.0)
    for idx in range(3):
        c[idx, idx] = idx + 1
    assert "Modified C:\n" + str(c) in out
    assert "M = C % D (element-wise):\n" + str(c % (c * 1.5)) in out
    assert "P = ~C:\n" + str(~c) in out


def test_comparison_lines(capsys):
    _, out = _run(capsys)
    assert "A == B ? false\n" in out
    assert "A != B ? true\n" in out
import pytest

from setfield.matrix_demo import build_demo, main


def test_build_demo_upper_triangle_values():
    a, b, _ = build_demo(5)
    for i in range(5):
        for j in range(5):
            if j >= i:
                assert a[i][j] == i * 10 + j
                assert b[i][j] == (i * 10 + j) * 100
            else:
                assert a[i][j] == 0
                assert b[i][j] == 0


def test_build_demo_sum_matches_addition():
    a, b, c = build_demo(4)
    assert c == a + b
    assert c == a * 101


def test_build_demo_default_size():
    a, b, c = build_demo()
    assert len(a) == len(b) == len(c) == 5


def test_build_demo_rejects_bad_size():
    with pytest.raises(ValueError):
        build_demo(0)


def test_main_prints_all_matrices(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    a, b, c = build_demo(5)
    assert "Matrix a = \n" + str(a) in out
    assert "Matrix b = \n" + str(b) in out
    assert out.endswith("Matrix c = a + b\n" + str(c) + "\n")


def test_main_with_size(capsys):
    assert main(["--size", "2"]) == 0
    out = capsys.readouterr().out
    _, _, c = build_demo(2)
    assert str(c) in out


def test_main_reports_bad_size(capsys):
    assert main(["--size", "-1"]) == 1
    assert "error" in capsys.readouterr().err
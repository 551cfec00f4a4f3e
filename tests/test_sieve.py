import io

import pytest

from setfield.sieve import format_primes, main, primes_up_to, sieve_bitfield, sieve_set


def _has_no_small_divisor(p):
    return p >= 2 and all(p % d for d in range(2, p))


def test_primes_up_to_thirty():
    assert primes_up_to(30) == [2, 3, 5, 7, 11, 13, 17, 19, 23, 29]


@pytest.mark.parametrize("n", [0, 1, 2, 3, 10, 31, 64, 100])
def test_both_modes_agree(n):
    assert primes_up_to(n, use_set=True) == primes_up_to(n, use_set=False)


@pytest.mark.parametrize("n", [2, 17, 50, 97])
def test_results_are_prime_and_complete(n):
    primes = primes_up_to(n)
    assert all(_has_no_small_divisor(p) for p in primes)
    missing = [m for m in range(2, n + 1) if _has_no_small_divisor(m) and m not in primes]
    assert missing == []
    assert primes == sorted(primes)


@pytest.mark.parametrize("n", [0, 1])
def test_no_primes_below_two(n):
    assert primes_up_to(n) == []
    assert primes_up_to(n, use_set=True) == []


def test_sieve_bitfield_length_and_bits():
    n = 40
    field = sieve_bitfield(n)
    assert len(field) == n + 1
    primes = primes_up_to(n)
    assert [i for i in range(n + 1) if field.get_bit(i)] == primes


def test_sieve_set_universe_and_members():
    n = 40
    numbers = sieve_set(n)
    assert numbers.max_power == n + 1
    assert list(numbers) == primes_up_to(n)
    assert 0 not in numbers and 1 not in numbers


def test_negative_bound_rejected():
    with pytest.raises(ValueError):
        sieve_bitfield(-5)
    with pytest.raises(ValueError):
        sieve_set(-5)


def test_format_primes_short_line():
    assert format_primes([2, 3]) == "  2   3 \n"


def test_format_primes_breaks_every_ten():
    numbers = list(range(100, 125))
    text = format_primes(numbers)
    lines = text.split("\n")
    assert len(lines[0].split()) == 10
    assert len(lines[1].split()) == 10
    assert len(lines[2].split()) == 5
    assert text.endswith("\n")


def test_format_primes_empty():
    assert format_primes([]) == "\n"


def test_main_with_argument(capsys):
    assert main(["30"]) == 0
    out = capsys.readouterr().out
    assert out.rstrip("\n").splitlines()[-1] == "В первых 30 числах 10 простых"
    assert "Решето Эратосфена" in out


def test_main_set_mode_prints_set(capsys):
    assert main(["--set", "20"]) == 0
    out = capsys.readouterr().out
    expected_count = len(primes_up_to(20))
    assert f"В первых 20 числах {expected_count} простых" in out
    assert "{ " in out


def test_main_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("50\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert f"В первых 50 числах {len(primes_up_to(50))} простых" in out
    assert "Введите верхнюю границу целых значений - " in out


def test_main_rejects_bad_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("abc\n"))
    assert main([]) == 1
    assert "error" in capsys.readouterr().err


def test_main_rejects_negative_bound(capsys):
    assert main(["-5"]) == 1
    assert "error" in capsys.readouterr().err
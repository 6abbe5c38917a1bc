import re

import pytest

from barstatus.util import FatalError, die, fmt_human, read_file, warn

PREFIX_1000 = ["", "k", "M", "G", "T", "P", "E", "Z", "Y"]
PREFIX_1024 = ["", "Ki", "Mi", "Gi", "Ti", "Pi", "Ei", "Zi", "Yi"]


def test_warn_plain_message(capsys):
    warn("something happened")
    assert capsys.readouterr().err == "something happened\n"


def test_warn_colon_appends_os_error(capsys, tmp_path):
    try:
        open(tmp_path / "missing")
    except OSError as exc:
        warn("fopen:")
        expected = f"fopen: {exc.strerror}\n"
    assert capsys.readouterr().err == expected


def test_warn_colon_without_error(capsys):
    warn("nothing:")
    assert capsys.readouterr().err == "nothing:\n"


def test_die_raises_fatal_error():
    with pytest.raises(FatalError) as info:
        die("usage: barstatus [-v] [-s] [-1]")
    assert str(info.value) == "usage: barstatus [-v] [-s] [-1]"


def test_fmt_human_zero():
    assert fmt_human(0, 1000) == "0.0 "


def test_fmt_human_fraction():
    assert fmt_human(1536, 1024) == "1.5 Ki"


@pytest.mark.parametrize("power,prefix", list(enumerate(PREFIX_1024)))
def test_fmt_human_powers_of_1024(power, prefix):
    assert fmt_human(1024**power, 1024) == f"1.0 {prefix}"


@pytest.mark.parametrize("power,prefix", list(enumerate(PREFIX_1000)))
def test_fmt_human_powers_of_1000(power, prefix):
    assert fmt_human(1000**power, 1000) == f"1.0 {prefix}"


def test_fmt_human_beyond_largest_prefix():
    assert fmt_human(1024**10, 1024).endswith(" Yi")


@pytest.mark.parametrize("base", [1000, 1024])
@pytest.mark.parametrize("num", [1, 999, 1023, 123456, 98765432109])
def test_fmt_human_scaled_below_base(num, base):
    value, prefix = fmt_human(num, base).split(" ")
    assert re.fullmatch(r"\d+\.\d", value)
    assert float(value) < base
    assert prefix in (PREFIX_1000 if base == 1000 else PREFIX_1024)


def test_fmt_human_invalid_base():
    with pytest.raises(ValueError):
        fmt_human(10, 10)


def test_read_file_round_trip(tmp_path):
    path = tmp_path / "value"
    path.write_text("42 kB\n")
    assert read_file(path) == "42 kB\n"


def test_read_file_missing_warns(tmp_path, capsys):
    assert read_file(tmp_path / "missing") is None
    assert "fopen" in capsys.readouterr().err
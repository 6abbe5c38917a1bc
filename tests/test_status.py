import os
import signal

import pytest

from barstatus.config import Arg, Config
from barstatus.status import (
    USAGE,
    VERSION,
    Options,
    main,
    parse_args,
    render_status,
    run,
    sleep_time,
)
from barstatus.util import FatalError


@pytest.mark.parametrize(
    "argv, expected",
    [
        ([], Options(single=False, once=False)),
        (["-s"], Options(single=True, once=False)),
        (["-1"], Options(single=True, once=True)),
        (["-1s"], Options(single=True, once=True)),
        (["-s", "-1"], Options(single=True, once=True)),
        (["--"], Options(single=False, once=False)),
        (["-s", "--"], Options(single=True, once=False)),
    ],
)
def test_parse_args(argv, expected):
    assert parse_args(argv) == expected


@pytest.mark.parametrize("argv", [["-x"], ["extra"], ["-"], ["--", "x"], ["-sq"]])
def test_parse_args_usage_errors(argv):
    with pytest.raises(FatalError) as info:
        parse_args(argv)
    assert str(info.value) == USAGE


def test_parse_args_version():
    with pytest.raises(FatalError) as info:
        parse_args(["-s", "-v"])
    assert str(info.value) == f"barstatus-{VERSION}"


def test_render_status_uses_unknown_for_missing():
    args = [
        Arg(lambda a: a.upper(), "[%s]", "x"),
        Arg(lambda a: None, " %s"),
    ]
    assert render_status(args, "n/a", 100) == "[X] n/a"


def test_render_status_keeps_empty_results():
    args = [Arg(lambda a: "", "<%s>"), Arg(lambda a: "b", "%s")]
    assert render_status(args, "?", 100) == "<>b"


def test_render_status_percent_escape():
    args = [Arg(lambda a: "42", "%s%%")]
    assert render_status(args, "?", 100) == "42%"


def test_render_status_truncates(capsys):
    args = [Arg(lambda a: "ab", "%s"), Arg(lambda a: "cdefgh", "%s"), Arg(lambda a: "z")]
    status = render_status(args, "?", 5)
    assert status == "abcd"
    assert len(status) == 5 - 1
    assert "Output truncated" in capsys.readouterr().err


def test_render_status_length_bound():
    args = [Arg(lambda a: "x" * 50) for _ in range(10)]
    assert len(render_status(args, "?", 128)) < 128


def test_render_status_bad_format_stops(capsys):
    args = [Arg(lambda a: "a", "%s"), Arg(lambda a: "b", "no placeholder")]
    assert render_status(args, "?", 100) == "a"
    assert "vsnprintf" in capsys.readouterr().err


def test_sleep_time_full_interval():
    assert sleep_time(1000, 0.0) == 1.0


def test_sleep_time_overrun_is_zero():
    assert sleep_time(1000, 2.0) == 0.0


@pytest.mark.parametrize("elapsed", [0.1, 0.3, 0.9])
def test_sleep_time_complements_elapsed(elapsed):
    assert sleep_time(1000, elapsed) + elapsed == pytest.approx(1.0)


def test_run_once_writes_one_status():
    lines = []
    config = Config(interval=60000, args=(Arg(lambda a: a, "<%s>", "hi"),))
    run(config, Options(single=True, once=True), lines.append)
    assert lines == ["<hi>"]


def test_run_stops_on_sigterm_and_restores_handler():
    before = signal.getsignal(signal.SIGTERM)
    calls = []

    def component(argument):
        calls.append(argument)
        os.kill(os.getpid(), signal.SIGTERM)
        return "tick"

    lines = []
    config = Config(interval=60000, args=(Arg(component, "%s", "a"),))
    run(config, Options(single=True, once=False), lines.append)
    assert lines == ["tick"]
    assert calls == ["a"]
    assert signal.getsignal(signal.SIGTERM) == before


def test_main_version(capsys):
    assert main(["-v"]) == 1
    assert capsys.readouterr().err.strip() == f"barstatus-{VERSION}"


def test_main_usage(capsys):
    assert main(["-z"]) == 1
    assert capsys.readouterr().err.strip() == USAGE


def test_main_prints_once_with_config(tmp_path, monkeypatch, capsys):
    data = tmp_path / "data.txt"
    data.write_text("hello\n")
    config = tmp_path / "config.toml"
    config.write_text(
        f'[[args]]\nfunction = "cat"\nfmt = "[%s]"\nargument = "{data}"\n'
    )
    monkeypatch.setenv("BARSTATUS_CONFIG", str(config))
    assert main(["-1"]) == 0
    assert capsys.readouterr().out == "[hello]\n"


def test_main_bad_config(tmp_path, monkeypatch, capsys):
    config = tmp_path / "config.toml"
    config.write_text("interval = 0\n")
    monkeypatch.setenv("BARSTATUS_CONFIG", str(config))
    assert main(["-1"]) == 1
    assert str(config) in capsys.readouterr().err
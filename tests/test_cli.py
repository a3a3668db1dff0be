import pytest
from flask import Flask

import portfolio.__main__ as cli


@pytest.mark.cli
def test_defaults(monkeypatch):
    monkeypatch.delenv("PORTFOLIO_HOST", raising=False)
    monkeypatch.delenv("PORTFOLIO_PORT", raising=False)
    args = cli._parse_args([])
    assert args.host == "0.0.0.0"
    assert args.port == 8080
    assert args.debug is False


@pytest.mark.cli
def test_env_sets_defaults_and_flags_win(monkeypatch):
    monkeypatch.setenv("PORTFOLIO_HOST", "127.0.0.1")
    monkeypatch.setenv("PORTFOLIO_PORT", "9000")
    args = cli._parse_args([])
    assert (args.host, args.port) == ("127.0.0.1", 9000)
    args = cli._parse_args(["--port", "5001", "--debug"])
    assert (args.host, args.port, args.debug) == ("127.0.0.1", 5001, True)


@pytest.mark.cli
def test_bad_port_exits():
    with pytest.raises(SystemExit):
        cli._parse_args(["--port", "http"])


@pytest.mark.cli
def test_main_runs_app(monkeypatch):
    calls = {}

    def fake_run(self, **kwargs):
        calls.update(kwargs)

    monkeypatch.setattr(Flask, "run", fake_run)
    cli.main(["--host", "localhost", "--port", "5050"])
    assert calls == {"host": "localhost", "port": 5050, "debug": False}

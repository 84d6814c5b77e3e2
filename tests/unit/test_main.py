from fixmanufacture import __main__ as entrypoint
from fixmanufacture import config


def _capture_run(monkeypatch):
    calls = []
    monkeypatch.setattr(entrypoint.uvicorn, "run", lambda app, **kw: calls.append((app, kw)))
    return calls


def test_main_uses_config_defaults(monkeypatch):
    calls = _capture_run(monkeypatch)
    entrypoint.main([])
    app, kw = calls[0]
    assert app == "fixmanufacture.asgi:app"
    assert kw == {
        "host": config.HOST,
        "port": config.PORT,
        "reload": config.UVICORN_RELOAD,
        "log_level": config.LOG_LEVEL,
    }


def test_main_cli_overrides(monkeypatch):
    calls = _capture_run(monkeypatch)
    entrypoint.main(["--port", "5050", "--host", "127.0.0.1", "--reload", "--log-level", "debug"])
    _, kw = calls[0]
    assert kw["port"] == 5050
    assert kw["host"] == "127.0.0.1"
    assert kw["reload"] is True
    assert kw["log_level"] == "debug"

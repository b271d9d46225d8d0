import logging

from khanij.logsetup import ENV_VAR, TRACE, init


def _our_handlers(logger):
    return [h for h in logger.handlers if type(h).__name__ == "_Handler"]


def test_default_level_is_warning(monkeypatch):
    monkeypatch.delenv(ENV_VAR, raising=False)
    logger = init()
    assert logger.name == "khanij"
    assert logger.level == logging.WARNING


def test_plain_level_from_env(monkeypatch):
    monkeypatch.setenv(ENV_VAR, "debug")
    assert init().level == logging.DEBUG


def test_trace_level(monkeypatch):
    monkeypatch.setenv(ENV_VAR, "trace")
    assert init().level == TRACE


def test_target_directive(monkeypatch):
    monkeypatch.setenv(ENV_VAR, "other=error,khanij=info")
    assert init().level == logging.INFO


def test_invalid_filter_falls_back_to_warn(monkeypatch):
    monkeypatch.setenv(ENV_VAR, "not-a-level")
    assert init().level == logging.WARNING


def test_repeated_init_does_not_stack_handlers(monkeypatch):
    monkeypatch.setenv(ENV_VAR, "error")
    init()
    logger = init()
    assert len(_our_handlers(logger)) == 1
    assert logger.level == logging.ERROR


def test_messages_reach_stdout(monkeypatch, capsys):
    monkeypatch.setenv(ENV_VAR, "info")
    logger = init()
    logger.info("hello from test")
    logger.debug("hidden message")
    out = capsys.readouterr().out
    assert "hello from test" in out
    assert "hidden message" not in out
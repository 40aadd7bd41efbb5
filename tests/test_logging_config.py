import logging

from delve.logging_config import configure_logging


def test_env_level_and_single_handler(monkeypatch):
    root = logging.getLogger()
    saved_level, saved_handlers = root.level, list(root.handlers)
    try:
        monkeypatch.setenv("DELVE_LOG_LEVEL", "debug")
        configure_logging()
        configure_logging()
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1

        monkeypatch.setenv("DELVE_LOG_LEVEL", "nonsense")
        configure_logging(logging.WARNING)
        assert root.level == logging.WARNING
    finally:
        for h in list(root.handlers):
            root.removeHandler(h)
        for h in saved_handlers:
            root.addHandler(h)
        root.setLevel(saved_level)

import logging

from pytxt.utils.logging_setup import resolve_level, setup_logging


def test_resolve_level_names():
    assert resolve_level("debug") == logging.DEBUG
    assert resolve_level(" WARNING ") == logging.WARNING
    assert resolve_level(None) == logging.INFO
    assert resolve_level("chatty", default=logging.ERROR) == logging.ERROR


def test_setup_logging_sets_root_level_and_quiets_urllib3():
    root = logging.getLogger()
    previous = root.level
    try:
        setup_logging("DEBUG")
        assert root.level == logging.DEBUG
        assert logging.getLogger("urllib3").level == logging.WARNING
    finally:
        root.setLevel(previous)

from __future__ import annotations

import logging

import pytest

import pytxt.app as app_mod
from pytxt.services.config.app_config import AppConfig
from test_app_config import FakeIni


class FakeQApplication:
    org_name: str | None = None
    app_name: str | None = None

    def __init__(self, argv: list[str]) -> None:
        self.argv = list(argv)
        self.exec_called = 0

    @classmethod
    def setOrganizationName(cls, name: str) -> None:
        cls.org_name = name

    @classmethod
    def setApplicationName(cls, name: str) -> None:
        cls.app_name = name

    def exec(self) -> int:
        self.exec_called += 1
        return 0


class FakeWindow:
    def __init__(self) -> None:
        self.shown = False

    def show(self) -> None:
        self.shown = True


class FakeContainer:
    last: "FakeContainer | None" = None

    def __init__(self, gemini) -> None:
        self.gemini = gemini
        self.window = FakeWindow()
        self.title: str | None = None

    @classmethod
    def default(cls, *, gemini=None, **_):
        cls.last = cls(gemini)
        return cls.last

    def build_main_window(self, *, app_title: str) -> FakeWindow:
        self.title = app_title
        return self.window


@pytest.fixture()
def patched_app(monkeypatch, tmp_path):
    calls: dict[str, object] = {}

    def fake_build_app_config(**_):
        return AppConfig(ini=FakeIni(), project_root=tmp_path, environ={})

    monkeypatch.setattr(app_mod, "QApplication", FakeQApplication)
    monkeypatch.setattr(app_mod, "Container", FakeContainer)
    monkeypatch.setattr(app_mod, "build_app_config", fake_build_app_config)
    monkeypatch.setattr(app_mod, "load_dotenv", lambda *a, **k: calls.setdefault("dotenv", True))
    monkeypatch.setattr(app_mod, "setup_logging", lambda level: calls.setdefault("level", level))
    return calls


def test_run_app_composes_and_shows_window(patched_app, caplog):
    with caplog.at_level(logging.ERROR, logger="pytxt.app"):
        rc = app_mod.run_app(["pytxt"])

    assert rc == 0
    assert patched_app["dotenv"] is True
    assert patched_app["level"] == "INFO"
    assert FakeQApplication.org_name == "QuickTools"
    assert FakeQApplication.app_name == "PyTextEditor"
    assert FakeContainer.last is not None
    assert FakeContainer.last.window.shown is True
    assert FakeContainer.last.title == "PyTextEditor"
    # Missing key is logged but does not stop startup
    assert FakeContainer.last.gemini.has_key is False
    assert "GEMINI_API_KEY is not set" in caplog.text


def test_check_credentials(tmp_path, caplog):
    with_key = AppConfig(ini=FakeIni(), project_root=tmp_path, environ={"GEMINI_API_KEY": "k"})
    without = AppConfig(ini=FakeIni(), project_root=tmp_path, environ={})

    with caplog.at_level(logging.ERROR, logger="pytxt.app"):
        assert app_mod.check_credentials(with_key) is True
        assert caplog.text == ""
        assert app_mod.check_credentials(without) is False
    assert "GEMINI_API_KEY" in caplog.text

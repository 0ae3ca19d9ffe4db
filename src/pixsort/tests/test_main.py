import sys

import pytest

from pixsort import __main__, __version__
from pixsort.app import Application


@pytest.fixture
def started(monkeypatch) -> list[Application]:
    apps: list[Application] = []
    monkeypatch.setattr(Application, "run", lambda self: apps.append(self))
    return apps


def test_main_passes_folder_and_config(monkeypatch, started):
    monkeypatch.setattr(
        sys, "argv", ["pixsort", "photos/inbox", "--config", "/tmp/dest.json"]
    )
    __main__.main()
    assert len(started) == 1
    assert started[0].startup_path == "photos/inbox"
    assert started[0].service.config_path == "/tmp/dest.json"


def test_main_without_arguments(monkeypatch, started):
    monkeypatch.setattr(sys, "argv", ["pixsort"])
    __main__.main()
    assert started[0].startup_path == ""


def test_main_version(monkeypatch, capsys, started):
    monkeypatch.setattr(sys, "argv", ["pixsort", "--version"])
    with pytest.raises(SystemExit):
        __main__.main()
    assert __version__ in capsys.readouterr().out
    assert started == []

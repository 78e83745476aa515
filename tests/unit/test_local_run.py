"""
로컬 SQLite 단축 스크립트 검증
"""

import importlib.util
import os

import pytest

_SCRIPT = os.path.join(os.path.dirname(__file__), "..", "..", "scripts", "local_run.py")


@pytest.fixture
def local_run(tmp_path, monkeypatch):
    spec = importlib.util.spec_from_file_location("local_run", _SCRIPT)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    monkeypatch.setattr(module, "DB_PATH", str(tmp_path / "links.db"))
    return module


def test_create_then_get(local_run):
    first = local_run.create_short_url("https://example.com/1")
    second = local_run.create_short_url("https://example.com/2")
    # SQLite AUTOINCREMENT는 1부터
    assert (first, second) == ("b", "c")
    assert local_run.get_original_url(second) == "https://example.com/2"


def test_get_unknown_or_invalid(local_run):
    assert local_run.get_original_url("90F7qb") is None
    assert local_run.get_original_url("!!") is None
    assert local_run.get_original_url("   ") is None


def test_create_requires_url(local_run):
    with pytest.raises(ValueError):
        local_run.create_short_url(" ")


def test_main_commands(local_run, capsys):
    assert local_run.main(["create", "https://example.com"]) == 0
    assert "short_code: b" in capsys.readouterr().out

    assert local_run.main(["get", "b"]) == 0
    assert capsys.readouterr().out.strip().endswith("https://example.com")

    assert local_run.main(["get", "zz"]) == 1
    assert local_run.main(["create", " "]) == 1

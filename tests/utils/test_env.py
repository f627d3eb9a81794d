from __future__ import annotations

import os
from pathlib import Path

import pytest

from cine_backend.utils import env as mod


def test_load_env_reads_dotenv_from_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(mod, "__file__", str(tmp_path / "pkg" / "cine_backend" / "utils" / "env.py"))
    (tmp_path / ".env").write_text("CINE_BACKEND_TEST_VALUE=from-dotenv\n", encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("CINE_BACKEND_TEST_VALUE", "placeholder")
    monkeypatch.delenv("CINE_BACKEND_TEST_VALUE")

    loaded = mod.load_env()

    assert loaded == tmp_path / ".env"
    assert os.environ["CINE_BACKEND_TEST_VALUE"] == "from-dotenv"


def test_load_env_returns_none_without_dotenv(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(mod, "__file__", str(tmp_path / "pkg" / "cine_backend" / "utils" / "env.py"))
    monkeypatch.chdir(tmp_path)

    assert mod.load_env() is None


def test_env_str_strips_and_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CINE_BACKEND_TEST_VALUE", "  en-US ")
    assert mod.env_str("CINE_BACKEND_TEST_VALUE", "es-ES") == "en-US"

    monkeypatch.setenv("CINE_BACKEND_TEST_VALUE", "   ")
    assert mod.env_str("CINE_BACKEND_TEST_VALUE", "es-ES") == "es-ES"

    monkeypatch.delenv("CINE_BACKEND_TEST_VALUE")
    assert mod.env_str("CINE_BACKEND_TEST_VALUE", "es-ES") == "es-ES"


def test_env_float_parses_and_rejects_garbage(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("CINE_BACKEND_TEST_VALUE", raising=False)
    assert mod.env_float("CINE_BACKEND_TEST_VALUE", 10.0) == 10.0

    monkeypatch.setenv("CINE_BACKEND_TEST_VALUE", "2.5")
    assert mod.env_float("CINE_BACKEND_TEST_VALUE", 10.0) == 2.5

    monkeypatch.setenv("CINE_BACKEND_TEST_VALUE", "slow")
    with pytest.raises(RuntimeError, match="CINE_BACKEND_TEST_VALUE must be a number"):
        mod.env_float("CINE_BACKEND_TEST_VALUE", 10.0)


def test_env_int_returns_int_and_rejects_fractions(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CINE_BACKEND_TEST_VALUE", "3")
    value = mod.env_int("CINE_BACKEND_TEST_VALUE", 1)
    assert value == 3
    assert type(value) is int

    monkeypatch.setenv("CINE_BACKEND_TEST_VALUE", "2.5")
    with pytest.raises(RuntimeError, match="CINE_BACKEND_TEST_VALUE must be an integer"):
        mod.env_int("CINE_BACKEND_TEST_VALUE", 1)


def test_env_list_splits_on_commas(monkeypatch: pytest.MonkeyPatch) -> None:
    default = ["http://localhost:5173"]
    monkeypatch.delenv("CINE_BACKEND_TEST_VALUE", raising=False)
    result = mod.env_list("CINE_BACKEND_TEST_VALUE", default)
    assert result == default
    assert result is not default

    monkeypatch.setenv("CINE_BACKEND_TEST_VALUE", "https://a.example, ,https://b.example")
    assert mod.env_list("CINE_BACKEND_TEST_VALUE", default) == ["https://a.example", "https://b.example"]

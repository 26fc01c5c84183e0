import os
from pathlib import Path
from unittest.mock import patch

import pytest

from utils.env import _find_project_root, env_flag, env_float, env_int, load_project_dotenv

# --- _find_project_root --- #


def test_find_project_root_found_in_start(tmp_path: Path):
    """Test finding pyproject.toml in the starting directory."""
    (tmp_path / "pyproject.toml").touch()
    assert _find_project_root(start=tmp_path) == tmp_path


def test_find_project_root_found_levels_up(tmp_path: Path):
    """Test finding pyproject.toml a few levels above the start."""
    (tmp_path / "pyproject.toml").touch()
    start_dir = tmp_path / "tests" / "utils"
    start_dir.mkdir(parents=True)
    assert _find_project_root(start=start_dir) == tmp_path


# --- load_project_dotenv --- #


@patch("utils.env.load_dotenv")
@patch("utils.env._find_project_root")
def test_load_dotenv_when_present(mock_find_root, mock_load_dotenv, tmp_path: Path):
    env_file = tmp_path / ".env"
    env_file.touch()
    mock_find_root.return_value = tmp_path

    assert load_project_dotenv() is True
    mock_load_dotenv.assert_called_once_with(dotenv_path=env_file, override=False)


@patch("utils.env.load_dotenv")
@patch("utils.env._find_project_root")
def test_load_dotenv_skipped_when_missing(mock_find_root, mock_load_dotenv, tmp_path: Path):
    mock_find_root.return_value = tmp_path

    assert load_project_dotenv() is False
    mock_load_dotenv.assert_not_called()


@patch("utils.env._find_project_root")
def test_load_dotenv_does_not_override(mock_find_root, tmp_path: Path, monkeypatch):
    """Existing environment variables win over the `.env` file."""
    (tmp_path / ".env").write_text("INVENTORY_LOW_DOI=30\nINVENTORY_UNITS_PER_BOX=12")
    mock_find_root.return_value = tmp_path
    monkeypatch.setenv("INVENTORY_LOW_DOI", "60")
    monkeypatch.delenv("INVENTORY_UNITS_PER_BOX", raising=False)

    load_project_dotenv()

    assert os.environ.get("INVENTORY_LOW_DOI") == "60"
    assert os.environ.get("INVENTORY_UNITS_PER_BOX") == "12"
    monkeypatch.delenv("INVENTORY_UNITS_PER_BOX")


# --- typed getters --- #


@pytest.mark.parametrize("raw, expected", [("1", True), ("TRUE", True), ("yes", True), ("0", False), ("off", False)])
def test_env_flag(raw, expected, monkeypatch):
    monkeypatch.setenv("INVENTORY_TEST_FLAG", raw)
    assert env_flag("INVENTORY_TEST_FLAG") is expected


def test_env_getters_fall_back_to_defaults(monkeypatch):
    monkeypatch.delenv("INVENTORY_TEST_VALUE", raising=False)
    assert env_flag("INVENTORY_TEST_VALUE", True) is True
    assert env_int("INVENTORY_TEST_VALUE", 7) == 7
    assert env_float("INVENTORY_TEST_VALUE", 1.5) == 1.5
    monkeypatch.setenv("INVENTORY_TEST_VALUE", "  ")
    assert env_int("INVENTORY_TEST_VALUE", 7) == 7


def test_env_int_and_float_parse(monkeypatch):
    monkeypatch.setenv("INVENTORY_TEST_VALUE", "42")
    assert env_int("INVENTORY_TEST_VALUE", 0) == 42
    assert env_float("INVENTORY_TEST_VALUE", 0.0) == 42.0


def test_env_int_rejects_garbage(monkeypatch):
    monkeypatch.setenv("INVENTORY_TEST_VALUE", "lots")
    with pytest.raises(ValueError):
        env_int("INVENTORY_TEST_VALUE", 0)

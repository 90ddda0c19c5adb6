# tests/unit/test_config.py

import os
from pathlib import Path

import pytest

from grid_toolkit.config import SolutionConfig

ENV_VARS = [
    "GRID_TOOLKIT_INPUT_DIR",
    "GRID_TOOLKIT_INPUT_PATTERN",
    "GRID_TOOLKIT_TEST",
    "GRID_TOOLKIT_LOG_LEVEL",
]


def isolate_env(monkeypatch: pytest.MonkeyPatch, cwd: Path) -> None:
    # setenv first so teardown also removes whatever a .env file loads
    for name in ENV_VARS:
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    monkeypatch.chdir(cwd)


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    isolate_env(monkeypatch, tmp_path)
    return tmp_path


def test_defaults(clean_env: Path) -> None:
    config = SolutionConfig.from_env(argv=["prog"])
    assert config == SolutionConfig()
    assert config.input_path(3) == Path(".") / "day-3/input.txt"


def test_test_argument_selects_test_input(clean_env: Path) -> None:
    config = SolutionConfig.from_env(argv=["prog", "test"])
    assert config.test_mode
    assert config.input_path(15) == Path(".") / "day-15/input.test.txt"


@pytest.mark.parametrize("value, expected", [("1", True), ("true", True), ("no", False)])
def test_test_env_var(
    clean_env: Path, monkeypatch: pytest.MonkeyPatch, value: str, expected: bool
) -> None:
    monkeypatch.setenv("GRID_TOOLKIT_TEST", value)
    assert SolutionConfig.from_env(argv=["prog"]).test_mode is expected


def test_environment_overrides(clean_env: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GRID_TOOLKIT_INPUT_DIR", "/puzzles")
    monkeypatch.setenv("GRID_TOOLKIT_INPUT_PATTERN", "{day:02d}{suffix}.in")
    monkeypatch.setenv("GRID_TOOLKIT_LOG_LEVEL", "debug")
    config = SolutionConfig.from_env(argv=["prog"])
    assert config.input_path(7) == Path("/puzzles/07.in")
    assert config.log_level == "DEBUG"


def test_dotenv_file_is_loaded(clean_env: Path) -> None:
    (clean_env / ".env").write_text("GRID_TOOLKIT_INPUT_DIR=from-dotenv\n")
    config = SolutionConfig.from_env(argv=["prog"])
    assert config.input_dir == Path("from-dotenv")


def test_environment_wins_over_dotenv(
    clean_env: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    (clean_env / ".env").write_text("GRID_TOOLKIT_INPUT_DIR=from-dotenv\n")
    monkeypatch.setenv("GRID_TOOLKIT_INPUT_DIR", "from-env")
    assert SolutionConfig.from_env(argv=["prog"]).input_dir == Path("from-env")


def test_dotenv_values_do_not_outlive_the_test(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    before = {name: os.environ.get(name) for name in ENV_VARS}
    (tmp_path / ".env").write_text(
        "GRID_TOOLKIT_INPUT_DIR=from-dotenv\nGRID_TOOLKIT_TEST=1\n"
    )
    with monkeypatch.context() as scoped:
        isolate_env(scoped, tmp_path)
        config = SolutionConfig.from_env(argv=["prog"])
        assert config.input_dir == Path("from-dotenv")
        assert os.environ["GRID_TOOLKIT_INPUT_DIR"] == "from-dotenv"
    assert {name: os.environ.get(name) for name in ENV_VARS} == before

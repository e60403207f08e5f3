"""Tests for presentation/pytest_plugin."""

from pathlib import Path
from types import SimpleNamespace

from docpolicy.presentation.pytest_plugin import pytest_addoption, pytest_configure
from docpolicy.presentation.pytest_plugin.fixtures import _get_ini_value, _root_dir


class RecordingParser:
    """Parser double recording addini calls."""

    def __init__(self) -> None:
        self.ini: dict[str, str] = {}

    def addini(self, name: str, help: str, default: str) -> None:
        self.ini[name] = default


class RecordingConfig:
    """Config double recording ini lines and serving ini values."""

    def __init__(self, values: dict[str, str] | None = None) -> None:
        self.lines: list[tuple[str, str]] = []
        self._values = values or {}
        self.rootpath = Path("/project")

    def addinivalue_line(self, name: str, line: str) -> None:
        self.lines.append((name, line))

    def getini(self, name: str) -> str:
        return self._values.get(name, "")


class TestHooks:
    """Tests for plugin hooks."""

    def test_registers_source_dir_option(self) -> None:
        parser = RecordingParser()
        pytest_addoption(parser)  # type: ignore[arg-type]
        assert parser.ini == {"docpolicy_source_dir": "src"}

    def test_registers_marker(self) -> None:
        config = RecordingConfig()
        pytest_configure(config)  # type: ignore[arg-type]
        assert config.lines[0][0] == "markers"
        assert config.lines[0][1].startswith("docpolicy:")


class TestHelpers:
    """Tests for fixture helpers."""

    def test_ini_value_set(self) -> None:
        config = RecordingConfig({"docpolicy_source_dir": "lib"})
        value = _get_ini_value(config, "docpolicy_source_dir", "src")  # type: ignore[arg-type]
        assert value == "lib"

    def test_ini_value_default(self) -> None:
        config = RecordingConfig()
        value = _get_ini_value(config, "docpolicy_source_dir", "src")  # type: ignore[arg-type]
        assert value == "src"

    def test_root_dir(self) -> None:
        request = SimpleNamespace(config=RecordingConfig())
        assert _root_dir(request) == Path("/project")  # type: ignore[arg-type]

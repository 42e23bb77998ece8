"""Tests for the configuration module."""

from pathlib import Path

import pytest

from graphset._cli.config import (
    ConfigError,
    GraphsetConfig,
    find_pyproject_toml,
    get_config,
    load_config,
)


class TestFindPyprojectToml:
    """Tests for find_pyproject_toml function."""

    def test_finds_in_current_directory(self, tmp_path: Path) -> None:
        """Should find pyproject.toml in current directory."""
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text("[project]\nname = 'test'\n")

        result = find_pyproject_toml(tmp_path)

        assert result == pyproject

    def test_finds_in_parent_directory(self, tmp_path: Path) -> None:
        """Should find pyproject.toml in parent directory."""
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text("[project]\nname = 'test'\n")

        subdir = tmp_path / "graphs" / "nested"
        subdir.mkdir(parents=True)

        result = find_pyproject_toml(subdir)

        assert result == pyproject


class TestLoadConfig:
    """Tests for load_config."""

    def test_no_section_returns_defaults(self, tmp_path: Path) -> None:
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text("[project]\nname = 'test'\n")

        config = load_config(pyproject)

        assert config == GraphsetConfig(project_root=tmp_path)
        assert config.consume is False
        assert config.strict is False

    def test_full_section(self, tmp_path: Path) -> None:
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text(
            """
[tool.graphset]
graph = "graphs/build.toml"
consume = true
strict = true
""",
        )

        config = load_config(pyproject)

        assert config.graph == tmp_path / "graphs" / "build.toml"
        assert config.consume is True
        assert config.strict is True
        assert config.project_root == tmp_path

    def test_absolute_graph_path_kept(self, tmp_path: Path) -> None:
        graph_path = tmp_path / "elsewhere" / "graph.toml"
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text(f"[tool.graphset]\ngraph = '{graph_path.as_posix()}'\n")

        config = load_config(pyproject)

        assert config.graph == graph_path

    def test_graph_must_be_string(self, tmp_path: Path) -> None:
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text("[tool.graphset]\ngraph = 1\n")

        with pytest.raises(ConfigError, match="expected string path"):
            load_config(pyproject)

    def test_consume_must_be_bool(self, tmp_path: Path) -> None:
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text("[tool.graphset]\nconsume = 'yes'\n")

        with pytest.raises(ConfigError, match="consume: expected boolean"):
            load_config(pyproject)

    def test_invalid_toml(self, tmp_path: Path) -> None:
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text("[tool.graphset\n")

        with pytest.raises(ConfigError, match="Invalid TOML"):
            load_config(pyproject)


class TestGetConfig:
    """Tests for get_config."""

    def test_reads_from_cwd(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "pyproject.toml").write_text("[tool.graphset]\nstrict = true\n")
        monkeypatch.chdir(tmp_path)

        config = get_config()

        assert config.strict is True
        assert config.project_root == tmp_path.resolve()

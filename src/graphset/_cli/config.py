"""Configuration loading from pyproject.toml."""

import tomllib
from dataclasses import dataclass
from pathlib import Path


class ConfigError(Exception):
    """Error in graphset configuration."""


@dataclass(slots=True, frozen=True)
class GraphsetConfig:
    """Configuration loaded from pyproject.toml.

    All relative paths are resolved from the project root (directory containing pyproject.toml).
    """

    graph: Path | None = None
    consume: bool = False
    strict: bool = False
    project_root: Path | None = None


def find_pyproject_toml(start_dir: Path | None = None) -> Path | None:
    """Find pyproject.toml by walking up from start_dir.

    Args:
        start_dir: Starting directory. Defaults to current working directory.

    Returns:
        Path to pyproject.toml if found, None otherwise.

    """
    if start_dir is None:
        start_dir = Path.cwd()

    current = start_dir.resolve()

    while True:
        candidate = current / "pyproject.toml"
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            # Reached filesystem root
            return None
        current = parent


def _parse_bool(section: dict[str, object], key: str) -> bool:
    value = section.get(key, False)
    if not isinstance(value, bool):
        msg = f"Invalid [tool.graphset].{key}: expected boolean"
        raise ConfigError(msg)
    return value


def load_config(pyproject_path: Path) -> GraphsetConfig:
    """Load and validate [tool.graphset] config from pyproject.toml.

    Args:
        pyproject_path: Path to pyproject.toml

    Returns:
        Parsed GraphsetConfig

    Raises:
        ConfigError: If the configuration is invalid

    """
    project_root = pyproject_path.parent

    with pyproject_path.open("rb") as f:
        try:
            data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            msg = f"Invalid TOML in {pyproject_path}: {e}"
            raise ConfigError(msg) from e

    tool_section = data.get("tool", {})
    graphset_section = tool_section.get("graphset", {})

    if not graphset_section:
        # No [tool.graphset] section - return empty config
        return GraphsetConfig(project_root=project_root)

    graph_path: Path | None = None
    if "graph" in graphset_section:
        graph_value = graphset_section["graph"]
        if not isinstance(graph_value, str):
            msg = "Invalid [tool.graphset].graph: expected string path"
            raise ConfigError(msg)
        graph_path = Path(graph_value)
        if not graph_path.is_absolute():
            graph_path = project_root / graph_path

    return GraphsetConfig(
        graph=graph_path,
        consume=_parse_bool(graphset_section, "consume"),
        strict=_parse_bool(graphset_section, "strict"),
        project_root=project_root,
    )


def get_config() -> GraphsetConfig:
    """Get config from pyproject.toml in current directory or parents.

    Returns:
        GraphsetConfig (may be empty if no pyproject.toml or no [tool.graphset] section)

    """
    pyproject_path = find_pyproject_toml()
    if pyproject_path is None:
        return GraphsetConfig()
    return load_config(pyproject_path)

"""Path utilities for locating fuzzyrank configuration."""

from pathlib import Path


def get_project_root() -> Path:
    """Get the project root directory.

    Returns:
        Path to the project root

    """
    return Path(__file__).parent.parent.parent


def get_config_path(filename: str = "settings.yaml") -> Path:
    """Get the path to a config file.

    Searches ``config/`` in the current directory and its parents, then
    falls back to the project's own ``config/`` directory.

    Args:
        filename: Name of the config file (default: settings.yaml)

    Returns:
        Path to the config file (which may not exist)

    """
    current = Path.cwd()
    for parent in [current] + list(current.parents):
        candidate = parent / "config" / filename
        if candidate.is_file():
            return candidate

    return get_project_root() / "config" / filename

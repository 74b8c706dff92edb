"""Utility functions for locating the project root and the .cssbuilder directory."""

from pathlib import Path

STATE_DIR = '.cssbuilder'


def get_project_root() -> Path:
    """Find the project root by searching upwards from the Current Working Directory.

    Stops at the first directory containing a marker file.
    """
    current_path = Path.cwd()

    markers = {'.git', 'pyproject.toml', STATE_DIR, 'requirements.txt'}

    for parent in [current_path] + list(current_path.parents):
        if any((parent / marker).exists() for marker in markers):
            return parent

    # No markers found (e.g. running in /tmp)
    return current_path


def get_logs_path() -> Path:
    """Return the path to the logs directory in .cssbuilder."""
    return get_project_root() / STATE_DIR / 'logs'


def init_cssbuilder() -> Path:
    """Create the .cssbuilder directory tree and return its path."""
    state_dir = get_project_root() / STATE_DIR
    (state_dir / 'logs').mkdir(parents=True, exist_ok=True)

    # Keep generated files out of source control
    gitignore = state_dir / '.gitignore'
    if not gitignore.exists():
        gitignore.write_text('# Automatically created by cssbuilder\n*\n')

    return state_dir

import subprocess
import tomllib
from importlib import metadata
from pathlib import Path

from jumper.config.settings import APP_NAME


def get_pyproject_version() -> str:
    pyproject_path = Path(__file__).parent.parent / "pyproject.toml"
    pyproject_data = tomllib.loads(pyproject_path.read_text())
    return pyproject_data["tool"]["poetry"]["version"]


def get_git_hash() -> str:
    result = subprocess.run(
        ["git", "rev-parse", "--short", "HEAD"],
        cwd=Path(__file__).parent,
        capture_output=True,
        text=True,
        check=True,
    )
    return result.stdout.strip()


def get_version() -> str:
    try:
        version = get_pyproject_version()
    except (OSError, KeyError, tomllib.TOMLDecodeError):
        # Get the version from the installed package metadata.
        try:
            return metadata.version(APP_NAME)
        except metadata.PackageNotFoundError:
            return "unknown"
    try:
        # For development: use pyproject version + git hash.
        return f"{version}+{get_git_hash()}"
    except (OSError, subprocess.CalledProcessError):
        return version


if __name__ == "__main__":
    print(get_version())

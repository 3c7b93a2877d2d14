"""Version lookup: the source checkout's pyproject.toml first, installed metadata second."""

import tomllib
from importlib import metadata
from pathlib import Path

DISTRIBUTION = "booltree"
UNKNOWN_VERSION = "0.0.0"

_PYPROJECT = Path(__file__).resolve().parents[2] / "pyproject.toml"


def _checkout_version(pyproject: Path) -> str | None:
    if not pyproject.is_file():
        return None
    with pyproject.open("rb") as f:
        project = tomllib.load(f).get("project", {})
    if project.get("name") != DISTRIBUTION:
        return None
    return project.get("version")


def get_version() -> str:
    found = _checkout_version(_PYPROJECT)
    if found is not None:
        return found
    try:
        return metadata.version(DISTRIBUTION)
    except metadata.PackageNotFoundError:
        return UNKNOWN_VERSION

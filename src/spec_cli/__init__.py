"""spec-cli: standardize the feature development workflow on top of git."""

import tomllib
from pathlib import Path

try:
    # Prefer pyproject.toml so development checkouts report the working version
    pyproject_path = Path(__file__).parent.parent.parent / "pyproject.toml"
    with open(pyproject_path, "rb") as f:
        data = tomllib.load(f)
    __version__ = data["project"]["version"]
except (OSError, KeyError, tomllib.TOMLDecodeError):
    # Installed (non-editable) package: read the distribution metadata
    try:
        from importlib.metadata import PackageNotFoundError, version

        __version__ = version("spec-cli")
    except PackageNotFoundError:
        __version__ = "0.0.0-dev"

"""Package version: installed distribution metadata first, pyproject.toml second."""
from __future__ import annotations

import re
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

_DIST_NAME = "rst-inline"
_PYPROJECT = Path(__file__).parent.parent / "pyproject.toml"


def _read_version() -> str:
    try:
        return version(_DIST_NAME)
    except PackageNotFoundError:
        pass
    # Source checkout without pip install -e .
    try:
        text = _PYPROJECT.read_text(encoding="utf-8")
    except OSError:
        return "0.0.0"
    match = re.search(r'^version\s*=\s*"([^"]+)"', text, re.MULTILINE)
    return match.group(1) if match else "0.0.0"


__version__: str = _read_version()

from __future__ import annotations

from pathlib import Path

VERSION_FILE = Path(__file__).with_name("VERSION")


def get_version(path: Path = VERSION_FILE) -> str:
    # Release version is the first line of the packaged VERSION file.
    lines = path.read_text(encoding="utf-8").splitlines()
    return lines[0].strip() if lines else ""

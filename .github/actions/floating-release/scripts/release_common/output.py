"""GitHub Actions output helpers."""

from __future__ import annotations

import os
from pathlib import Path

__all__ = ["write_output"]


def write_output(name: str, value: str) -> None:
    """Append ``name=value`` to the ``GITHUB_OUTPUT`` file when it is set."""
    output_path = os.environ.get("GITHUB_OUTPUT")
    if not output_path:
        return
    path = Path(output_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("a", encoding="utf-8") as handle:
        handle.write(f"{name}={value}\n")

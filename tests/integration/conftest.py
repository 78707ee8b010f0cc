"""Integration test fixtures.

Provides an isolated environment for running the CLI in a subprocess and a
helper to drive it. Buffer and settings fixtures come from tests/conftest.py.
"""

from __future__ import annotations

import os
import subprocess
import sys
from pathlib import Path
from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from collections.abc import Callable

_SRC_DIR = Path(__file__).resolve().parents[2] / "src"


@pytest.fixture()
def subprocess_env(tmp_path: Path) -> dict[str, str]:
    """Baseline env dict for subprocess-based CLI tests.

    Runs from an empty tmp directory so no local headinghandler.yaml is
    picked up, strips any HEADINGHANDLER__ overrides, and makes the source
    tree importable without an install.
    """
    env = {k: v for k, v in os.environ.items() if not k.startswith("HEADINGHANDLER__")}
    env["PYTHONPATH"] = os.pathsep.join(filter(None, [str(_SRC_DIR), env.get("PYTHONPATH")]))
    env["HEADINGHANDLER__LOGGING__LEVEL"] = "WARNING"
    env["HEADINGHANDLER__LOGGING__FORMAT"] = "json"
    return env


@pytest.fixture()
def run_cli(
    subprocess_env: dict[str, str], tmp_path: Path
) -> Callable[..., subprocess.CompletedProcess[str]]:
    """Run ``python -m headinghandler ARGS`` with ``stdin`` as the document."""

    def _run(*args: str, stdin: str = "") -> subprocess.CompletedProcess[str]:
        return subprocess.run(
            [sys.executable, "-m", "headinghandler", *args],
            input=stdin,
            capture_output=True,
            text=True,
            env=subprocess_env,
            cwd=tmp_path,
            timeout=60,
        )

    return _run

import os
import subprocess
import sys
import textwrap
from pathlib import Path

import pytest

from cfmt.numeric import FixedLocaleBackend, NumberSymbols


@pytest.fixture(autouse=True)
def _pin_default_locale(monkeypatch):
    # tests never depend on the locale of the machine running them
    monkeypatch.setenv("CFMT_LOCALE", "en")


@pytest.fixture
def en_backend():
    """Deterministic backend with en-US symbols."""
    return FixedLocaleBackend(NumberSymbols())


@pytest.fixture
def swiss_backend():
    """Deterministic backend with apostrophe grouping and comma decimals."""
    return FixedLocaleBackend(NumberSymbols(decimal=",", group="'", percent_pattern="{n} pct"))


def write(p: Path, text: str) -> Path:
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(textwrap.dedent(text).lstrip(), encoding="utf-8")
    return p


def run_cli(root: Path, *args: str, stdin: str | None = None) -> subprocess.CompletedProcess:
    env = os.environ.copy()
    return subprocess.run(
        [sys.executable, "-m", "cfmt.cli", *args],
        cwd=root, env=env, input=stdin, capture_output=True, text=True, encoding="utf-8"
    )

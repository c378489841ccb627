"""Fixtures for the browser tests of ``notebooks/scratchpad_app.py``.

``live_url`` serves the notebook with ``marimo run`` in headless mode.  The
notebook points at a session-wide temporary workspace through
``SCRATCHPAD_WORKSPACE``, so tests can inspect the notes directory on disk.
"""

from __future__ import annotations

import os
import subprocess
import sys
import time
from pathlib import Path

import pytest
import requests

_NOTEBOOK = Path(__file__).resolve().parents[2] / "notebooks" / "scratchpad_app.py"
_PORT = 2719
_URL = f"http://localhost:{_PORT}"
_STARTUP_SECONDS = 20


def _serve(workspace: Path) -> subprocess.Popen:
    command = [sys.executable, "-m", "marimo", "run", str(_NOTEBOOK), "--headless", "--port", str(_PORT)]
    return subprocess.Popen(
        command,
        env={**os.environ, "SCRATCHPAD_WORKSPACE": str(workspace)},
        cwd=str(_NOTEBOOK.parent),
        stdout=subprocess.PIPE,
        stderr=subprocess.PIPE,
    )


def _responding(session: requests.Session) -> bool:
    try:
        return session.get(_URL, timeout=1).ok
    except requests.RequestException:
        return False


def _stop(proc: subprocess.Popen) -> tuple[bytes, bytes]:
    proc.terminate()
    try:
        return proc.communicate(timeout=5)
    except subprocess.TimeoutExpired:
        proc.kill()
        return proc.communicate()


@pytest.fixture(scope="session")
def workspace(tmp_path_factory) -> Path:
    """Workspace seeded with a single note."""
    root = tmp_path_factory.mktemp("workspace")
    notes = root / ".scratchpad"
    notes.mkdir()
    (notes / "getting-started.md").write_text("# Getting started\n", encoding="utf-8")
    return root


@pytest.fixture(scope="session")
def live_url(workspace: Path):
    proc = _serve(workspace)
    with requests.Session() as session:
        started = time.monotonic()
        while not _responding(session):
            if proc.poll() is not None or time.monotonic() - started > _STARTUP_SECONDS:
                out, err = _stop(proc)
                pytest.fail(f"scratchpad app never answered on {_URL}\n{out.decode()}\n{err.decode()}")
            time.sleep(0.5)

    yield _URL

    _stop(proc)

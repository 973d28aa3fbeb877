"""Pytest configuration for test isolation.

Parser configuration and log level can be overridden through ``SMS_INGEST_*``
environment variables (and a local ``.env`` loaded by the CLI). A developer
shell or CI job that exports any of them would silently change expected
categories or acceptance policy, so every test starts from a clean slate.
"""

from __future__ import annotations

import os
from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def _isolate_sms_ingest_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    for name in list(os.environ):
        if name.startswith("SMS_INGEST_"):
            monkeypatch.delenv(name, raising=False)
    # The CLI reads .env from the working directory; use an empty one.
    monkeypatch.chdir(tmp_path)

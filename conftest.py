"""Root conftest: pins client settings before any module imports.

Values from ``.env.test`` (if present) override the defaults below, and
explicitly exported variables win over both. A developer's ``.env`` never
leaks a real token into the suite.
"""
from __future__ import annotations

import os
from pathlib import Path

_TEST_ENV = {
    "VQ_RESORT": "WDW",
    "VQ_ORIGIN": "",
    "VQ_ACCESS_TOKEN": "test-token",
    "HTTP_TIMEOUT": "5",
}

_env_test = Path(__file__).resolve().parent / ".env.test"
if _env_test.exists():
    for line in _env_test.read_text().splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        key, _, value = line.partition("=")
        _TEST_ENV[key.strip()] = value.strip()

for key, value in _TEST_ENV.items():
    os.environ.setdefault(key, value)

from __future__ import annotations

import pytest

from kennitolur.config import LOG_LEVEL_ENV_VAR, OUTPUT_FORMAT_ENV_VAR


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(LOG_LEVEL_ENV_VAR, raising=False)
    monkeypatch.delenv(OUTPUT_FORMAT_ENV_VAR, raising=False)

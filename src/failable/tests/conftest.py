from __future__ import annotations

from collections.abc import Iterator

import pytest

from failable.foundation.config import clear_settings_cache
from failable.runtime.observability import configure_logging


@pytest.fixture(autouse=True)
def quiet_logging() -> Iterator[None]:
    """Silence logging and drop cached settings around every test."""
    clear_settings_cache()
    configure_logging("none", "INFO")
    yield
    configure_logging("none", "INFO")
    clear_settings_cache()

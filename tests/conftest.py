"""Fixtures compartilhadas da suíte do gateway de fax."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from pathlib import Path

import pytest

# Imports absolutos a partir de src/ (api, app, config, utils)
_SRC = Path(__file__).resolve().parent.parent / "src"
if str(_SRC) not in sys.path:
    sys.path.insert(0, str(_SRC))

from config.settings import (  # noqa: E402
    get_base_settings,
    get_conversion_settings,
    get_interfax_settings,
    get_upload_settings,
)

_SETTINGS_GETTERS = (
    get_base_settings,
    get_conversion_settings,
    get_interfax_settings,
    get_upload_settings,
)


@pytest.fixture
def fresh_settings() -> Iterator[None]:
    """Descarta settings cacheadas antes e depois do teste.

    Necessário sempre que o teste altera variáveis de ambiente com
    monkeypatch e depois lê `get_*_settings()`.
    """
    for getter in _SETTINGS_GETTERS:
        getter.cache_clear()
    yield
    for getter in _SETTINGS_GETTERS:
        getter.cache_clear()

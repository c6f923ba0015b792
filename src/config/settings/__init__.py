"""Agregador de settings do gateway de fax.

Re-exporta todas as settings e funções de cada módulo.
Organização por domínio para isolamento de mudanças.
"""

from __future__ import annotations

# Base settings
from config.settings.base import (
    BaseSettings,
    Environment,
    get_base_settings,
)

# Conversão TIFF → PDF
from config.settings.conversion import (
    DEFAULT_TIFF2PDF_PATH,
    ConversionSettings,
    get_conversion_settings,
)

# Provider
from config.settings.interfax import (
    DEFAULT_LIST_WINDOW_SIZE,
    INTERFAX_API_BASE_URL,
    InterfaxSettings,
    get_interfax_settings,
)

# Upload
from config.settings.upload import (
    DEFAULT_ALLOWED_EXTENSIONS,
    DEFAULT_MAX_UPLOAD_BYTES,
    UploadSettings,
    get_upload_settings,
)

__all__ = [
    # Constants
    "DEFAULT_ALLOWED_EXTENSIONS",
    "DEFAULT_LIST_WINDOW_SIZE",
    "DEFAULT_MAX_UPLOAD_BYTES",
    "DEFAULT_TIFF2PDF_PATH",
    "INTERFAX_API_BASE_URL",
    # Base
    "BaseSettings",
    "ConversionSettings",
    "Environment",
    "InterfaxSettings",
    "UploadSettings",
    "get_base_settings",
    "get_conversion_settings",
    "get_interfax_settings",
    "get_upload_settings",
]

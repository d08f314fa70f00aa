"""
Configuration
=============
This module serves as the central registry for global constants and the
user-overridable settings.

Why is this file needed?
------------------------
1. Abstraction: It keeps the API address and request limits out of the
   controller and client code.
2. Overrides: Values can be changed per user through the application's INI
   settings (QSettings) without editing code.

Exports:
    API_BASE_URL (str): Root of the trivia API.
    CATEGORY_POOL_SIZE (int): How many category ids to request before sampling.
    REQUEST_TIMEOUT (int): Total HTTP timeout in seconds.
    PLACEHOLDER (str): Glyph shown on a cell before it is revealed.
    AppSettings: Settings resolved from QSettings with the constants as defaults.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from PySide6.QtCore import QSettings

# Global Constants
API_BASE_URL: str = "https://rithm-jeopardy.herokuapp.com/api"
CATEGORY_POOL_SIZE: int = 100
REQUEST_TIMEOUT: int = 10
PLACEHOLDER: str = "?"


@dataclass
class AppSettings:
    api_base_url: str = API_BASE_URL
    request_timeout: int = REQUEST_TIMEOUT
    category_pool_size: int = CATEGORY_POOL_SIZE
    log_level: int = logging.INFO
    log_file: Optional[str] = None

    @classmethod
    def load(cls, settings: Optional[QSettings] = None) -> AppSettings:
        """Read overrides from QSettings, falling back to the module constants."""
        s = settings if settings is not None else QSettings()

        level_name = str(s.value("log/level", "INFO")).upper()
        level = logging.getLevelName(level_name)
        if not isinstance(level, int):
            level = logging.INFO

        log_file = s.value("log/file", "", type=str) or None

        return cls(
            api_base_url=s.value("api/base_url", API_BASE_URL, type=str),
            request_timeout=s.value("api/timeout", REQUEST_TIMEOUT, type=int),
            category_pool_size=s.value("api/category_pool_size", CATEGORY_POOL_SIZE, type=int),
            log_level=level,
            log_file=log_file,
        )

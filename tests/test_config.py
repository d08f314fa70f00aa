"""Test settings resolution from QSettings."""

import logging

from PySide6.QtCore import QSettings

from jeopardy.config import API_BASE_URL, CATEGORY_POOL_SIZE, REQUEST_TIMEOUT, AppSettings


def test_defaults_when_nothing_stored(tmp_path):
    settings = QSettings(str(tmp_path / "empty.ini"), QSettings.Format.IniFormat)

    loaded = AppSettings.load(settings)

    assert loaded.api_base_url == API_BASE_URL
    assert loaded.request_timeout == REQUEST_TIMEOUT
    assert loaded.category_pool_size == CATEGORY_POOL_SIZE
    assert loaded.log_level == logging.INFO
    assert loaded.log_file is None


def test_overrides_from_ini(tmp_path):
    path = str(tmp_path / "jeopardy.ini")
    settings = QSettings(path, QSettings.Format.IniFormat)
    settings.setValue("api/base_url", "http://localhost:5000/api")
    settings.setValue("api/timeout", 3)
    settings.setValue("api/category_pool_size", 20)
    settings.setValue("log/level", "debug")
    settings.setValue("log/file", str(tmp_path / "app.log"))
    settings.sync()

    loaded = AppSettings.load(QSettings(path, QSettings.Format.IniFormat))

    assert loaded.api_base_url == "http://localhost:5000/api"
    assert loaded.request_timeout == 3
    assert loaded.category_pool_size == 20
    assert loaded.log_level == logging.DEBUG
    assert loaded.log_file == str(tmp_path / "app.log")


def test_unknown_log_level_falls_back_to_info(tmp_path):
    settings = QSettings(str(tmp_path / "bad.ini"), QSettings.Format.IniFormat)
    settings.setValue("log/level", "chatty")

    assert AppSettings.load(settings).log_level == logging.INFO

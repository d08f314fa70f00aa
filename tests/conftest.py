import os

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PySide6.QtWidgets import QApplication  # noqa: E402

from helpers import FakeDataSource, make_category  # noqa: E402
from jeopardy.model.board import NUM_CATEGORIES, Board, load_board  # noqa: E402


@pytest.fixture(scope="session")
def qapp() -> QApplication:
    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture
def board() -> Board:
    return load_board([make_category(c) for c in range(NUM_CATEGORIES)])


@pytest.fixture
def fake_source() -> FakeDataSource:
    return FakeDataSource({c: make_category(c) for c in range(NUM_CATEGORIES)})

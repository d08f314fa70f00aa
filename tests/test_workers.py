"""Test the background board loader, running its body on the test thread."""

from helpers import FakeDataSource, make_category
from jeopardy.controller.game import GameController, GameState
from jeopardy.controller.workers import BoardLoaderWorker
from jeopardy.model.board import NUM_CATEGORIES


def test_run_emits_board_loaded(qapp, fake_source: FakeDataSource):
    controller = GameController(fake_source)
    worker = BoardLoaderWorker(controller)
    loaded, errors = [], []
    worker.board_loaded.connect(loaded.append)
    worker.error_occurred.connect(errors.append)

    worker.run()

    assert errors == []
    assert len(loaded) == 1
    assert loaded[0] is controller.board
    assert controller.state is GameState.READY


def test_run_emits_error_on_failure(qapp):
    source = FakeDataSource({c: make_category(c) for c in range(NUM_CATEGORIES)}, fail_on_call=3)
    controller = GameController(source)
    worker = BoardLoaderWorker(controller)
    loaded, errors = [], []
    worker.board_loaded.connect(loaded.append)
    worker.error_occurred.connect(errors.append)

    worker.run()

    assert loaded == []
    assert len(errors) == 1
    assert "Connection reset" in errors[0]
    assert controller.board is None
    assert controller.state is GameState.IDLE

"""
Application Initialization
==========================
This module wires the controller, the data source and the main window
together and starts the Qt Event Loop.

Why is this file needed?
------------------------
It acts as the "Dependency Injection" root. It:
1. Configures logging from the user's settings.
2. Instantiates the API client and the GameController.
3. Passes the controller into the MainWindow so they can communicate.
"""
import logging

from jeopardy.application import create_app
from jeopardy.config import AppSettings
from jeopardy.controller.api_client import JeopardyClient
from jeopardy.controller.game import GameController
from jeopardy.logging_config import setup_logging
from jeopardy.view.main_window import MainWindow

logger = logging.getLogger(__name__)


def main() -> int:
    # 1. Create the Qt Application (also sets up QSettings)
    app = create_app()

    # 2. Setup Logging
    settings = AppSettings.load()
    setup_logging(level=settings.log_level, log_file=settings.log_file)
    logger.info(f"Using trivia API at {settings.api_base_url}")

    # 3. Controller and its data source
    client = JeopardyClient(base_url=settings.api_base_url, timeout=settings.request_timeout)
    controller = GameController(client, category_pool_size=settings.category_pool_size)

    # 4. Main Window
    window = MainWindow(controller)
    window.show()

    # 5. Start Event Loop
    return app.exec()

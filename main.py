# main.py
import logging
import os
import sys

from PyQt5.QtGui import QIcon
from PyQt5.QtWidgets import QApplication

import config
from list_sync import ListSynchronizer
from todo_api import TodoApiClient
from todo_list_ui import TodoListUI

logger = logging.getLogger(__name__)


def main(argv=None):
    logging.basicConfig(level=config.LOG_LEVEL, format=config.LOG_FORMAT)
    app = QApplication(argv if argv is not None else sys.argv)

    # Ensure you have an 'icons' directory with 'todo_icon.png' in your project root
    icon_path = os.path.join("icons", "todo_icon.png")
    if os.path.exists(icon_path):
        app.setWindowIcon(QIcon(icon_path))

    api = TodoApiClient()
    logger.info("Using todo API at %s", api.collection_url)
    synchronizer = ListSynchronizer(api)
    window = TodoListUI(synchronizer)
    window.show()
    window.refresh() # Initial load
    try:
        return app.exec_()
    finally:
        api.close()


if __name__ == "__main__":
    sys.exit(main())

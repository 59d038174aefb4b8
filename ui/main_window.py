# ui/main_window.py
from typing import Optional, Union

from PyQt6.QtWidgets import QMainWindow, QMessageBox

from models.app_models import Screen
from services.app_controller import AppController
from ui.screens.display_screen import DisplayScreen
from ui.screens.input_screen import InputScreen
from utils.constants import APP_NAME
from utils.logger import get_logger

logger = get_logger('main_window')


class MainWindow(QMainWindow):
    """
    アプリケーションのメインウィンドウ。

    コントローラの screen_changed シグナルを受けて、入力画面と
    QRコード表示画面を切り替えます。画面を切り替えるたびに新しい
    ウィジェットを作成するため、画面ごとのUI状態は引き継がれません。
    """
    def __init__(self, controller: AppController) -> None:
        super().__init__()
        self.setWindowTitle(APP_NAME)
        self.setGeometry(100, 100, 540, 720)
        self.controller = controller
        self.current_view: Optional[Union[InputScreen, DisplayScreen]] = None

        self.controller.screen_changed.connect(self.show_screen)
        self.controller.error_occurred.connect(self.show_error)

    def show_screen(self, screen: Screen) -> None:
        """指定された画面のウィジェットを作成して表示する。"""
        if self.current_view is not None:
            self.current_view.release()

        if screen is Screen.INPUT:
            view = InputScreen(self.controller)
        else:
            view = DisplayScreen(self.controller)
        logger.debug("画面を切り替えました: %s", screen.value)

        # setCentralWidget は以前のウィジェットを削除する
        self.current_view = view
        self.setCentralWidget(view)

    def show_error(self, message: str) -> None:
        QMessageBox.warning(self, APP_NAME, f"Could not save the text.\n{message}")

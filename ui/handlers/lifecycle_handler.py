from __future__ import annotations
from typing import Callable, Optional

from PyQt6.QtCore import QObject, Qt
from PyQt6.QtGui import QGuiApplication

from utils.logger import get_logger

logger = get_logger('lifecycle')


class ResumeWatcher(QObject):
    """
    アプリケーションが再びアクティブになったこと（再開）を通知するクラス。

    QGuiApplication.applicationStateChanged を購読し、ApplicationActive への
    遷移ごとにコールバックを呼び出します。attach() から detach() までの間だけ
    購読します。
    """
    def __init__(self, on_resume: Callable[[], None], parent: Optional[QObject] = None) -> None:
        """
        ResumeWatcherのコンストラクタ。

        Args:
            on_resume (Callable[[], None]): 再開時に呼び出す関数。
            parent (Optional[QObject]): 親オブジェクト。
        """
        super().__init__(parent)
        self.on_resume = on_resume
        self._attached: bool = False

    @property
    def attached(self) -> bool:
        return self._attached

    def attach(self) -> None:
        """再開通知の購読を開始する。"""
        app = QGuiApplication.instance()
        if self._attached or app is None:
            return
        app.applicationStateChanged.connect(self._handle_state_changed)
        self._attached = True
        logger.debug("再開通知の購読を開始しました。")

    def detach(self) -> None:
        """再開通知の購読を終了する。"""
        app = QGuiApplication.instance()
        if not self._attached or app is None:
            return
        app.applicationStateChanged.disconnect(self._handle_state_changed)
        self._attached = False
        logger.debug("再開通知の購読を終了しました。")

    def _handle_state_changed(self, state: Qt.ApplicationState) -> None:
        if state == Qt.ApplicationState.ApplicationActive:
            self.on_resume()

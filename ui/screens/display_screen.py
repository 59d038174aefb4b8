# ui/screens/display_screen.py
"""
QRコードを表示する画面のUIコンポーネントを提供します。

このモジュールには、保存された識別子と今日の日付から生成したQRコードを
表示する DisplayScreen クラスが含まれています。ハンバーガーボタンで開く
サイドメニュー（ドロワー）から、テキストの変更とAboutダイアログを選べます。
"""
from __future__ import annotations
from typing import TYPE_CHECKING, Optional

from PyQt6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QLabel, QListWidget, QToolButton
)
from PyQt6.QtCore import Qt
from PyQt6.QtGui import QFont

from models.app_models import GeneratedCode
from ui.components import pil_to_pixmap
from ui.dialogs import AboutDialog
from ui.handlers.lifecycle_handler import ResumeWatcher
from utils.constants import (
    ABOUT_CREATOR, ABOUT_LINKS, APP_NAME, DISPLAY_CODE_SIZE, ENCODING_ERROR_TEXT
)

if TYPE_CHECKING:
    from services.app_controller import AppController


class DisplayScreen(QWidget):
    """
    QRコード表示画面のメインウィジェット。

    画面が存在する間だけアプリケーションの再開通知を購読し、
    再開のたびにQRコードを今日の日付で作り直します。
    """
    MENU_CHANGE_TEXT: str = "Change QR Text"
    MENU_ABOUT: str = "About"

    def __init__(self, controller: AppController, parent: Optional[QWidget] = None) -> None:
        """
        DisplayScreenのコンストラクタ。

        Args:
            controller (AppController): アプリケーションコントローラ。
            parent (Optional[QWidget]): 親ウィジェット。
        """
        super().__init__(parent)
        self.controller = controller
        self.about_dialog: Optional[AboutDialog] = None

        # --- UI要素の型定義 ---
        self.menu_button: QToolButton
        self.title_label: QLabel
        self.drawer: QListWidget
        self.code_label: QLabel
        self.date_label: QLabel

        self.setup_ui()
        self.setup_connections()

        self.resume_watcher = ResumeWatcher(self.controller.on_resume, self)
        self.resume_watcher.attach()

        self._sync_display_state()
        if self.controller.generated_code is not None:
            self.show_code(self.controller.generated_code)

    def setup_ui(self) -> None:
        """UIの構築とレイアウト設定を行う。"""
        layout = QVBoxLayout(self)

        title_layout = QHBoxLayout()
        self.menu_button = QToolButton()
        self.menu_button.setText("☰")
        self.menu_button.setToolTip("Menu")
        self.title_label = QLabel(APP_NAME)
        font = QFont(self.title_label.font())
        font.setPointSize(font.pointSize() + 4)
        self.title_label.setFont(font)
        title_layout.addWidget(self.menu_button)
        title_layout.addWidget(self.title_label)
        title_layout.addStretch()
        layout.addLayout(title_layout)

        body_layout = QHBoxLayout()
        self.drawer = QListWidget()
        self.drawer.addItems([self.MENU_CHANGE_TEXT, self.MENU_ABOUT])
        self.drawer.setFixedWidth(220)
        self.drawer.setVisible(False)
        body_layout.addWidget(self.drawer)

        code_layout = QVBoxLayout()
        code_layout.addStretch()
        self.code_label = QLabel()
        self.code_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.code_label.setMinimumSize(DISPLAY_CODE_SIZE, DISPLAY_CODE_SIZE)
        code_layout.addWidget(self.code_label)
        code_layout.addSpacing(16)
        self.date_label = QLabel()
        self.date_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        code_layout.addWidget(self.date_label)
        code_layout.addStretch()
        body_layout.addLayout(code_layout, 1)

        layout.addLayout(body_layout)

    def setup_connections(self) -> None:
        """シグナルとスロットを接続する。"""
        self.menu_button.clicked.connect(self.controller.toggle_drawer)
        self.drawer.itemClicked.connect(self._on_menu_item_clicked)
        self.controller.code_updated.connect(self.show_code)
        self.controller.display_state_changed.connect(self._sync_display_state)

    def show_code(self, code: GeneratedCode) -> None:
        """
        生成されたQRコードを表示する。失敗時はエラーメッセージを表示する。

        Args:
            code (GeneratedCode): 表示するQRコード。
        """
        if code.ok:
            pixmap = pil_to_pixmap(code.bitmap).scaled(
                DISPLAY_CODE_SIZE, DISPLAY_CODE_SIZE,
                Qt.AspectRatioMode.KeepAspectRatio,
                Qt.TransformationMode.FastTransformation
            )
            self.code_label.setPixmap(pixmap)
            self.date_label.setText(f"Date: {code.date}")
            self.date_label.setVisible(True)
        else:
            self.code_label.clear()
            self.code_label.setText(ENCODING_ERROR_TEXT)
            self.date_label.setVisible(False)

    def _on_menu_item_clicked(self, item) -> None:
        """ドロワーのメニュー項目が選ばれたときの処理。"""
        self.drawer.clearSelection()
        if item.text() == self.MENU_CHANGE_TEXT:
            self.controller.request_edit()
        elif item.text() == self.MENU_ABOUT:
            self.controller.show_about()

    def _sync_display_state(self) -> None:
        """ドロワーとAboutダイアログの表示をコントローラの状態に合わせる。"""
        state = self.controller.display_state
        if state is None:
            return
        self.drawer.setVisible(state.drawer_open)

        if state.about_dialog_visible and self.about_dialog is None:
            self.about_dialog = AboutDialog(self.controller, ABOUT_CREATOR, ABOUT_LINKS, self)
            self.about_dialog.finished.connect(lambda _result: self.controller.hide_about())
            self.about_dialog.open()
        elif not state.about_dialog_visible and self.about_dialog is not None:
            dialog, self.about_dialog = self.about_dialog, None
            if dialog.isVisible():
                dialog.reject()
            dialog.deleteLater()

    def release(self) -> None:
        """画面を離れる前に、再開通知の購読とシグナル接続を解除する。"""
        self.resume_watcher.detach()
        self.controller.code_updated.disconnect(self.show_code)
        self.controller.display_state_changed.disconnect(self._sync_display_state)
        if self.about_dialog is not None:
            dialog, self.about_dialog = self.about_dialog, None
            dialog.finished.disconnect()
            dialog.close()
            dialog.deleteLater()

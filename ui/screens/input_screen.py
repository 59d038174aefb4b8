# ui/screens/input_screen.py
"""
識別子を入力する画面のUIコンポーネントを提供します。

このモジュールには、QRコードに埋め込むテキストを入力・保存するための
InputScreen クラスが含まれています。
"""
from __future__ import annotations
from typing import TYPE_CHECKING, Optional

from PyQt6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QLabel, QLineEdit, QPushButton, QToolButton
)
from PyQt6.QtCore import Qt
from PyQt6.QtGui import QFont

from ui.dialogs import HelpDialog
from utils.constants import HELP_PAGES, INPUT_LABEL, INPUT_TITLE

if TYPE_CHECKING:
    from services.app_controller import AppController


class InputScreen(QWidget):
    """
    入力画面のメインウィジェット。

    タイトルバー（ヘルプボタン付き）、テキスト入力欄、保存ボタンから構成されます。
    空白のみのテキストで保存しても画面は切り替わりません。
    """

    def __init__(self, controller: AppController, parent: Optional[QWidget] = None) -> None:
        """
        InputScreenのコンストラクタ。

        Args:
            controller (AppController): アプリケーションコントローラ。
            parent (Optional[QWidget]): 親ウィジェット。
        """
        super().__init__(parent)
        self.controller = controller
        self.help_dialog: Optional[HelpDialog] = None

        # --- UI要素の型定義 ---
        self.title_label: QLabel
        self.help_button: QToolButton
        self.text_edit: QLineEdit
        self.save_button: QPushButton

        self.setup_ui()
        self.setup_connections()

    def setup_ui(self) -> None:
        """UIの構築とレイアウト設定を行う。"""
        layout = QVBoxLayout(self)
        layout.setContentsMargins(16, 16, 16, 16)
        layout.addLayout(self._create_title_bar_layout())
        layout.addStretch()

        layout.addWidget(QLabel(INPUT_LABEL))
        self.text_edit = QLineEdit()
        self.text_edit.setPlaceholderText(INPUT_LABEL)
        state = self.controller.input_state
        if state is not None:
            self.text_edit.setText(state.draft_text)
        layout.addWidget(self.text_edit)

        layout.addSpacing(16)
        self.save_button = QPushButton("Save")
        layout.addWidget(self.save_button)
        layout.addStretch()

    def _create_title_bar_layout(self) -> QHBoxLayout:
        """タイトルとヘルプボタンを並べたレイアウトを作成する。"""
        title_layout = QHBoxLayout()
        self.title_label = QLabel(INPUT_TITLE)
        font = QFont(self.title_label.font())
        font.setPointSize(font.pointSize() + 4)
        self.title_label.setFont(font)

        self.help_button = QToolButton()
        self.help_button.setText("?")
        self.help_button.setToolTip("Help")

        title_layout.addWidget(self.title_label)
        title_layout.addStretch()
        title_layout.addWidget(self.help_button)
        return title_layout

    def setup_connections(self) -> None:
        """シグナルとスロットを接続する。"""
        self.text_edit.textChanged.connect(self.controller.update_draft)
        self.text_edit.returnPressed.connect(self.save)
        self.save_button.clicked.connect(self.save)
        self.help_button.clicked.connect(self.controller.open_help)
        self.controller.input_state_changed.connect(self._on_input_state_changed)

    def save(self) -> None:
        """入力欄のテキストを保存する。空白のみの場合は何も起きない。"""
        if not self.controller.save(self.text_edit.text()):
            self.text_edit.setFocus(Qt.FocusReason.OtherFocusReason)

    def _on_input_state_changed(self) -> None:
        """ヘルプダイアログの表示状態をコントローラの状態に合わせる。"""
        state = self.controller.input_state
        visible = state is not None and state.help_dialog_visible

        if visible and self.help_dialog is None:
            self.help_dialog = HelpDialog(self.controller, HELP_PAGES, self)
            self.help_dialog.finished.connect(lambda _result: self.controller.close_help())
            self.help_dialog.open()
        elif visible:
            self.help_dialog.refresh()
        elif self.help_dialog is not None:
            dialog, self.help_dialog = self.help_dialog, None
            if dialog.isVisible():
                dialog.reject()
            dialog.deleteLater()

    def release(self) -> None:
        """画面を離れる前に、開いているダイアログとシグナル接続を片付ける。"""
        self.controller.input_state_changed.disconnect(self._on_input_state_changed)
        if self.help_dialog is not None:
            dialog, self.help_dialog = self.help_dialog, None
            dialog.finished.disconnect()
            dialog.close()
            dialog.deleteLater()

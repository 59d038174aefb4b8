# ui/dialogs/help_dialog.py
"""
使い方を画像で説明するヘルプダイアログを提供します。

このモジュールには、ヘルプ画像を1枚ずつ切り替えて表示する
HelpDialog クラスが含まれています。
"""
from __future__ import annotations
import os
from typing import TYPE_CHECKING, List, Optional

from PyQt6.QtWidgets import (
    QDialog, QVBoxLayout, QHBoxLayout, QLabel, QToolButton, QWidget
)
from PyQt6.QtCore import Qt
from PyQt6.QtGui import QPixmap

from models.app_models import HelpPage

if TYPE_CHECKING:
    from services.app_controller import AppController


class HelpDialog(QDialog):
    """
    ヘルプ画像のカルーセルを表示するダイアログ。

    表示中のページ番号はコントローラの InputScreenState が保持しており、
    このダイアログは矢印ボタンの操作をコントローラに伝えて再描画するだけです。
    矢印は移動できる場合にのみ表示されます。
    """
    IMAGE_SIZE: int = 600

    def __init__(self, controller: AppController, pages: List[HelpPage], parent: Optional[QWidget] = None) -> None:
        """
        HelpDialogのコンストラクタ。

        Args:
            controller (AppController): アプリケーションコントローラ。
            pages (List[HelpPage]): 表示するヘルプページのリスト。
            parent (Optional[QWidget]): 親ウィジェット。
        """
        super().__init__(parent)
        self.setWindowTitle("Help")
        self.controller = controller
        self.pages = pages

        self.image_label: QLabel
        self.caption_label: QLabel
        self.previous_button: QToolButton
        self.next_button: QToolButton
        self.close_button: QToolButton

        self.setup_ui()
        self.setup_connections()
        self.refresh()

    def setup_ui(self) -> None:
        """UIの構築とレイアウト設定を行う。"""
        layout = QVBoxLayout(self)

        self.image_label = QLabel()
        self.image_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.image_label.setFixedSize(self.IMAGE_SIZE, self.IMAGE_SIZE)
        self.image_label.setWordWrap(True)
        layout.addWidget(self.image_label)

        self.caption_label = QLabel()
        self.caption_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self.caption_label)

        nav_layout = QHBoxLayout()
        self.previous_button = QToolButton()
        self.previous_button.setArrowType(Qt.ArrowType.LeftArrow)
        self.previous_button.setToolTip("Previous")
        self.next_button = QToolButton()
        self.next_button.setArrowType(Qt.ArrowType.RightArrow)
        self.next_button.setToolTip("Next")
        self.close_button = QToolButton()
        self.close_button.setText("✕")
        self.close_button.setToolTip("Close")

        nav_layout.addWidget(self.previous_button)
        nav_layout.addStretch()
        nav_layout.addWidget(self.next_button)
        layout.addLayout(nav_layout)

        close_layout = QHBoxLayout()
        close_layout.addStretch()
        close_layout.addWidget(self.close_button)
        layout.addLayout(close_layout)

    def setup_connections(self) -> None:
        self.previous_button.clicked.connect(self.controller.previous_help_image)
        self.next_button.clicked.connect(self.controller.next_help_image)
        self.close_button.clicked.connect(self.reject)

    def refresh(self) -> None:
        """コントローラの状態に合わせて画像と矢印ボタンを更新する。"""
        state = self.controller.input_state
        if state is None:
            return
        page = self.pages[state.help_image_index]

        # 画像ファイルがない場合は説明文だけを表示する
        pixmap = QPixmap(page.image_path) if os.path.exists(page.image_path) else QPixmap()
        if pixmap.isNull():
            self.image_label.setPixmap(QPixmap())
            self.image_label.setText(page.caption)
        else:
            self.image_label.setPixmap(pixmap.scaled(
                self.IMAGE_SIZE, self.IMAGE_SIZE,
                Qt.AspectRatioMode.KeepAspectRatio,
                Qt.TransformationMode.SmoothTransformation
            ))
        self.caption_label.setText(f"{page.caption}\n{state.help_image_index + 1} / {len(self.pages)}")

        self.previous_button.setVisible(self.controller.can_go_previous)
        self.next_button.setVisible(self.controller.can_go_next)

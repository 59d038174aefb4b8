# ui/dialogs/about_dialog.py
"""
アプリケーションの作者情報を表示するAboutダイアログを提供します。
"""
from __future__ import annotations
from typing import TYPE_CHECKING, List, Optional

from PyQt6.QtWidgets import QDialog, QVBoxLayout, QLabel, QDialogButtonBox, QWidget

from models.app_models import AboutLink
from ui.components import ClickableLabel

if TYPE_CHECKING:
    from services.app_controller import AppController


class AboutDialog(QDialog):
    """
    作者名と外部リンクを表示するダイアログ。

    リンク行をクリックするとコントローラ経由でブラウザが開きます。
    リンクを開いてもダイアログは閉じません。
    """
    def __init__(
        self,
        controller: AppController,
        creator: str,
        links: List[AboutLink],
        parent: Optional[QWidget] = None
    ) -> None:
        """
        AboutDialogのコンストラクタ。

        Args:
            controller (AppController): アプリケーションコントローラ。
            creator (str): 作者を表す文字列。
            links (List[AboutLink]): 表示するリンクのリスト。
            parent (Optional[QWidget]): 親ウィジェット。
        """
        super().__init__(parent)
        self.setWindowTitle("About")
        self.controller = controller
        self.link_labels: List[ClickableLabel] = []

        layout = QVBoxLayout(self)
        layout.addWidget(QLabel(creator))

        for link in links:
            label = ClickableLabel(link.label)
            label.setStyleSheet("color: palette(link);")
            # ループ変数を束縛するためデフォルト引数で渡す
            label.clicked.connect(lambda url=link.url: self.controller.open_link(url))
            self.link_labels.append(label)
            layout.addWidget(label)

        button_box = QDialogButtonBox(QDialogButtonBox.StandardButton.Close)
        button_box.rejected.connect(self.reject)
        layout.addWidget(button_box)

# ui/components.py
"""
アプリケーション全体で再利用されるカスタムUIコンポーネントを提供します。

- ClickableLabel: クリックイベントを送信する機能を持つラベル。
- pil_to_pixmap: PillowのイメージをQPixmapに変換する関数。
"""
from __future__ import annotations
import io

from PIL import Image
from PyQt6.QtWidgets import QLabel
from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtGui import QMouseEvent, QPixmap


class ClickableLabel(QLabel):
    """
    クリックされると 'clicked' シグナルを発するカスタムQLabel。
    カーソルがポインティングハンドカーソルに変わります。
    """
    clicked = pyqtSignal()

    def __init__(self, *args, **kwargs) -> None:
        """ClickableLabelのコンストラクタ。"""
        super().__init__(*args, **kwargs)
        self.setCursor(Qt.CursorShape.PointingHandCursor)

    def mouseReleaseEvent(self, event: QMouseEvent) -> None:
        """
        マウスの左ボタンが離されたときに 'clicked' シグナルを発する。
        """
        if event.button() == Qt.MouseButton.LeftButton:
            self.clicked.emit()
        super().mouseReleaseEvent(event)


def pil_to_pixmap(image: Image.Image) -> QPixmap:
    """
    PillowのイメージをPNG経由でQPixmapに変換する。

    Args:
        image (Image.Image): 変換元の画像。

    Returns:
        QPixmap: 変換後のピクスマップ。変換できなかった場合はnullのQPixmap。
    """
    buffer = io.BytesIO()
    image.save(buffer, format='PNG')
    pixmap = QPixmap()
    pixmap.loadFromData(buffer.getvalue(), 'PNG')
    return pixmap

# models/app_models.py
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


class Screen(Enum):
    """現在表示している画面の種類。"""
    INPUT = "input"
    DISPLAY = "display"


@dataclass
class AppState:
    """アプリケーションセッション全体の状態を表現するデータモデル。

    Attributes:
        stored_identifier (Optional[str]): 永続化されている識別子。未設定の場合はNone。
        current_screen (Screen): 現在の画面。DISPLAYのときstored_identifierは必ず設定済み。
    """
    stored_identifier: Optional[str] = None
    current_screen: Screen = Screen.INPUT


@dataclass
class InputScreenState:
    """入力画面が表示されている間だけ存在する一時的な状態。

    Attributes:
        draft_text (str): 編集中のテキスト。
        help_dialog_visible (bool): ヘルプダイアログを表示中かどうか。
        help_image_index (int): ヘルプ画像の現在のインデックス。
    """
    draft_text: str = ""
    help_dialog_visible: bool = False
    help_image_index: int = 0


@dataclass
class DisplayScreenState:
    """QRコード表示画面が表示されている間だけ存在する一時的な状態。

    Attributes:
        drawer_open (bool): サイドメニュー（ドロワー）が開いているかどうか。
        about_dialog_visible (bool): Aboutダイアログを表示中かどうか。
        last_refresh_timestamp (int): 最後に再開イベントを受けた時刻（ミリ秒）。
    """
    drawer_open: bool = False
    about_dialog_visible: bool = False
    last_refresh_timestamp: int = 0


@dataclass
class GeneratedCode:
    """保存された識別子と日付から生成されたQRコード。

    Attributes:
        payload (str): QRコードに埋め込む文字列。
        date (str): 生成に使用した日付（YYYY-MM-DD）。
        bitmap (Optional[Any]): エンコード結果の画像（PIL.Image）。失敗時はNone。
        error (Optional[str]): エンコードに失敗した場合のエラーメッセージ。
    """
    payload: str
    date: str
    bitmap: Optional[Any] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.bitmap is not None


@dataclass
class HelpPage:
    """ヘルプカルーセルの1ページ。"""
    image_path: str
    caption: str


@dataclass
class AboutLink:
    """Aboutダイアログ内のリンク行。"""
    label: str
    url: str

# services/app_controller.py
"""
画面遷移と表示データを一元管理するアプリケーションコントローラを提供します。

コントローラは「入力画面（INPUT）」と「QRコード表示画面（DISPLAY）」の
2状態を持つ状態機械です。UIはイベントをコントローラのメソッドとして呼び出し、
コントローラが発するシグナルを受けて再描画します。
"""
from __future__ import annotations
import time
from typing import Callable, Optional

from PyQt6.QtCore import QObject, QUrl, pyqtSignal
from PyQt6.QtGui import QDesktopServices

from models.app_models import (
    AppState, DisplayScreenState, GeneratedCode, InputScreenState, Screen
)
from services.code_service import CodeService
from services.identifier_service import IdentifierService
from services.storage_service import StorageError
from utils.constants import HELP_PAGES
from utils.logger import get_logger

logger = get_logger('controller')

LinkOpener = Callable[[str], None]


def open_url_in_browser(url: str) -> None:
    """OS既定のアプリケーションでURLを開く。"""
    QDesktopServices.openUrl(QUrl(url))


class AppController(QObject):
    """
    アプリケーション全体の状態（AppState）を所有する唯一のコントローラ。

    画面ごとの一時状態（InputScreenState / DisplayScreenState）は画面に入るときに
    作成され、画面を離れるときに破棄されます。すべてのメソッドはQtの
    イベントスレッド上で順番に呼び出されることを前提としています。

    Signals:
        screen_changed (pyqtSignal): 画面が切り替わったときに新しい Screen を送信します。
        code_updated (pyqtSignal): QRコードを再生成したときに GeneratedCode を送信します。
        input_state_changed (pyqtSignal): 入力画面の一時状態が変化したときに送信します。
        display_state_changed (pyqtSignal): 表示画面の一時状態が変化したときに送信します。
        error_occurred (pyqtSignal): 識別子の保存に失敗したときにメッセージを送信します。
    """
    screen_changed = pyqtSignal(object)
    code_updated = pyqtSignal(object)
    input_state_changed = pyqtSignal()
    display_state_changed = pyqtSignal()
    error_occurred = pyqtSignal(str)

    def __init__(
        self,
        identifier_service: IdentifierService,
        code_service: CodeService,
        help_image_count: int = len(HELP_PAGES),
        link_opener: LinkOpener = open_url_in_browser,
        parent: Optional[QObject] = None
    ) -> None:
        """
        AppControllerのコンストラクタ。

        Args:
            identifier_service (IdentifierService): 識別子の永続化サービス。
            code_service (CodeService): QRコード生成サービス。
            help_image_count (int): ヘルプ画像の枚数。
            link_opener (LinkOpener): 外部リンクを開く関数。
            parent (Optional[QObject]): 親オブジェクト。
        """
        super().__init__(parent)
        if help_image_count < 1:
            raise ValueError("help_image_count must be at least 1")
        self.identifier_service = identifier_service
        self.code_service = code_service
        self.help_image_count = help_image_count
        self.link_opener = link_opener

        self.state = AppState()
        self.input_state: Optional[InputScreenState] = None
        self.display_state: Optional[DisplayScreenState] = None
        self.generated_code: Optional[GeneratedCode] = None

    # --- 状態の参照 ---

    @property
    def current_screen(self) -> Screen:
        return self.state.current_screen

    @property
    def stored_identifier(self) -> Optional[str]:
        return self.state.stored_identifier

    @property
    def has_code_error(self) -> bool:
        """最後に生成したQRコードがエンコードに失敗しているかどうか。"""
        return self.generated_code is not None and not self.generated_code.ok

    # --- 画面遷移 ---

    def start(self) -> None:
        """保存済みの識別子を読み込み、初期画面を決定する。"""
        self.state.stored_identifier = self.identifier_service.load_data()
        initial = Screen.INPUT if self.state.stored_identifier is None else Screen.DISPLAY
        logger.info("アプリケーションを開始します（初期画面: %s）", initial.value)
        self._enter(initial)

    def update_draft(self, text: str) -> None:
        """入力画面の編集中テキストを更新する。"""
        if self.input_state is None:
            return
        self.input_state.draft_text = text

    def save(self, text: Optional[str] = None) -> bool:
        """
        入力されたテキストを識別子として保存し、表示画面へ遷移する。

        空白のみのテキストは何もせずに無視されます。

        Args:
            text (Optional[str]): 保存するテキスト。Noneの場合は編集中のテキストを使う。

        Returns:
            bool: 保存して遷移した場合はTrue。無視または失敗した場合はFalse。
        """
        if self.current_screen is not Screen.INPUT or self.input_state is None:
            logger.debug("入力画面以外での保存要求を無視しました。")
            return False
        if text is None:
            text = self.input_state.draft_text
        if not text.strip():
            logger.debug("空白のみの入力は保存しません。")
            return False

        try:
            self.identifier_service.save_data(text)
        except StorageError as e:
            logger.error("識別子を保存できませんでした: %s", e)
            self.error_occurred.emit(str(e))
            return False

        self.state.stored_identifier = text
        self._enter(Screen.DISPLAY)
        return True

    def request_edit(self) -> None:
        """表示画面から入力画面に戻る（"Change QR Text"）。識別子は消去しない。"""
        if self.current_screen is not Screen.DISPLAY:
            logger.debug("表示画面以外での編集要求を無視しました。")
            return
        self._enter(Screen.INPUT)

    def _enter(self, screen: Screen) -> None:
        """画面を切り替え、画面ごとの一時状態を作り直す。"""
        if screen is Screen.DISPLAY and self.state.stored_identifier is None:
            raise RuntimeError("Display screen requires a stored identifier")

        self.state.current_screen = screen
        if screen is Screen.INPUT:
            self.display_state = None
            self.generated_code = None
            self.input_state = InputScreenState(draft_text=self.state.stored_identifier or "")
        else:
            self.input_state = None
            self.display_state = DisplayScreenState(last_refresh_timestamp=_now_millis())
        self.screen_changed.emit(screen)

        if screen is Screen.DISPLAY:
            self.recompute()

    # --- QRコードの再生成 ---

    def recompute(self) -> Optional[GeneratedCode]:
        """
        今日の日付でQRコードを再生成する。

        表示画面以外では何もしません。エンコードに失敗しても画面は
        表示画面のままで、GeneratedCode の bitmap が None になります。

        Returns:
            Optional[GeneratedCode]: 生成結果。表示画面以外ではNone。
        """
        if self.current_screen is not Screen.DISPLAY:
            return None
        self.generated_code = self.code_service.generate(self.state.stored_identifier)
        logger.debug("QRコードを再生成しました: %s", self.generated_code.payload)
        self.code_updated.emit(self.generated_code)
        return self.generated_code

    def on_resume(self) -> None:
        """アプリケーションの再開通知を受けてQRコードを再生成する。"""
        if self.display_state is None:
            return
        self.display_state.last_refresh_timestamp = _now_millis()
        self.recompute()

    # --- ヘルプ（入力画面） ---

    def open_help(self) -> None:
        if self.input_state is None:
            return
        self.input_state.help_dialog_visible = True
        self.input_state.help_image_index = 0
        self.input_state_changed.emit()

    def close_help(self) -> None:
        if self.input_state is None:
            return
        self.input_state.help_dialog_visible = False
        self.input_state.help_image_index = 0
        self.input_state_changed.emit()

    def next_help_image(self) -> None:
        """次のヘルプ画像へ進む。最後の画像では何もしない。"""
        if not self.can_go_next:
            return
        self.input_state.help_image_index += 1
        self.input_state_changed.emit()

    def previous_help_image(self) -> None:
        """前のヘルプ画像へ戻る。最初の画像では何もしない。"""
        if not self.can_go_previous:
            return
        self.input_state.help_image_index -= 1
        self.input_state_changed.emit()

    @property
    def can_go_next(self) -> bool:
        return (self.input_state is not None and self.input_state.help_dialog_visible
                and self.input_state.help_image_index < self.help_image_count - 1)

    @property
    def can_go_previous(self) -> bool:
        return (self.input_state is not None and self.input_state.help_dialog_visible
                and self.input_state.help_image_index > 0)

    # --- ドロワーとAbout（表示画面） ---

    def open_drawer(self) -> None:
        self._set_display_flag('drawer_open', True)

    def close_drawer(self) -> None:
        self._set_display_flag('drawer_open', False)

    def toggle_drawer(self) -> None:
        if self.display_state is None:
            return
        self._set_display_flag('drawer_open', not self.display_state.drawer_open)

    def show_about(self) -> None:
        self._set_display_flag('about_dialog_visible', True)

    def hide_about(self) -> None:
        self._set_display_flag('about_dialog_visible', False)

    def open_link(self, url: str) -> None:
        """外部リンクを開く。Aboutダイアログの表示状態は変えない。"""
        logger.info("リンクを開きます: %s", url)
        self.link_opener(url)

    def _set_display_flag(self, name: str, value: bool) -> None:
        if self.display_state is None:
            logger.debug("表示画面以外での操作を無視しました: %s", name)
            return
        if getattr(self.display_state, name) == value:
            return
        setattr(self.display_state, name, value)
        self.display_state_changed.emit()


def _now_millis() -> int:
    return int(time.time() * 1000)

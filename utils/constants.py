# utils/constants.py
"""アプリケーション全体で使用する設定値と定数を定義します。

データ保存先・ログ出力先・ロールタグなど、環境によって変えたい値は
環境変数で上書きできます。それ以外は固定値です。
"""
import os

from PyQt6.QtCore import QStandardPaths

from models.app_models import AboutLink, HelpPage


def _default_app_dir() -> str:
    """ユーザーごとのデータ領域（Linuxでは$XDG_DATA_HOME）配下のアプリ用ディレクトリを返す。"""
    base = QStandardPaths.writableLocation(QStandardPaths.StandardLocation.GenericDataLocation)
    return os.path.join(base or os.path.expanduser('~'), 'dailyqr')


# --- 環境変数で上書き可能な設定 ---
# 保存先は起動時のカレントディレクトリに依存しない絶対パスにする
APP_DIR: str = _default_app_dir()
DATA_DIR: str = os.path.abspath(os.getenv('DAILYQR_DATA_DIR', os.path.join(APP_DIR, 'data')))
LOG_DIR: str = os.path.abspath(os.getenv('DAILYQR_LOG_DIR', os.path.join(APP_DIR, 'logs')))
LOG_LEVEL: str = os.getenv('DAILYQR_LOG_LEVEL', 'INFO')
ROLE_TAG: str = os.getenv('DAILYQR_ROLE_TAG', 'student')

# --- 永続化 ---
PREFS_FILE: str = "app_prefs.json"
QR_TEXT_KEY: str = "qrText"

# --- QRコード ---
CODE_SIZE: int = 1080
DISPLAY_CODE_SIZE: int = 400
DATE_FORMAT: str = "%Y-%m-%d"

# --- 画面タイトル ---
APP_NAME: str = "QRC Generator PySpider"
INPUT_TITLE: str = "Enter QR Text"
INPUT_LABEL: str = "QR Code Text"
ENCODING_ERROR_TEXT: str = "Error generating QR Code"

# --- ヘルプ（使い方）画像 ---
ASSETS_DIR: str = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "ui", "assets"))
HELP_PAGES = [
    HelpPage(os.path.join(ASSETS_DIR, "how_to_1.png"), "1. Enter your ID in the text field."),
    HelpPage(os.path.join(ASSETS_DIR, "how_to_2.png"), "2. Press Save to store it on this device."),
    HelpPage(os.path.join(ASSETS_DIR, "how_to_3.png"), "3. Show the QR code. It is regenerated with today's date."),
]

# --- Aboutダイアログ ---
ABOUT_CREATOR: str = "Creator: Amit Pritam"
ABOUT_LINKS = [
    AboutLink("Instagram - @amit.pritam", "https://www.instagram.com/amit.pritam/"),
    AboutLink("Github - amitpritam1989", "https://github.com/amitpritam1989"),
]

"""
アプリケーションのエントリーポイント。

このスクリプトは、ロガー・ストレージ・コントローラを初期化し、PyQt6アプリケーションの
メインウィンドウを表示してイベントループを開始します。
また、プロジェクトのルートディレクトリをPythonのパスに追加し、
他のモジュール（ui, servicesなど）を正しくインポートできるように設定します。
"""
import sys
import os
from PyQt6.QtWidgets import QApplication

# このファイル(main.py)があるディレクトリをモジュール検索パスに追加します。
current_dir: str = os.path.dirname(os.path.abspath(__file__))
if current_dir not in sys.path:
    sys.path.append(current_dir)

from services.app_controller import AppController
from services.code_service import CodeService
from services.identifier_service import IdentifierService
from services.storage_service import StorageService
from ui.main_window import MainWindow
from utils.logger import setup_logger


def main() -> int:
    """アプリケーションを起動し、終了コードを返す。"""
    logger = setup_logger()

    # 1. PyQtアプリケーションインスタンスを作成します。
    app: QApplication = QApplication(sys.argv)

    # 2. サービスとコントローラを組み立てます。
    storage = StorageService()
    controller = AppController(IdentifierService(storage), CodeService())

    # 3. メインウィンドウを作成し、初期画面を決定してから表示します。
    window: MainWindow = MainWindow(controller)
    controller.start()
    window.show()

    # 4. イベントループを開始します。
    exit_code = app.exec()
    logger.info("アプリケーションを終了します（終了コード: %s）", exit_code)
    return exit_code


if __name__ == "__main__":
    sys.exit(main())

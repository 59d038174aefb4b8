# services/storage_service.py
import json
import os
from typing import Dict, Any, Optional

from utils.constants import DATA_DIR, PREFS_FILE
from utils.logger import get_logger

logger = get_logger('storage')


class StorageError(Exception):
    """ローカルストレージへの書き込みに失敗したことを示す例外。"""


class StorageService:
    """ローカルファイルシステムへのデータ永続化を管理するサービスクラス。

    JSON形式のファイル読み書きと、その上に構築された
    文字列キー・文字列値のキーバリューストア（get/set）を提供します。
    """

    def __init__(self, base_path: str = DATA_DIR, prefs_file: str = PREFS_FILE) -> None:
        """StorageServiceのコンストラクタ。

        Args:
            base_path (str): データを保存する基準ディレクトリのパス。
                             存在しない場合は自動的に作成されます。
            prefs_file (str): キーバリューストアとして使うJSONファイル名。
        """
        self.base_path = os.path.abspath(base_path)
        self.prefs_file = prefs_file
        os.makedirs(self.base_path, exist_ok=True)

    def get_path(self, file_name: str) -> str:
        """ベースパスとファイル名を結合して完全なファイルパスを取得する。

        Args:
            file_name (str): ファイル名。

        Returns:
            str: 完全なファイルパス。
        """
        return os.path.join(self.base_path, file_name)

    def save_json(self, file_name: str, data: Dict[str, Any]) -> None:
        """データをJSONファイルとしてローカルに保存する。

        一時ファイルに書き込んでから置き換えるため、書き込み途中で
        終了しても既存のファイルは壊れません。

        Args:
            file_name (str): 保存するファイル名。
            data (Dict[str, Any]): 保存するデータ。

        Raises:
            StorageError: ファイルの書き込みに失敗した場合。
        """
        file_path = self.get_path(file_name)
        tmp_path = f"{file_path}.tmp"
        try:
            with open(tmp_path, 'w', encoding='utf-8') as f:
                json.dump(data, f, ensure_ascii=False, indent=4)
            os.replace(tmp_path, file_path)
            logger.debug("データを %s に保存しました。", file_path)
        except OSError as e:
            logger.error("ファイル保存中にエラーが発生しました: %s, %s", file_path, e)
            raise StorageError(f"Failed to write {file_path}") from e

    def load_json(self, file_name: str) -> Optional[Dict[str, Any]]:
        """ローカルのJSONファイルからデータを読み込む。

        Args:
            file_name (str): 読み込むファイル名。

        Returns:
            Optional[Dict[str, Any]]: 読み込まれたデータ。ファイルが存在しない、
                                      または壊れている場合はNone。
        """
        file_path = self.get_path(file_name)
        if not os.path.exists(file_path):
            return None
        try:
            with open(file_path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.warning("ファイル読み込み中にエラーが発生しました: %s, %s", file_path, e)
            return None
        if not isinstance(data, dict):
            logger.warning("想定外のデータ形式です: %s", file_path)
            return None
        return data

    def get(self, key: str) -> Optional[str]:
        """キーに対応する文字列値を取得する。

        Args:
            key (str): 取得するキー。

        Returns:
            Optional[str]: 保存されている値。存在しない場合はNone。
        """
        prefs = self.load_json(self.prefs_file) or {}
        value = prefs.get(key)
        return value if isinstance(value, str) else None

    def set(self, key: str, value: str) -> None:
        """キーに文字列値を保存する（後勝ち）。

        Args:
            key (str): 保存するキー。
            value (str): 保存する値。
        """
        prefs = self.load_json(self.prefs_file) or {}
        prefs[key] = value
        self.save_json(self.prefs_file, prefs)

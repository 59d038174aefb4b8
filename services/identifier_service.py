# services/identifier_service.py
from typing import Optional

from .base_service import BaseService
from .storage_service import StorageService
from utils.constants import QR_TEXT_KEY
from utils.logger import get_logger

logger = get_logger('identifier')


class IdentifierService(BaseService[str]):
    """QRコードに埋め込む識別子の読み込みと保存を管理するサービスクラス。

    識別子は StorageService のキー "qrText" に1件だけ保存されます。
    削除操作はありません。
    """

    def __init__(self, storage_service: StorageService, key: str = QR_TEXT_KEY) -> None:
        """IdentifierServiceのコンストラクタ。

        Args:
            storage_service (StorageService): データ永続化のためのストレージサービス。
            key (str): 識別子を保存するキー。
        """
        super().__init__(storage_service=storage_service)
        self.key = key

    def load_data(self) -> Optional[str]:
        """保存されている識別子を読み込む。初回起動時はNone。"""
        value = self.storage_service.get(self.key)
        logger.debug("識別子を読み込みました（設定済み: %s）", value is not None)
        return value

    def save_data(self, data: str) -> None:
        """識別子を保存する。

        Args:
            data (str): 保存する識別子。

        Raises:
            StorageError: 書き込みに失敗した場合。
        """
        self.storage_service.set(self.key, data)
        logger.info("識別子を保存しました。")

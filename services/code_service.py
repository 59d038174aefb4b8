# services/code_service.py
"""識別子と日付からQRコードの内容と画像を生成するサービスを提供します。"""
from typing import Optional

from models.app_models import GeneratedCode
from utils.constants import CODE_SIZE, ROLE_TAG
from utils.date_utils import DateProvider, today_iso
from utils.logger import get_logger
from utils.qr_encoder import EncodingError, QREncoder

logger = get_logger('code')


def format_payload(identifier: str, date: str, role: str = ROLE_TAG) -> str:
    """QRコードに埋め込む文字列を組み立てる。

    Args:
        identifier (str): ユーザーが保存した識別子。
        date (str): 日付（YYYY-MM-DD）。
        role (str): ロールタグ。

    Returns:
        str: "識別子/日付/ロール" 形式の文字列。
    """
    return f"{identifier}/{date}/{role}"


class CodeService:
    """GeneratedCode を生成するサービスクラス。

    日付の取得、ペイロードの整形、QRエンコードを順に行います。
    エンコードに失敗しても例外は送出せず、bitmap が None の結果を返します。
    """

    def __init__(
        self,
        encoder: Optional[QREncoder] = None,
        date_provider: DateProvider = today_iso,
        role: str = ROLE_TAG,
        size: int = CODE_SIZE
    ) -> None:
        """CodeServiceのコンストラクタ。

        Args:
            encoder (Optional[QREncoder]): QRエンコーダ。省略時は既定の設定で作成。
            date_provider (DateProvider): 今日の日付を返す関数。
            role (str): ペイロードに含めるロールタグ。
            size (int): 生成する画像の一辺のピクセル数。
        """
        self.encoder = encoder or QREncoder()
        self.date_provider = date_provider
        self.role = role
        self.size = size

    def generate(self, identifier: str) -> GeneratedCode:
        """識別子と今日の日付からQRコードを生成する。

        Args:
            identifier (str): 保存済みの識別子。

        Returns:
            GeneratedCode: 生成結果。失敗時は bitmap が None、error にメッセージが入る。
        """
        date = self.date_provider()
        payload = format_payload(identifier, date, self.role)
        try:
            bitmap = self.encoder.encode(payload, self.size, self.size)
        except EncodingError as e:
            logger.warning("QRコードの生成に失敗しました: %s", e)
            return GeneratedCode(payload=payload, date=date, error=str(e))
        return GeneratedCode(payload=payload, date=date, bitmap=bitmap)

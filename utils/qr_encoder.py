# utils/qr_encoder.py
"""文字列ペイロードからQRコード画像を生成するエンコーダを提供します。"""

import qrcode
from qrcode.exceptions import DataOverflowError
from qrcode.image.pil import PilImage
from PIL import Image

from utils.constants import CODE_SIZE


class EncodingError(Exception):
    """ペイロードをQRコードとして表現できなかったことを示す例外。"""


class QREncoder:
    """QRコード（2次元マトリクスシンボル）のエンコーダ。

    生成されるシンボルは誤り訂正レベルL、クワイエットゾーン4モジュールで、
    要求されたピクセルサイズの正方形画像に拡大されます。
    """

    def __init__(self, box_size: int = 10, border: int = 4) -> None:
        """QREncoderのコンストラクタ。

        Args:
            box_size (int): 1モジュールあたりの基準ピクセル数。
            border (int): クワイエットゾーンのモジュール数。
        """
        self.box_size = box_size
        self.border = border

    def encode(self, payload: str, width: int = CODE_SIZE, height: int = CODE_SIZE) -> Image.Image:
        """ペイロードをQRコード画像にエンコードする。

        Args:
            payload (str): QRコードに埋め込む文字列。
            width (int): 出力画像の幅（ピクセル）。
            height (int): 出力画像の高さ（ピクセル）。

        Returns:
            Image.Image: width x height のRGB画像。

        Raises:
            EncodingError: ペイロードが空、容量超過、またはサイズ指定が不正な場合。
        """
        if not payload:
            raise EncodingError("Payload is empty")
        if width <= 0 or height <= 0 or width != height:
            raise EncodingError(f"Invalid symbol size: {width}x{height}")

        qr = qrcode.QRCode(
            error_correction=qrcode.constants.ERROR_CORRECT_L,
            box_size=self.box_size,
            border=self.border,
            image_factory=PilImage,
        )
        try:
            qr.add_data(payload)
            qr.make(fit=True)
        except (DataOverflowError, ValueError) as e:
            raise EncodingError(f"Payload cannot be encoded: {e}") from e

        img = qr.make_image(fill_color="black", back_color="white").get_image()
        # モジュールの境界をぼかさないよう最近傍補間で拡大する
        return img.convert("RGB").resize((width, height), Image.NEAREST)

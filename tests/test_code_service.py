from datetime import datetime

import pytest

from services.code_service import CodeService, format_payload
from utils.date_utils import today_iso
from utils.qr_encoder import EncodingError, QREncoder


def test_format_payload_reference_value():
    assert format_payload("224195", "2025-01-01") == "224195/2025-01-01/student"


def test_format_payload_custom_role():
    assert format_payload("abc", "2025-06-01", role="staff") == "abc/2025-06-01/staff"


def test_format_payload_keeps_identifier_verbatim():
    assert format_payload(" a/b ", "2025-06-01") == " a/b /2025-06-01/student"


def test_today_iso_is_local_date():
    before = datetime.now().strftime("%Y-%m-%d")
    value = today_iso()
    after = datetime.now().strftime("%Y-%m-%d")
    # 日付の境界をまたいだ場合はどちらかに一致すればよい
    assert value in (before, after)


def test_generate_uses_date_provider(encoder, fixed_today):
    service = CodeService(encoder=encoder, date_provider=fixed_today, size=32)
    code = service.generate("224195")
    assert code.payload == "224195/2025-01-01/student"
    assert code.date == "2025-01-01"
    assert code.ok
    assert code.bitmap.size == (32, 32)
    assert encoder.payloads == ["224195/2025-01-01/student"]


def test_generate_reports_encoding_failure(failing_encoder, fixed_today):
    service = CodeService(encoder=failing_encoder, date_provider=fixed_today)
    code = service.generate("abc")
    assert code.bitmap is None
    assert not code.ok
    assert code.error == "forced failure"
    assert code.payload == "abc/2025-01-01/student"


# ===========================================================================
# QREncoder
# ===========================================================================


def test_encoder_produces_square_image():
    img = QREncoder().encode("224195/2025-01-01/student", 1080, 1080)
    assert img.size == (1080, 1080)
    assert img.mode == "RGB"
    # クワイエットゾーンは白
    assert img.getpixel((0, 0)) == (255, 255, 255)


def test_encoder_output_contains_dark_modules():
    img = QREncoder().encode("abc/2025-06-01/student", 300, 300)
    colors = {color for _count, color in img.getcolors(maxcolors=16)}
    assert (0, 0, 0) in colors


def test_encoder_rejects_empty_payload():
    with pytest.raises(EncodingError):
        QREncoder().encode("", 1080, 1080)


@pytest.mark.parametrize("size", [(0, 0), (-10, -10), (300, 400)])
def test_encoder_rejects_invalid_size(size):
    with pytest.raises(EncodingError):
        QREncoder().encode("abc", *size)


def test_encoder_rejects_payload_over_capacity():
    with pytest.raises(EncodingError):
        QREncoder().encode("x" * 8000, 1080, 1080)

import os
import sys

import pytest

# ヘッドレス環境でQtを実行できるようにする
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from PIL import Image  # noqa: E402

from services.app_controller import AppController  # noqa: E402
from services.code_service import CodeService  # noqa: E402
from services.identifier_service import IdentifierService  # noqa: E402
from services.storage_service import StorageService  # noqa: E402
from utils.date_utils import fixed_date  # noqa: E402
from utils.qr_encoder import EncodingError  # noqa: E402


class FakeEncoder:
    """ペイロードを記録し、小さな画像を返すテスト用エンコーダ。"""

    def __init__(self, fail: bool = False):
        self.fail = fail
        self.payloads = []

    def encode(self, payload, width, height):
        self.payloads.append(payload)
        if self.fail:
            raise EncodingError("forced failure")
        return Image.new("RGB", (width, height), "white")


class DateClock:
    """テスト中に日付を進められる DateProvider。"""

    def __init__(self, date: str):
        self.date = date

    def __call__(self) -> str:
        return self.date


@pytest.fixture
def storage(tmp_path):
    return StorageService(base_path=str(tmp_path / "data"))


@pytest.fixture
def encoder():
    return FakeEncoder()


@pytest.fixture
def failing_encoder():
    return FakeEncoder(fail=True)


@pytest.fixture
def clock():
    return DateClock("2025-06-01")


@pytest.fixture
def opened_links():
    return []


@pytest.fixture
def make_controller(storage, encoder, clock, opened_links):
    def _make(enc=None, date_provider=None):
        code_service = CodeService(
            encoder=enc or encoder,
            date_provider=date_provider or clock,
            size=64,
        )
        return AppController(
            IdentifierService(storage),
            code_service,
            help_image_count=3,
            link_opener=opened_links.append,
        )
    return _make


@pytest.fixture
def controller(make_controller):
    ctrl = make_controller()
    ctrl.start()
    return ctrl


@pytest.fixture
def fixed_today():
    return fixed_date("2025-01-01")

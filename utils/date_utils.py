# utils/date_utils.py
from datetime import datetime
from typing import Callable

from utils.constants import DATE_FORMAT

# 現在日付（YYYY-MM-DD）を返す関数の型
DateProvider = Callable[[], str]


def today_iso() -> str:
    """ローカルタイムゾーンでの今日の日付を YYYY-MM-DD 形式で返す。"""
    return datetime.now().strftime(DATE_FORMAT)


def fixed_date(date: str) -> DateProvider:
    """常に同じ日付を返す DateProvider を作成する。

    Args:
        date (str): 返す日付文字列（YYYY-MM-DD）。

    Returns:
        DateProvider: 引数なしで呼び出すと date を返す関数。
    """
    return lambda: date

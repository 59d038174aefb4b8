# utils/logger.py
"""
アプリケーションのロギング設定を提供します。
"""
import logging
import logging.handlers
import os
from datetime import datetime
from typing import Optional, Union

from utils.constants import LOG_DIR, LOG_LEVEL

ROOT_LOGGER_NAME = 'dailyqr'


def _resolve_level(level: Union[int, str]) -> Optional[int]:
    """レベル名または数値を数値のログレベルに変換する。不明な名前はNone。"""
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level).strip().upper())
    return resolved if isinstance(resolved, int) else None


def setup_logger(
    name: str = ROOT_LOGGER_NAME,
    log_dir: str = LOG_DIR,
    level: Union[int, str] = LOG_LEVEL
) -> logging.Logger:
    """
    ファイル出力とコンソール出力を持つロガーを設定する。

    すでにハンドラが設定されている場合は何もせずにそのロガーを返します。

    Args:
        name (str): ロガー名。
        log_dir (str): ログファイルを出力するディレクトリ。
        level (Union[int, str]): ロガーのログレベル。
            不明なレベル名の場合はINFOになります。

    Returns:
        logging.Logger: 設定済みのロガー。
    """
    os.makedirs(log_dir, exist_ok=True)

    logger = logging.getLogger(name)
    resolved = _resolve_level(level)
    logger.setLevel(logging.INFO if resolved is None else resolved)

    # 二重登録を避ける
    if logger.handlers:
        _warn_unknown_level(logger, level, resolved)
        return logger

    file_formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )
    console_formatter = logging.Formatter(
        '%(asctime)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

    log_file = os.path.join(log_dir, f'dailyqr_{datetime.now().strftime("%Y%m%d")}.log')
    file_handler = logging.handlers.RotatingFileHandler(
        log_file,
        maxBytes=10 * 1024 * 1024,  # 10MB
        backupCount=5,
        encoding='utf-8'
    )
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(file_formatter)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.INFO)
    console_handler.setFormatter(console_formatter)

    logger.addHandler(file_handler)
    logger.addHandler(console_handler)
    _warn_unknown_level(logger, level, resolved)
    return logger


def _warn_unknown_level(logger: logging.Logger, level: Union[int, str], resolved: Optional[int]) -> None:
    # 設定ミスで起動できなくならないようINFOで続行する
    if resolved is None:
        logger.warning("不明なログレベル %r が指定されたためINFOを使用します。", level)


def get_logger(module_name: str) -> logging.Logger:
    """モジュールごとの子ロガーを取得する。"""
    return logging.getLogger(f'{ROOT_LOGGER_NAME}.{module_name}')

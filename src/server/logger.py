"""
ロギング設定モジュール
"""

import logging
from pathlib import Path

from .config import Config

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logger(config: Config) -> None:
    """
    設定に従ってルートロガーを構成する

    ファイルと標準エラーの両方へ出力する。uvicornのロガーもルートへ伝播させる。
    SQLAlchemyのプールログはDEBUG指定時のみ出す。

    Args:
        config: ログレベル (log_level) と出力先 (log_file) を持つ設定
    """
    level = getattr(logging, config.log_level.upper())

    log_path = Path(config.log_file)
    log_path.parent.mkdir(parents=True, exist_ok=True)

    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        handlers=[
            logging.FileHandler(log_path, encoding="utf-8"),
            logging.StreamHandler(),
        ],
        force=True,
    )
    logging.getLogger("sqlalchemy.pool").setLevel(
        logging.DEBUG if level <= logging.DEBUG else logging.WARNING
    )

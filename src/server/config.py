"""
設定管理モジュール

config/app_config.yaml から設定を読み込む。ファイルや項目が無い場合は既定値を使う。
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

DEFAULT_CONFIG_PATH = Path(__file__).parent.parent.parent / "config" / "app_config.yaml"


@dataclass
class ServerConfig:
    """HTTPサーバー設定"""

    host: str = "0.0.0.0"
    port: int = 8080


@dataclass
class DatabaseConfig:
    """データベース・コネクションプール設定"""

    path: str = "todo.db"
    pool_size: int = 10
    pool_timeout: Optional[float] = None  # Noneなら空きが出るまで待つ


@dataclass
class Config:
    """アプリケーション設定クラス"""

    server: ServerConfig = field(default_factory=ServerConfig)
    database: DatabaseConfig = field(default_factory=DatabaseConfig)

    # ログ設定
    log_level: str = "INFO"
    log_file: str = "logs/todo.log"

    @classmethod
    def from_yaml(cls, config_path: Optional[Path] = None) -> "Config":
        """YAMLファイルから設定を読み込む

        Args:
            config_path: 設定ファイルパス（省略時はconfig/app_config.yamlを使用）

        Returns:
            Config: 設定インスタンス
        """
        if config_path is None:
            config_path = DEFAULT_CONFIG_PATH
        config_path = Path(config_path)

        if not config_path.exists():
            return cls()

        with open(config_path, "r", encoding="utf-8") as f:
            yaml_data: Dict[str, Any] = yaml.safe_load(f) or {}

        server_data = yaml_data.get("server") or {}
        database_data = yaml_data.get("database") or {}
        log_data = yaml_data.get("log") or {}

        defaults = cls()
        pool_timeout = database_data.get("pool_timeout", defaults.database.pool_timeout)

        return cls(
            server=ServerConfig(
                host=server_data.get("host", defaults.server.host),
                port=int(server_data.get("port", defaults.server.port)),
            ),
            database=DatabaseConfig(
                path=str(database_data.get("path", defaults.database.path)),
                pool_size=int(database_data.get("pool_size", defaults.database.pool_size)),
                pool_timeout=float(pool_timeout) if pool_timeout is not None else None,
            ),
            log_level=log_data.get("level", defaults.log_level),
            log_file=log_data.get("file", defaults.log_file),
        )

"""SQLite connection pool.

固定数のコネクションを SQLAlchemy の QueuePool で保持し、リクエストごとに貸し出す。
貸し出しは ``with pool.connection() as conn:`` のスコープで行い、
例外で抜けた場合も必ずプールへ返却される。
"""

from __future__ import annotations

import logging
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional

from sqlalchemy import event
from sqlalchemy.exc import TimeoutError as PoolTimeoutError
from sqlalchemy.pool import QueuePool

from .exceptions import PoolError

logger = logging.getLogger(__name__)


class ConnectionPool:
    """再利用可能なSQLiteコネクションの有界プール。"""

    def __init__(
        self,
        db_path: Path | str,
        size: int = 10,
        timeout: Optional[float] = None,
    ) -> None:
        """
        初期化.

        Args:
            db_path: データベースファイルパス
            size: プールするコネクション数
            timeout: 取得待ちの上限秒数（Noneなら空きが出るまで待つ）

        Raises:
            PoolError: サイズやタイムアウトが不正、またはコネクションを開けない場合
        """
        if size < 1:
            raise PoolError(f"Pool size must be positive: {size}")
        if timeout is not None and timeout < 0:
            raise PoolError(f"Pool timeout must not be negative: {timeout}")

        self.db_path = Path(db_path)
        self.timeout = timeout
        self._closed = False
        self._pool = QueuePool(
            lambda: self._open(),
            pool_size=size,
            max_overflow=0,
            timeout=timeout,
        )
        event.listen(self._pool, "checkout", self._on_checkout)
        event.listen(self._pool, "checkin", self._on_checkin)

        # 起動時に全コネクションを開き、開けないDBはここで失敗させる
        opened = []
        try:
            self.db_path.parent.mkdir(parents=True, exist_ok=True)
            for _ in range(size):
                opened.append(self._pool.connect())
        except (OSError, sqlite3.Error) as exc:
            for conn in opened:
                conn.close()
            self._pool.dispose()
            raise PoolError(f"Failed to open {self.db_path}: {exc}") from exc
        for conn in opened:
            conn.close()

        logger.info("Connection pool ready: %s (size=%d)", self.db_path, size)

    def _open(self) -> sqlite3.Connection:
        # 貸し出し先のワーカースレッドは毎回異なるため、スレッド検査は無効化する
        conn = sqlite3.connect(
            self.db_path,
            check_same_thread=False,
            isolation_level=None,
        )
        conn.row_factory = sqlite3.Row
        return conn

    @staticmethod
    def _on_checkout(dbapi_conn, conn_record, conn_proxy) -> None:
        logger.debug("Connection checked out: %s", id(dbapi_conn))

    @staticmethod
    def _on_checkin(dbapi_conn, conn_record) -> None:
        logger.debug("Connection checked in: %s", id(dbapi_conn))

    @property
    def size(self) -> int:
        return self._pool.size()

    @property
    def available(self) -> int:
        if self._closed:
            return 0
        return self._pool.checkedin()

    @property
    def closed(self) -> bool:
        return self._closed

    def _acquire(self):
        if self._closed:
            raise PoolError("Connection pool is closed")
        try:
            conn = self._pool.connect()
        except PoolTimeoutError as exc:
            raise PoolError(
                f"Timed out after {self.timeout}s waiting for a connection"
            ) from exc
        except sqlite3.Error as exc:
            raise PoolError(f"Failed to open {self.db_path}: {exc}") from exc
        if self._closed:
            # close()中に返却されたコネクションで起こされた待機者
            conn.invalidate()
            raise PoolError("Connection pool is closed")
        return conn

    def _release(self, conn) -> None:
        if self._closed:
            # 閉じて返却し、次の待機者を起こす
            conn.invalidate()
        else:
            conn.close()

    @contextmanager
    def connection(self) -> Iterator[sqlite3.Connection]:
        """コネクションを1つ借りる。空きがなければ返却されるまで待つ。"""
        conn = self._acquire()
        try:
            yield conn
        finally:
            self._release(conn)

    def close(self) -> None:
        """待機中のコネクションを全て閉じる。貸し出し中のものは返却時に閉じる。"""
        if self._closed:
            return
        self._closed = True
        self._pool.dispose()
        logger.info("Connection pool closed: %s", self.db_path)

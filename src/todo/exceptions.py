"""Todoアプリのカスタム例外定義

ストレージ・コネクションプール・描画の各境界で発生する失敗を
種類ごとに区別し、HTTPステータスへの対応付けを保持します。
"""


class TodoAppError(Exception):
    """Todoアプリ基底例外"""

    status_code = 500
    message = "Internal error"

    def __init__(self, detail: str = ""):
        super().__init__(detail or self.message)
        self.detail = detail or self.message


class RenderError(TodoAppError):
    """HTMLテンプレートの描画に失敗"""

    message = "Failed to render HTML"


class PoolError(TodoAppError):
    """コネクションの取得に失敗"""

    message = "Failed to get connection"


class QueryError(TodoAppError):
    """SQLの実行に失敗"""

    message = "Failed SQL execution"

#!/usr/bin/env python3
"""
TODOメンテナンスCLI - Webサーバーと同じDBを直接操作するコマンドラインインターフェース

Usage:
    python -m src.todo list [--format json|text]
    python -m src.todo add --text "内容"
    python -m src.todo delete --id ID
"""

from __future__ import annotations

import argparse
import json
import sys
from typing import Any, Dict

from .exceptions import TodoAppError
from .models import TodoEntry
from .pool import ConnectionPool
from .repository import TodoRepository

DEFAULT_DB_PATH = "todo.db"


def format_entry_text(entry: TodoEntry) -> str:
    """エントリをテキスト形式で整形"""
    return f"[{entry.id}] {entry.text}"


def format_entry_json(entry: TodoEntry) -> Dict[str, Any]:
    """エントリを辞書形式に変換"""
    return {"id": entry.id, "text": entry.text}


def cmd_list(repo: TodoRepository, output_format: str) -> int:
    """Todoリストを表示"""
    entries = repo.list()
    if output_format == "json":
        print(json.dumps([format_entry_json(e) for e in entries], ensure_ascii=False))
    elif not entries:
        print("TODOは登録されていません。")
    else:
        for entry in entries:
            print(format_entry_text(entry))
    return 0


def cmd_add(repo: TodoRepository, text: str, output_format: str) -> int:
    """新しいTodoを追加"""
    todo_id = repo.insert(text)
    entry = TodoEntry(id=todo_id, text=text)
    if output_format == "json":
        print(json.dumps(format_entry_json(entry), ensure_ascii=False))
    else:
        print(f"追加しました: {format_entry_text(entry)}")
    return 0


def cmd_delete(repo: TodoRepository, todo_id: int, output_format: str) -> int:
    """Todoを削除（存在しないIDでも成功扱い）"""
    deleted = repo.delete(todo_id)
    if output_format == "json":
        print(json.dumps({"id": todo_id, "deleted": deleted}, ensure_ascii=False))
    elif deleted:
        print(f"削除しました: ID {todo_id}")
    else:
        print(f"ID {todo_id} のTODOはありません。")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="TODOメンテナンスCLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--db-path",
        type=str,
        default=DEFAULT_DB_PATH,
        help=f"SQLiteデータベースファイルのパス（デフォルト: {DEFAULT_DB_PATH}）",
    )

    subparsers = parser.add_subparsers(dest="command", help="実行するコマンド", required=True)

    format_options = {
        "choices": ["json", "text"],
        "default": "text",
        "help": "出力フォーマット（デフォルト: text）",
    }

    parser_list = subparsers.add_parser("list", help="TODOリストを表示")
    parser_list.add_argument("--format", **format_options)

    parser_add = subparsers.add_parser("add", help="新しいTODOを追加")
    parser_add.add_argument("--text", required=True, help="TODOの内容")
    parser_add.add_argument("--format", **format_options)

    parser_delete = subparsers.add_parser("delete", help="TODOを削除")
    parser_delete.add_argument("--id", type=int, required=True, help="削除するTODOのID")
    parser_delete.add_argument("--format", **format_options)

    return parser


def main(argv: list[str] | None = None) -> int:
    """CLIエントリポイント"""
    args = build_parser().parse_args(argv)

    try:
        pool = ConnectionPool(args.db_path, size=1)
    except TodoAppError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    try:
        repo = TodoRepository(pool)
        repo.ensure_schema()
        if args.command == "list":
            return cmd_list(repo, args.format)
        if args.command == "add":
            return cmd_add(repo, args.text, args.format)
        if args.command == "delete":
            return cmd_delete(repo, args.id, args.format)
        print(f"Error: 不明なコマンド: {args.command}", file=sys.stderr)
        return 1
    except TodoAppError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    finally:
        pool.close()


if __name__ == "__main__":
    sys.exit(main())

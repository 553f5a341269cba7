"""TODO CLI の動作テスト"""

import json
import subprocess
import sys
from pathlib import Path


def run_cli(args: list[str], db_path: Path) -> subprocess.CompletedProcess:
    """CLI実行ヘルパー"""
    cmd = [
        sys.executable,
        "-m",
        "src.todo",
        "--db-path",
        str(db_path),
    ] + args
    return subprocess.run(
        cmd,
        capture_output=True,
        text=True,
        cwd=Path(__file__).parent.parent,
    )


def test_cli_list_empty(tmp_path):
    """空のリスト取得"""
    result = run_cli(["list", "--format", "json"], tmp_path / "cli_test.db")
    assert result.returncode == 0
    assert json.loads(result.stdout) == []


def test_cli_add_and_list(tmp_path):
    """TODO追加とリスト取得"""
    db_path = tmp_path / "cli_test.db"

    result = run_cli(["add", "--text", "牛乳を買う", "--format", "json"], db_path)
    assert result.returncode == 0
    added = json.loads(result.stdout)
    assert added == {"id": 1, "text": "牛乳を買う"}

    result = run_cli(["list", "--format", "json"], db_path)
    assert result.returncode == 0
    assert json.loads(result.stdout) == [added]

    result = run_cli(["list"], db_path)
    assert result.returncode == 0
    assert "[1] 牛乳を買う" in result.stdout


def test_cli_delete(tmp_path):
    """TODO削除"""
    db_path = tmp_path / "cli_test.db"
    run_cli(["add", "--text", "a"], db_path)
    run_cli(["add", "--text", "b"], db_path)

    result = run_cli(["delete", "--id", "1", "--format", "json"], db_path)
    assert result.returncode == 0
    assert json.loads(result.stdout) == {"id": 1, "deleted": 1}

    result = run_cli(["list", "--format", "json"], db_path)
    assert json.loads(result.stdout) == [{"id": 2, "text": "b"}]


def test_cli_delete_missing_id_succeeds(tmp_path):
    """存在しないIDの削除はエラーにならない"""
    result = run_cli(["delete", "--id", "999"], tmp_path / "cli_test.db")
    assert result.returncode == 0
    assert "999" in result.stdout


def test_cli_unopenable_database(tmp_path):
    """DBを開けない場合は終了コード1"""
    blocker = tmp_path / "not_a_dir"
    blocker.write_text("")
    result = run_cli(["list"], blocker / "todo.db")
    assert result.returncode == 1
    assert "Error" in result.stderr

"""Unit tests for the demo data seed script."""

import logging

import pytest

from dispatch_board.application.interfaces import SqlExecutor
from dispatch_board.domain.exceptions import FileReadError, NetworkError, RpcError
from dispatch_board.scripts.seed import SEED_SQL_PATH, read_seed_sql, seed


class FakeExecutor(SqlExecutor):
    def __init__(self, error: Exception | None = None):
        self.error = error
        self.calls: list[str] = []

    async def exec_sql(self, sql: str) -> None:
        self.calls.append(sql)
        if self.error is not None:
            raise self.error


@pytest.fixture
def sql_file(tmp_path):
    path = tmp_path / "mock_data.sql"
    path.write_text("INSERT INTO operators (name, code) VALUES ('Phương Trang', 'PT');", encoding="utf-8")
    return path


def test_bundled_seed_file_exists():
    assert SEED_SQL_PATH.name == "mock_data.sql"
    assert "INSERT" in read_seed_sql().upper()


def test_read_seed_sql_missing_file(tmp_path):
    with pytest.raises(FileReadError) as exc_info:
        read_seed_sql(tmp_path / "missing.sql")

    assert exc_info.value.path.endswith("missing.sql")


@pytest.mark.asyncio
async def test_seed_sends_whole_file_in_one_call(sql_file, caplog):
    executor = FakeExecutor()

    with caplog.at_level(logging.INFO):
        assert await seed(executor, sql_file) is True

    assert executor.calls == [sql_file.read_text(encoding="utf-8")]
    assert "Seed data inserted successfully!" in caplog.text


@pytest.mark.asyncio
async def test_seed_reports_rpc_error_with_manual_hint(sql_file, caplog):
    executor = FakeExecutor(RpcError("exec_sql", 404, "function exec_sql does not exist"))

    with caplog.at_level(logging.INFO):
        assert await seed(executor, sql_file) is False

    assert "Error executing seed data via RPC" in caplog.text
    assert "function exec_sql does not exist" in caplog.text
    assert "manually in your Supabase SQL editor" in caplog.text


@pytest.mark.asyncio
async def test_seed_reports_network_error(sql_file, caplog):
    executor = FakeExecutor(NetworkError("POST", "http://db.test/rest/v1/rpc/exec_sql", "refused"))

    with caplog.at_level(logging.INFO):
        assert await seed(executor, sql_file) is False

    assert "Seed error" in caplog.text
    assert "manually in your Supabase SQL editor" in caplog.text


@pytest.mark.asyncio
async def test_seed_missing_file_never_calls_database(tmp_path, caplog):
    executor = FakeExecutor()

    with caplog.at_level(logging.INFO):
        assert await seed(executor, tmp_path / "missing.sql") is False

    assert executor.calls == []
    assert "FileReadError" in caplog.text

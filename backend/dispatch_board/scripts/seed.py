"""Load the demo data set into the hosted database.

Reads ``mock_data.sql`` next to this module and runs it as one batch through
the database's ``exec_sql`` RPC. Failures are reported with a hint to run the
file by hand in the Supabase SQL editor; the script never exits with an error
status. It is not idempotent unless the SQL itself guards against duplicates.

    python -m dispatch_board.scripts.seed
"""

import asyncio
import logging
from pathlib import Path

from dispatch_board.application.interfaces import SqlExecutor
from dispatch_board.config import get_settings
from dispatch_board.domain.exceptions import FileReadError, RpcError
from dispatch_board.infrastructure.database import SupabaseRpcClient
from dispatch_board.infrastructure.logging.colored_logger import Stage, StepLogger
from dispatch_board.infrastructure.logging.log_config import setup_logging

logger = logging.getLogger(__name__)
log = StepLogger("SeedScript")

SEED_SQL_PATH = Path(__file__).with_name("mock_data.sql")


def read_seed_sql(path: Path = SEED_SQL_PATH) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise FileReadError(str(path), exc.strerror or str(exc)) from exc


async def seed(executor: SqlExecutor, sql_path: Path = SEED_SQL_PATH) -> bool:
    """Run the seed SQL once. Returns True on success; never raises."""
    manual_hint = f"Please run the content of {sql_path} manually in your Supabase SQL editor."
    try:
        log.step(Stage.READ, "Reading mock data file...", path=sql_path.name)
        sql = read_seed_sql(sql_path)

        log.step(Stage.EXECUTE, "Executing seed data...", size=len(sql))
        await executor.exec_sql(sql)
    except RpcError as exc:
        log.error(Stage.EXECUTE, "Error executing seed data via RPC", error=exc)
        log.advice(manual_hint)
        return False
    except Exception as exc:
        log.error(Stage.ERROR, "Seed error", error=exc)
        logger.debug("Seed failure details", exc_info=True)
        log.advice(manual_hint)
        return False

    log.step(Stage.COMPLETE, "Seed data inserted successfully!")
    return True


async def _run() -> None:
    settings = get_settings()
    if not settings.supabase_url:
        logger.warning("SUPABASE_URL is not configured; the RPC call will fail.")
    executor = SupabaseRpcClient(
        url=settings.supabase_url,
        service_key=settings.supabase_service_key,
    )
    await seed(executor)


def main() -> None:
    setup_logging()
    asyncio.run(_run())


if __name__ == "__main__":
    main()

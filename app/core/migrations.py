from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import Literal

from alembic import command
from alembic.config import Config
from alembic.migration import MigrationContext
from alembic.operations import Operations
from alembic.script import ScriptDirectory
from alembic.script.revision import RevisionError
from alembic.util import CommandError
from sqlalchemy import pool
from sqlalchemy.engine import Connection
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import create_async_engine

from app.core.config import settings


log = logging.getLogger(__name__)

PROJECT_ROOT = Path(__file__).resolve().parents[2]
ALEMBIC_INI = PROJECT_ROOT / "alembic.ini"
SCRIPT_LOCATION = PROJECT_ROOT / "alembic"


class SchemaError(RuntimeError):
    """A migration could not be applied to the current schema."""


def alembic_config(database_url: str | None = None) -> Config:
    cfg = Config(str(ALEMBIC_INI)) if ALEMBIC_INI.exists() else Config()
    cfg.set_main_option("script_location", str(SCRIPT_LOCATION))
    # configparser interpolation: a literal % must be doubled
    cfg.set_main_option("sqlalchemy.url", (database_url or settings.database_url).replace("%", "%%"))
    return cfg


def script_directory() -> ScriptDirectory:
    cfg = Config()
    cfg.set_main_option("script_location", str(SCRIPT_LOCATION))
    return ScriptDirectory.from_config(cfg)


def _resolve(script: ScriptDirectory, revision: str) -> str:
    try:
        if revision == "head":
            head = script.get_current_head()
        else:
            rev = script.get_revision(revision)
            head = rev.revision if rev is not None else None
    except (RevisionError, CommandError) as e:
        raise SchemaError(f"unknown revision: {revision}") from e
    if head is None:
        raise SchemaError(f"unknown revision: {revision}")
    return head


def _applied(script: ScriptDirectory, current: str | None) -> set[str]:
    if current is None:
        return set()
    return {s.revision for s in script.iterate_revisions(current, "base")}


async def _read_current_revision(database_url: str) -> str | None:
    engine = create_async_engine(database_url, poolclass=pool.NullPool)
    try:
        async with engine.connect() as conn:
            return await conn.run_sync(lambda c: MigrationContext.configure(c).get_current_revision())
    finally:
        await engine.dispose()


def current_revision(database_url: str | None = None) -> str | None:
    """Revision recorded in alembic_version, or None when nothing is applied."""
    try:
        return asyncio.run(_read_current_revision(database_url or settings.database_url))
    except SQLAlchemyError as e:
        raise SchemaError(f"cannot read schema version: {e}") from e


def upgrade(database_url: str | None = None, revision: str = "head") -> None:
    script = script_directory()
    target = _resolve(script, revision)
    current = current_revision(database_url)
    if target in _applied(script, current):
        raise SchemaError(f"revision {target} is already applied (current: {current})")

    cfg = alembic_config(database_url)
    try:
        command.upgrade(cfg, target)
    except (SQLAlchemyError, CommandError) as e:
        log.exception("upgrade to %s failed", target)
        raise SchemaError(f"upgrade to {target} failed: {e}") from e
    log.info("upgraded %s -> %s", current or "base", target)


def downgrade(database_url: str | None = None, revision: str = "base") -> None:
    script = script_directory()
    current = current_revision(database_url)
    if current is None:
        raise SchemaError("no applied revision to downgrade")
    if revision != "base":
        target = _resolve(script, revision)
        if target == current or target not in _applied(script, current):
            raise SchemaError(f"revision {target} is not below the current revision {current}")

    cfg = alembic_config(database_url)
    try:
        command.downgrade(cfg, revision)
    except (SQLAlchemyError, CommandError) as e:
        log.exception("downgrade to %s failed", revision)
        raise SchemaError(f"downgrade to {revision} failed: {e}") from e
    log.info("downgraded %s -> %s", current, revision)


def run_revision(
    connection: Connection,
    revision: str,
    *,
    direction: Literal["up", "down"] = "up",
) -> None:
    """
    Execute one revision's upgrade()/downgrade() body against `connection`.

    The alembic_version table is neither read nor written, so applying the
    same revision twice re-issues its DDL and fails against the live schema.
    """
    script = script_directory()
    try:
        rev = script.get_revision(revision)
    except (RevisionError, CommandError) as e:
        raise SchemaError(f"unknown revision: {revision}") from e
    if rev is None:
        raise SchemaError(f"unknown revision: {revision}")

    body = rev.module.upgrade if direction == "up" else rev.module.downgrade
    ctx = MigrationContext.configure(connection)
    try:
        with Operations.context(ctx):
            body()
    except SQLAlchemyError as e:
        log.error("revision %s (%s) failed: %s", revision, direction, e)
        raise SchemaError(f"revision {revision} ({direction}) failed: {e}") from e

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Generic, Protocol, Sequence, TypeVar

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.base import Base


log = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=Base)


class RecordNotFound(LookupError):
    def __init__(self, label: str, entry_id: int):
        super().__init__(f"{label} {entry_id} not found")
        self.label = label
        self.entry_id = entry_id


class DependencyConflict(Exception):
    def __init__(self, label: str, entry_id: int):
        super().__init__(f"{label} {entry_id} still has dependent records")
        self.label = label
        self.entry_id = entry_id


class DependencyCheck(Protocol):
    """
    Answers whether `entry` is still referenced by other records.
    A True answer blocks destroy_entry.
    """
    async def __call__(self, db: AsyncSession, entry: Any) -> bool:
        ...


@dataclass(frozen=True)
class CrudResource(Generic[ModelT]):
    """
    List/show/create/update/destroy over one mapped model.

    Entity specifics (ordering, dependency rule) are supplied as
    configuration, so each endpoint module composes its own instance.
    """
    model: type[ModelT]
    label: str
    order_by: Sequence[Any] = field(default_factory=tuple)
    has_dependents: DependencyCheck | None = None

    async def list_entries(self, db: AsyncSession) -> list[ModelT]:
        stmt = select(self.model).order_by(*self.order_by)
        return list((await db.execute(stmt)).scalars().all())

    async def count(self, db: AsyncSession) -> int:
        stmt = select(func.count()).select_from(self.model)
        return (await db.execute(stmt)).scalar_one()

    async def find_entry(self, db: AsyncSession, entry_id: int) -> ModelT:
        entry = await db.get(self.model, entry_id)
        if entry is None:
            raise RecordNotFound(self.label, entry_id)
        return entry

    async def create_entry(self, db: AsyncSession, attrs: dict[str, Any]) -> ModelT:
        entry = self.model(**attrs)
        db.add(entry)
        await db.commit()
        await db.refresh(entry)
        log.info("created %s id=%s", self.label, entry.id)
        return entry

    async def update_entry(self, db: AsyncSession, entry_id: int, attrs: dict[str, Any]) -> ModelT:
        entry = await self.find_entry(db, entry_id)
        for k, v in attrs.items():
            setattr(entry, k, v)
        await db.commit()
        await db.refresh(entry)
        log.info("updated %s id=%s fields=%s", self.label, entry_id, sorted(attrs))
        return entry

    async def destroy_entry(self, db: AsyncSession, entry_id: int) -> None:
        entry = await self.find_entry(db, entry_id)

        if self.has_dependents is not None and await self.has_dependents(db, entry):
            log.warning("refusing to destroy %s id=%s: dependents exist", self.label, entry_id)
            raise DependencyConflict(self.label, entry_id)

        await db.delete(entry)
        await db.commit()
        log.info("destroyed %s id=%s", self.label, entry_id)

# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Repository base: explicit save / find_by_id / delete over one table.
NO business rules here — pure CRUD. Every call runs in its own transaction.
"""
import uuid
from typing import Any, Dict, Optional, Type

from sqlalchemy import Table, delete, func, insert, select, text, update
from sqlalchemy.engine import Engine

from mailchimp_proxy.core.errors import ConflictError
from mailchimp_proxy.core.logging import get_logger
from mailchimp_proxy.models.entity import MailChimpEntity

logger = get_logger(__name__)

_TIMESTAMP_COLS = ("created_at", "updated_at")


class EntityRepository:
    table: Table
    entity_cls: Type[MailChimpEntity]
    id_field: str

    def __init__(self, engine: Engine):
        self._engine = engine

    # ── Write ──────────────────────────────────────────────────────────

    def save(self, entity: MailChimpEntity) -> MailChimpEntity:
        """Insert a new entity (generating its id) or update an existing one.

        Updates are guarded by the entity's version; a concurrent writer that
        got there first makes this raise ConflictError.
        """
        entity_id = getattr(entity, self.id_field)
        values = self._to_row(entity)

        if entity_id is None:
            entity_id = str(uuid.uuid4())
            with self._engine.begin() as conn:
                conn.execute(insert(self.table).values(id=entity_id, version=1, **values))
            setattr(entity, self.id_field, entity_id)
            entity.version = 1
            logger.debug("Inserted %s id=%s", self.table.name, entity_id)
            return entity

        # an existing remote id always wins over the incoming one
        values["mail_chimp_id"] = func.coalesce(self.table.c.mail_chimp_id, values["mail_chimp_id"])
        with self._engine.begin() as conn:
            result = conn.execute(
                update(self.table)
                .where(self.table.c.id == entity_id, self.table.c.version == entity.version)
                .values(version=entity.version + 1, **values)
            )
        if result.rowcount == 0:
            raise ConflictError(
                f"{self.entity_cls.__name__}[{entity_id}] was modified by another request"
            )
        entity.version += 1
        logger.debug("Updated %s id=%s version=%d", self.table.name, entity_id, entity.version)
        return entity

    def delete(self, entity_id: str) -> bool:
        with self._engine.begin() as conn:
            result = conn.execute(delete(self.table).where(self.table.c.id == entity_id))
        return result.rowcount > 0

    # ── Read ───────────────────────────────────────────────────────────

    def find_by_id(self, entity_id: str) -> Optional[MailChimpEntity]:
        with self._engine.connect() as conn:
            row = conn.execute(
                select(self.table).where(self.table.c.id == entity_id)
            ).fetchone()
        return self._from_row(row) if row else None

    def verify_connection(self):
        with self._engine.connect() as conn:
            conn.execute(text("SELECT 1"))

    # ── Private ────────────────────────────────────────────────────────

    def _to_row(self, entity: MailChimpEntity) -> Dict[str, Any]:
        return entity.model_dump(exclude={self.id_field, "version"})

    def _from_row(self, row) -> MailChimpEntity:
        data = {k: v for k, v in row._mapping.items() if k not in _TIMESTAMP_COLS}
        data[self.id_field] = data.pop("id")
        return self.entity_cls(**data)

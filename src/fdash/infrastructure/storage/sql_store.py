from __future__ import annotations

from typing import Mapping, Sequence

from sqlalchemy import Engine, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from fdash.application.ports.key_value_store import KeyValueStore
from fdash.domain.common.errors import StorageFailureError
from fdash.infrastructure.db.models.key_value import Base, KeyValueEntryModel
from fdash.infrastructure.db.session import get_engine


class SqlAlchemyKeyValueStore(KeyValueStore):
    def __init__(self, engine: Engine | None = None) -> None:
        self._engine = engine or get_engine()
        self._schema_ready = False

    def _ensure_schema(self) -> None:
        if self._schema_ready:
            return
        Base.metadata.create_all(self._engine, tables=[KeyValueEntryModel.__table__])
        self._schema_ready = True

    def get_many(self, keys: Sequence[str]) -> dict[str, str | None]:
        key_list = list(keys)
        statement = select(KeyValueEntryModel).where(KeyValueEntryModel.key.in_(key_list))
        try:
            self._ensure_schema()
            with Session(self._engine) as session:
                rows = {row.key: row.value for row in session.execute(statement).scalars()}
        except SQLAlchemyError as exc:
            raise StorageFailureError(f"database read failed: {exc}") from exc
        return {key: rows.get(key) for key in key_list}

    def set_many(self, values: Mapping[str, str]) -> None:
        try:
            self._ensure_schema()
            with Session(self._engine) as session, session.begin():
                for key, value in values.items():
                    session.merge(KeyValueEntryModel(key=key, value=value))
        except SQLAlchemyError as exc:
            raise StorageFailureError(f"database write failed: {exc}") from exc

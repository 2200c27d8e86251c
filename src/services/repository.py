"""Generic exact-match repository over a SQLAlchemy model."""

import logging
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from sqlalchemy.orm import Session

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT")


@dataclass
class UpdateResult:
    """Acknowledgment returned by ``Repository.update_one``."""

    matched_count: int
    modified_count: int


class Repository(Generic[ModelT]):
    """Query, insert, update and delete records of one model.

    Used directly for every table, e.g. ``Repository(db, Todo)``. Criteria
    are keyword arguments compared by equality against model columns.
    """

    def __init__(self, db: Session, model: type[ModelT]):
        self.db = db
        self.model = model

    def _query(self, criteria: dict[str, Any]):
        return self.db.query(self.model).filter_by(**criteria)

    def find(self, **criteria: Any) -> list[ModelT]:
        """Return every record matching the criteria in primary key order."""
        return self._query(criteria).order_by(self.model.id).all()

    def find_one(self, **criteria: Any) -> ModelT | None:
        """Return the first record matching the criteria, or None."""
        return self._query(criteria).first()

    def exists(self, **criteria: Any) -> bool:
        """Check whether any record matches the criteria."""
        return self.db.query(self._query(criteria).exists()).scalar()

    def add_one(self, **values: Any) -> ModelT:
        """Insert a record and return it with store-assigned fields loaded."""
        record = self.model(**values)
        self.db.add(record)
        self.db.commit()
        self.db.refresh(record)
        logger.debug(f"Inserted {self.model.__tablename__} {record.id}")
        return record

    def update_one(self, record: ModelT, values: dict[str, Any]) -> UpdateResult:
        """Apply ``values`` to an existing record.

        Only the given keys are written; everything else is left untouched.
        """
        modified = {key: value for key, value in values.items() if getattr(record, key) != value}
        for key, value in modified.items():
            setattr(record, key, value)
        if modified:
            self.db.commit()
            self.db.refresh(record)
        return UpdateResult(matched_count=1, modified_count=1 if modified else 0)

    def remove_one(self, record: ModelT) -> None:
        """Delete a record."""
        record_id = record.id
        self.db.delete(record)
        self.db.commit()
        logger.debug(f"Removed {self.model.__tablename__} {record_id}")

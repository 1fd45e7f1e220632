from sqlalchemy import func
from sqlalchemy.orm import Session
from datetime import timezone
from typing import List, Optional
import logging

from app.database import create_memory_engine, create_session_factory
from app.exceptions import DuplicateValue
from app.models.string_record import StringRecordRow
from app.schemas.strings import StringProperties, StringRecord

logger = logging.getLogger(__name__)


def _to_record(row: StringRecordRow) -> StringRecord:
    return StringRecord(
        id=row.id,
        value=row.value,
        properties=StringProperties(
            length=row.length,
            is_palindrome=row.is_palindrome,
            unique_characters=row.unique_characters,
            word_count=row.word_count,
            sha256_hash=row.sha256_hash,
            character_frequency_map=row.character_frequency_map,
        ),
        created_at=row.created_at.replace(tzinfo=timezone.utc),
    )


def _to_row(record: StringRecord) -> StringRecordRow:
    props = record.properties
    return StringRecordRow(
        id=record.id,
        value=record.value,
        length=props.length,
        is_palindrome=props.is_palindrome,
        unique_characters=props.unique_characters,
        word_count=props.word_count,
        sha256_hash=props.sha256_hash,
        character_frequency_map=dict(props.character_frequency_map),
        created_at=record.created_at.astimezone(timezone.utc).replace(tzinfo=None),
    )


class StringStore:
    """
    In-memory store of analyzed strings.

    Each instance owns its own in-memory database, so two stores never
    share records. Records are kept in insertion order and never updated.
    """

    def __init__(self):
        self.engine = create_memory_engine()
        self.SessionLocal = create_session_factory(self.engine)

    def _session(self) -> Session:
        return self.SessionLocal()

    def insert(self, record: StringRecord) -> StringRecord:
        """Store a new record. Raises DuplicateValue if its value is already stored."""
        with self._session() as db:
            if self._get_row_by_id(db, record.id) is not None:
                logger.info(f"Rejected duplicate string {record.id[:12]}")
                raise DuplicateValue(record.value)

            db.add(_to_row(record))
            db.commit()
        return record

    def find_by_value(self, value: str) -> Optional[StringRecord]:
        """Get record by exact (case-sensitive) value"""
        with self._session() as db:
            row = self._get_row_by_value(db, value)
            return _to_record(row) if row is not None else None

    def find_by_id(self, string_id: str) -> Optional[StringRecord]:
        """Get record by ID (hash)"""
        with self._session() as db:
            row = self._get_row_by_id(db, string_id)
            return _to_record(row) if row is not None else None

    def delete(self, value: str) -> bool:
        """Delete record by value"""
        with self._session() as db:
            row = self._get_row_by_value(db, value)
            if row is None:
                return False
            db.delete(row)
            db.commit()
            return True

    def scan_all(self) -> List[StringRecord]:
        """Snapshot of all records in insertion order"""
        with self._session() as db:
            rows = db.query(StringRecordRow).order_by(StringRecordRow.seq).all()
            return [_to_record(row) for row in rows]

    def count(self) -> int:
        with self._session() as db:
            return db.query(func.count(StringRecordRow.seq)).scalar()

    def close(self):
        self.engine.dispose()

    @staticmethod
    def _get_row_by_value(db: Session, value: str) -> Optional[StringRecordRow]:
        return db.query(StringRecordRow).filter(StringRecordRow.value == value).first()

    @staticmethod
    def _get_row_by_id(db: Session, string_id: str) -> Optional[StringRecordRow]:
        return db.query(StringRecordRow).filter(StringRecordRow.id == string_id).first()

from typing import Any, Dict, Optional

from flask import current_app
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from festboard import db
from festboard.models import LeaderboardRecord, MASTER_DOCUMENT_ID, utcnow, isoformat
from .errors import StoreUnavailableError


class DocumentStore:
    """Get/upsert access to the singleton leaderboard record.

    The table is used as an opaque key/value store: one row keyed by
    `master_data`, whose `content` is the whole document. Wait time is
    bounded by the engine options built from STORE_TIMEOUT_SEC.
    """

    def __init__(self, document_id: str = MASTER_DOCUMENT_ID):
        self.document_id = document_id

    def load(self) -> Optional[Dict[str, Any]]:
        """Fetch the stored document, or None when there is none to be had.

        An unreachable store is treated the same as an empty one.
        """
        try:
            record = db.session.get(LeaderboardRecord, self.document_id)
            document = record.to_dict() if record else None
            db.session.rollback()
            return document
        except SQLAlchemyError as exc:
            db.session.rollback()
            current_app.logger.error(f"[store] load of {self.document_id} failed: {exc}")
            return None

    def save(self, document: Dict[str, Any]) -> str:
        """Upsert the document and return the new write timestamp (ISO-8601).

        Either the whole record is replaced or the transaction is rolled
        back and StoreUnavailableError is raised.
        """
        content = {k: v for k, v in document.items() if k != 'lastUpdated'}
        written_at = utcnow()
        try:
            try:
                self._upsert(content, written_at)
            except IntegrityError:
                # Another connection inserted the first record; update it instead
                db.session.rollback()
                self._upsert(content, written_at)
        except SQLAlchemyError as exc:
            db.session.rollback()
            raise StoreUnavailableError(f"could not save {self.document_id}: {exc.__class__.__name__}") from exc
        return isoformat(written_at)

    def _upsert(self, content, written_at):
        record = db.session.get(LeaderboardRecord, self.document_id)
        if record is None:
            record = LeaderboardRecord(id=self.document_id)
        record.content = content
        record.last_updated = written_at
        db.session.add(record)
        db.session.commit()

    def reset(self, document: Dict[str, Any]) -> str:
        """Drop and recreate the table, then store `document` in it."""
        db.drop_all()
        db.create_all()
        return self.save(document)

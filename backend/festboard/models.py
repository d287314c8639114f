from festboard import db
from datetime import datetime, timezone

MASTER_DOCUMENT_ID = 'master_data'


def utcnow():
    return datetime.now(timezone.utc)


class LeaderboardRecord(db.Model):
    """The singleton leaderboard document as persisted in the store."""
    __tablename__ = 'leaderboard_document'
    id = db.Column(db.String(64), primary_key=True, default=MASTER_DOCUMENT_ID)
    content = db.Column(db.JSON, nullable=False)
    last_updated = db.Column(db.DateTime(timezone=True), nullable=False, default=utcnow)

    def to_dict(self):
        document = dict(self.content or {})
        if self.last_updated:
            document['lastUpdated'] = isoformat(self.last_updated)
        return document


def isoformat(value):
    # SQLite hands back naive datetimes even for timezone-aware columns
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.isoformat()

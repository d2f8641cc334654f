from datetime import datetime, timezone

from locavote.extensions import db


def _utcnow():
    return datetime.now(timezone.utc)


class Submission(db.Model):
    __tablename__ = "submissions"

    id = db.Column(db.Integer, primary_key=True)
    event_id = db.Column(db.Integer, db.ForeignKey("events.id"), nullable=True)
    submission_token = db.Column(db.String(64), unique=True, nullable=False)
    submitted_at = db.Column(db.DateTime(timezone=True), nullable=False, default=_utcnow)

    votes = db.relationship("Vote", backref="submission", lazy=True)

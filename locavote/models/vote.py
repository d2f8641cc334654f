from locavote.extensions import db


class Vote(db.Model):
    __tablename__ = "votes"
    __table_args__ = (
        db.UniqueConstraint("submission_id", "location_id", name="uq_votes_submission_location"),
        db.CheckConstraint("points IN (1, 2, 3)", name="ck_votes_points"),
    )

    id = db.Column(db.Integer, primary_key=True)
    submission_id = db.Column(db.Integer, db.ForeignKey("submissions.id"), nullable=False)
    location_id = db.Column(db.Integer, db.ForeignKey("locations.id"), nullable=False)
    points = db.Column(db.Integer, nullable=False)
    comment = db.Column(db.Text, nullable=True)

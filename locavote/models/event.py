from locavote.extensions import db


class Event(db.Model):
    __tablename__ = "events"

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(200), nullable=True)
    active = db.Column(db.Boolean, nullable=False, default=False)

    locations = db.relationship("Location", backref="event", lazy=True)
    submissions = db.relationship("Submission", backref="event", lazy=True)

from locavote.extensions import db


class Location(db.Model):
    __tablename__ = "locations"

    id = db.Column(db.Integer, primary_key=True)
    event_id = db.Column(db.Integer, db.ForeignKey("events.id"), nullable=True)
    name = db.Column(db.String(200), nullable=False)
    artist = db.Column(db.String(200), nullable=False)
    weight = db.Column(db.Float, nullable=False, default=1.0)

    votes = db.relationship("Vote", backref="location", lazy=True)

    def to_catalog_entry(self):
        return {
            "id": self.id,
            "locatie": self.name,
            "artiest": self.artist,
            "wegingsfactor": self.weight,
        }

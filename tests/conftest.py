from pathlib import Path
import sys
import os

import pytest

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

# Safety default for any module-level app creation during test imports.
os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")

from locavote import create_app
from locavote.extensions import db
from locavote.models import Event, Location

RESULTS_KEY = "test-results-key"


@pytest.fixture()
def app_config():
    return {}


@pytest.fixture()
def app(tmp_path: Path, app_config):
    db_file = tmp_path / "test.sqlite3"
    config = {
        "TESTING": True,
        "SQLALCHEMY_DATABASE_URI": f"sqlite:///{db_file}",
        "RESULTS_VIEW_KEY": RESULTS_KEY,
        "EVENT_SCOPING": True,
        "RESULTS_WEIGHTING": "none",
        "COMMENT_SEPARATOR": " | ",
    }
    config.update(app_config)
    app = create_app(config)

    with app.app_context():
        driver = db.engine.url.drivername
        if driver != "sqlite":
            raise RuntimeError(
                f"Test database must be SQLite, got '{driver}'. Refusing to run destructive test setup."
            )
        db.drop_all()
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def db_session(app):
    with app.app_context():
        yield db.session


@pytest.fixture()
def active_event(db_session):
    event = Event(name="Spring round", active=True)
    db_session.add(event)
    db_session.commit()
    return event


@pytest.fixture()
def locations(db_session, active_event):
    rows = [
        Location(id=5, event_id=active_event.id, name="De Kroon", artist="Mira", weight=1.0),
        Location(id=7, event_id=active_event.id, name="Het Depot", artist="Joost", weight=2.0),
        Location(id=9, event_id=active_event.id, name="Paradiso", artist="Lena", weight=1.5),
        Location(id=11, event_id=active_event.id, name="Tivoli", artist="Sam", weight=1.0),
    ]
    db_session.add_all(rows)
    db_session.commit()
    return {location.id: location for location in rows}

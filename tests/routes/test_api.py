import csv
import io

import pytest

from locavote.models import Event, Location, Submission, Vote

RESULTS_KEY = "test-results-key"


def submit(client, selections):
    return client.post("/api/submit", json={"selections": selections})


def test_locations_lists_active_event_catalog(client, locations):
    response = client.get("/api/locations")

    assert response.status_code == 200
    body = response.get_json()
    assert body["ok"] is True
    assert [entry["id"] for entry in body["locations"]] == [5, 7, 9, 11]
    assert body["locations"][1] == {
        "id": 7,
        "locatie": "Het Depot",
        "artiest": "Joost",
        "wegingsfactor": 2.0,
    }


def test_locations_empty_without_active_event(client, db_session):
    response = client.get("/api/locations")
    assert response.get_json() == {"ok": True, "locations": []}


def test_submit_stores_votes(client, locations):
    response = submit(
        client,
        [
            {"locationId": 5, "points": 3, "comment": "Best gig"},
            {"locationId": 7, "points": 2},
            {"locationId": 9, "points": 1, "comment": "   "},
        ],
    )

    assert response.status_code == 200
    assert response.get_json() == {"ok": True}
    assert Submission.query.count() == 1
    comments = {vote.location_id: vote.comment for vote in Vote.query.all()}
    assert comments == {5: "Best gig", 7: None, 9: None}


@pytest.mark.parametrize(
    "selections, message",
    [
        ([], "Choose 1, 2 or 3 locations."),
        (
            [{"locationId": 5, "points": 3}, {"locationId": 5, "points": 2}],
            "Each location can only be chosen once.",
        ),
        (
            [{"locationId": 5, "points": 2}, {"locationId": 7, "points": 1}],
            "Assign the points 3, 2, each exactly once.",
        ),
        ([{"locationId": 999, "points": 3}], "Unknown location(s): 999."),
    ],
)
def test_submit_rejections_are_400_and_write_nothing(client, locations, selections, message):
    response = submit(client, selections)

    assert response.status_code == 400
    assert response.get_json() == {"ok": False, "error": message}
    assert Submission.query.count() == 0
    assert Vote.query.count() == 0


def test_submit_with_unparseable_body_is_400(client, locations):
    response = client.post("/api/submit", data="{not json", content_type="application/json")
    assert response.status_code == 400
    assert response.get_json() == {"ok": False, "error": "Invalid JSON."}


def test_submit_without_active_event_is_500(client, db_session):
    response = submit(client, [{"locationId": 5, "points": 3}])
    assert response.status_code == 500
    assert response.get_json()["ok"] is False


@pytest.mark.parametrize("key", ["", "wrong", RESULTS_KEY.upper(), RESULTS_KEY + " "])
def test_results_refuse_other_keys_even_without_votes(client, db_session, key):
    for path in ("/api/results", "/api/results.csv"):
        response = client.get(path, query_string={"key": key})
        assert response.status_code == 401
        assert response.get_json() == {"ok": False, "error": "access denied"}


def test_results_without_key_parameter_is_401(client, db_session):
    assert client.get("/api/results").status_code == 401


@pytest.mark.parametrize("app_config", [{"RESULTS_VIEW_KEY": ""}])
def test_results_unavailable_when_key_not_configured(client, db_session, app_config):
    response = client.get("/api/results", query_string={"key": ""})
    assert response.status_code == 500
    assert response.get_json() == {"ok": False, "error": "results key is not configured"}


def test_results_rank_submitted_votes(client, locations):
    submit(client, [{"locationId": 5, "points": 3}, {"locationId": 7, "points": 2}])
    submit(
        client,
        [
            {"locationId": 7, "points": 3, "comment": "again"},
            {"locationId": 9, "points": 2},
            {"locationId": 5, "points": 1},
        ],
    )

    response = client.get("/api/results", query_string={"key": RESULTS_KEY})

    assert response.status_code == 200
    rows = response.get_json()["rows"]
    assert [(r["positie"], r["locatie_id"], r["punten_totaal"]) for r in rows] == [
        (1, 7, 5),
        (2, 5, 4),
        (3, 9, 2),
    ]
    assert rows[0]["aantal_3"] == 1
    assert rows[0]["aantal_2"] == 1
    assert rows[0]["toelichting_bundel"] == "again"
    assert rows[1]["toelichting_bundel"] is None


def test_results_csv_download(client, locations):
    submit(client, [{"locationId": 9, "points": 3, "comment": 'She said "encore"'}])

    response = client.get("/api/results.csv", query_string={"key": RESULTS_KEY})

    assert response.status_code == 200
    assert response.headers["Content-Type"] == "text/csv; charset=utf-8"
    assert response.headers["Content-Disposition"] == 'attachment; filename="uitslag.csv"'
    assert response.headers["Cache-Control"] == "no-store"

    text = response.get_data(as_text=True)
    assert 'She said ""encore""' in text
    parsed = list(csv.reader(io.StringIO(text)))
    assert parsed[1] == ["1", "9", "Paradiso", "Lena", "1.5", "1", "3", "1", "0", "0", 'She said "encore"']


def test_submit_parses_json_sent_with_another_content_type(client, locations):
    response = client.post(
        "/api/submit",
        data='{"selections": [{"locationId": 5, "points": 3}]}',
        content_type="text/plain",
    )

    assert response.status_code == 200
    assert response.get_json() == {"ok": True}
    assert Vote.query.one().location_id == 5


@pytest.mark.parametrize("body", [{"selections": None}, {}])
def test_missing_or_null_selections_report_the_count(client, locations, body):
    response = client.post("/api/submit", json=body)

    assert response.status_code == 400
    assert response.get_json() == {"ok": False, "error": "Choose 1, 2 or 3 locations."}


@pytest.mark.parametrize("app_config", [{"RESULTS_VIEW_KEY": ""}])
def test_csv_unavailable_when_key_not_configured(client, db_session, app_config):
    response = client.get("/api/results.csv", query_string={"key": "anything"})
    assert response.status_code == 500
    assert response.get_json() == {"ok": False, "error": "results key is not configured"}


def add_unscoped_locations(db_session):
    closed = Event(name="Last year", active=False)
    db_session.add(closed)
    db_session.flush()
    db_session.add_all(
        [
            Location(id=2, event_id=closed.id, name="Old Hall", artist="Ria", weight=1.0),
            Location(id=4, event_id=None, name="Pop-up", artist="Bo", weight=1.0),
        ]
    )
    db_session.commit()


@pytest.mark.parametrize("app_config", [{"EVENT_SCOPING": False}])
def test_unscoped_catalog_lists_every_location(client, db_session, app_config):
    add_unscoped_locations(db_session)

    response = client.get("/api/locations")

    assert response.status_code == 200
    assert [entry["id"] for entry in response.get_json()["locations"]] == [2, 4]


@pytest.mark.parametrize("app_config", [{"EVENT_SCOPING": False}])
def test_unscoped_results_need_no_active_event(client, db_session, app_config):
    add_unscoped_locations(db_session)
    assert Event.query.filter_by(active=True).count() == 0

    assert submit(client, [{"locationId": 2, "points": 3}]).status_code == 200
    assert submit(
        client, [{"locationId": 4, "points": 3}, {"locationId": 2, "points": 2}]
    ).status_code == 200

    response = client.get("/api/results", query_string={"key": RESULTS_KEY})

    assert response.status_code == 200
    rows = response.get_json()["rows"]
    assert [(r["positie"], r["locatie_id"], r["punten_totaal"]) for r in rows] == [
        (1, 2, 5),
        (2, 4, 3),
    ]

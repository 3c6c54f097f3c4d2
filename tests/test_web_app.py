"""Tests for the Flask JSON API."""

import csv
import io

import pytest

from gameplanner.ui.web_app import create_app


@pytest.fixture
def client(tmp_path):
    app = create_app(str(tmp_path / "squads"))
    app.config["TESTING"] = True
    return app.test_client()


def roster_payload(outfield_count):
    players = [{"id": "gk", "name": "Ella", "role": "GK"}]
    for i in range(1, outfield_count + 1):
        players.append({"id": f"p{i}", "name": f"Player {i}", "role": "Outfield", "manualMinutes": ""})
    return players


def plan_payload(outfield_count=11, **settings):
    return {"settings": {"squadSize": 12, **settings}, "players": roster_payload(outfield_count)}


def test_index(client):
    response = client.get("/")

    assert response.status_code == 200
    assert response.get_json() == {"success": True, "app": "Game Planner"}


def test_formats(client):
    data = client.get("/api/formats").get_json()

    assert [entry["game_format"] for entry in data["formats"]] == ["5v5", "7v7", "9v9", "11v11"]
    nine = data["formats"][2]
    assert nine["match_duration"] == 60
    assert nine["outfield_spots"] == 8
    assert nine["formations"][0] == "3-2-3"
    assert data["sub_time_options"] == [5, 8, 10, 15]


def test_format_formations(client):
    data = client.get("/api/formats/5v5/formations").get_json()

    assert data["formations"][0] == {
        "name": "1-2-1", "game_format": "5v5", "positions": ["CD", "CM-R", "CM-L", "ST"],
    }
    assert client.get("/api/formats/6v6/formations").status_code == 404


def test_default_settings(client):
    settings = client.get("/api/settings/default").get_json()["settings"]

    assert settings["game_format"] == "9v9"
    assert settings["selected_formation"] == "3-3-2"


def test_change_format(client):
    response = client.post("/api/settings/format", json={"settings": {}, "game_format": "7v7"})
    settings = response.get_json()["settings"]

    assert settings["match_duration"] == 50
    assert settings["selected_formation"] == "2-1-3"
    assert client.post("/api/settings/format", json={"game_format": "6v6"}).status_code == 400


def test_validate(client):
    ok = client.post("/api/validate", json=plan_payload()).get_json()
    bad = client.post("/api/validate", json=plan_payload(7, subInterval=7)).get_json()

    assert ok == {"success": True, "errors": []}
    assert not bad["success"]
    assert "Error: Not enough players to fill the formation spots." in bad["errors"]
    assert any("Substitution interval" in error for error in bad["errors"])


def test_generate_plan(client):
    response = client.post("/api/plan", json=plan_payload())

    assert response.status_code == 200
    data = response.get_json()
    assert data["success"]
    assert "--- Match End (60:00) ---" in data["text"]

    plan = data["plan"]
    assert plan["total_substitutions"] == 8
    assert [event["type"] for event in plan["events"]] == [
        "lineup", "substitution", "substitution", "period_reset", "lineup",
        "substitution", "substitution", "match_end",
    ]
    first_pair = plan["events"][1]["pairs"][0]
    assert first_pair["on"]["name"] == "Player 5"
    assert first_pair["off"]["name"] == "Player 8"
    assert first_pair["position"] == "CD-R"


def test_generate_plan_failure(client):
    response = client.post("/api/plan", json=plan_payload(7))

    assert response.status_code == 400
    assert response.get_json() == {
        "success": False, "error": "Error: Not enough players to fill the formation spots.",
    }


def test_generate_plan_rejects_malformed_body(client):
    assert client.post("/api/plan", data="not json").status_code == 400
    bad_player = {"settings": {}, "players": [{"name": "No id"}]}
    assert client.post("/api/plan", json=bad_player).status_code == 400


def test_plan_report_csv(client):
    response = client.post("/api/plan/report", json=plan_payload())

    assert response.status_code == 200
    assert response.mimetype == "text/csv"
    assert "minutes_report_9v9_3-3-2.csv" in response.headers["Content-Disposition"]
    rows = list(csv.reader(io.StringIO(response.get_data(as_text=True))))
    assert rows[0] == ["Game Planner Minutes Report"]


def test_squad_lifecycle(client):
    payload = {"name": "U10 Girls", **plan_payload()}

    saved = client.post("/api/squads", json=payload).get_json()
    assert saved == {"success": True, "file": "u10_girls.json"}

    listed = client.get("/api/squads").get_json()["squads"]
    assert [squad["name"] for squad in listed] == ["U10 Girls"]
    assert listed[0]["player_count"] == 12

    loaded = client.get("/api/squads/u10_girls").get_json()
    assert loaded["players"][0]["name"] == "Ella"
    assert loaded["settings"]["squad_size"] == 12

    assert client.delete("/api/squads/u10_girls").status_code == 200
    assert client.get("/api/squads/u10_girls").status_code == 404
    assert client.delete("/api/squads/u10_girls").status_code == 404


def test_save_squad_requires_name(client):
    response = client.post("/api/squads", json=plan_payload())

    assert response.status_code == 400


def test_generate_plan_rejects_duplicate_ids(client):
    payload = plan_payload()
    payload["players"][11]["id"] = "p1"

    response = client.post("/api/plan", json=payload)

    assert response.status_code == 400
    assert "duplicate player id 'p1'" in response.get_json()["error"]

from fastapi.testclient import TestClient
from server.main import app

client = TestClient(app)


def new_game():
    r = client.post("/new")
    assert r.status_code == 200
    return r.json()


def test_new_game_state():
    data = new_game()
    st = data["state"]
    assert st["turn"] == "W"
    assert st["phase"] == "awaiting_placement"
    assert st["winner"] is None
    assert st["status"] == "White to place"
    assert len(st["board"]) == 6 and all(len(row) == 6 for row in st["board"])


def test_api_flow():
    gid = new_game()["game_id"]
    r = client.post(f"/place/{gid}", json={"quadrant": 0, "row": 0, "col": 0})
    assert r.status_code == 200
    js = r.json()
    assert js["accepted"] is True
    assert js["state"]["quadrants"][0][0][0] == "W"
    assert js["state"]["phase"] == "awaiting_rotation"

    r = client.post(f"/place/{gid}", json={"quadrant": 1, "row": 0, "col": 0})
    assert r.json()["accepted"] is False

    r = client.post(f"/rotate/{gid}", json={"quadrant": 0, "direction": "CW"})
    js = r.json()
    assert js["accepted"] is True
    assert js["state"]["board"][0][2] == "W"
    assert js["state"]["turn"] == "B"

    r = client.get(f"/state/{gid}")
    assert r.json()["state"]["status"] == "Black to place"

    r = client.post(f"/reset/{gid}")
    assert r.status_code == 200
    assert r.json()["state"]["turn"] == "W"
    assert r.json()["state"]["board"][0][2] == "."


def test_validation_errors():
    gid = new_game()["game_id"]
    r = client.post(f"/place/{gid}", json={"quadrant": 4, "row": 0, "col": 0})
    assert r.status_code == 422
    r = client.post(f"/rotate/{gid}", json={"quadrant": 0, "direction": "SIDEWAYS"})
    assert r.status_code == 422


def test_unknown_game():
    assert client.get("/state/nope").status_code == 404
    r = client.post("/place/nope", json={"quadrant": 0, "row": 0, "col": 0})
    assert r.status_code == 404

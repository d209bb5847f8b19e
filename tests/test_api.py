import asyncio

from fastapi import FastAPI
from fastapi.testclient import TestClient

from fakes import MISSING
from timesync import main


def make_schedule(client, name, slots, user_id=None, tz="UTC"):
    payload = {"name": name, "timezone": tz, "slots": slots}
    if user_id:
        payload["user_id"] = user_id
    response = client.post("/api/schedules", json=payload)
    assert response.status_code == 200, response.text
    return response.json()


def slot(start_hour, end_hour):
    return {
        "start": f"2025-01-06T{start_hour:02d}:00:00+00:00",
        "end": f"2025-01-06T{end_hour:02d}:00:00+00:00",
    }


def make_group(client, name, member_ids):
    response = client.post(
        "/api/groups", json={"name": name, "server_id": "srv-1", "member_ids": member_ids}
    )
    assert response.status_code == 200, response.text
    return response.json()


def test_health_and_version(client):
    assert client.get("/health").json() == {"status": "ok"}
    assert client.get("/version").json() == {"version": "0.1.0"}


# ============================================================================
# SCHEDULES
# ============================================================================


def test_create_and_get_schedule(client):
    created = make_schedule(client, "evenings", [slot(18, 20), slot(9, 10)], tz="Europe/Berlin")

    fetched = client.get(f"/api/schedules/{created['id']}").json()
    assert fetched["name"] == "evenings"
    assert fetched["timezone"] == "Europe/Berlin"
    assert [s["start"][:19] for s in fetched["slots"]] == [
        "2025-01-06T09:00:00",
        "2025-01-06T18:00:00",
    ]


def test_offset_timestamps_are_stored_as_utc(client):
    created = make_schedule(
        client,
        "offset",
        [{"start": "2025-01-06T11:00:00+02:00", "end": "2025-01-06T12:00:00+02:00"}],
    )
    assert created["slots"][0]["start"].startswith("2025-01-06T09:00:00")


def test_update_schedule_replaces_slots(client):
    created = make_schedule(client, "old", [slot(9, 10), slot(11, 12)])

    response = client.put(
        f"/api/schedules/{created['id']}", json={"name": "new", "slots": [slot(14, 15)]}
    )
    assert response.status_code == 200
    assert response.json()["id"] == created["id"]

    fetched = client.get(f"/api/schedules/{created['id']}").json()
    assert fetched["name"] == "new"
    assert [s["start"][:13] for s in fetched["slots"]] == ["2025-01-06T14"]


def test_missing_schedule_is_404(client):
    response = client.get(f"/api/schedules/{MISSING}")
    assert response.status_code == 404
    assert response.json()["entity"] == "schedule"


def test_malformed_schedule_id_is_400(client):
    assert client.get("/api/schedules/not-a-uuid").status_code == 400
    assert client.put("/api/schedules/not-a-uuid", json={"name": "x"}).status_code == 400


def test_schedule_lookup_ignores_id_case(client):
    created = make_schedule(client, "caps", [slot(9, 10)])
    assert client.get(f"/api/schedules/{created['id'].upper()}").json()["id"] == created["id"]


def test_schedule_payload_validation(client):
    naive = {"name": "x", "slots": [{"start": "2025-01-06T09:00:00", "end": "2025-01-06T10:00:00"}]}
    backwards = {"name": "x", "slots": [slot(10, 9)]}
    bad_zone = {"name": "x", "timezone": "Mars/Olympus"}

    for payload in (naive, backwards, bad_zone):
        assert client.post("/api/schedules", json=payload).status_code == 422


# ============================================================================
# USERS AND GROUPS
# ============================================================================


def test_link_user_and_lookup(client):
    schedule = make_schedule(client, "s", [slot(9, 10)])

    response = client.post("/api/users", json={"user_id": "u1", "schedule_id": schedule["id"]})
    assert response.status_code == 200
    assert client.get("/api/users/u1").json() == {"user_id": "u1", "schedule_id": schedule["id"]}


def test_link_user_to_unknown_schedule(client):
    response = client.post("/api/users", json={"user_id": "u1", "schedule_id": MISSING})
    assert response.status_code == 404
    assert response.json()["entity"] == "schedule"


def test_unknown_user_is_404(client):
    assert client.get("/api/users/ghost").status_code == 404
    assert client.get("/api/users/ghost/groups").status_code == 404


def test_group_lifecycle(client):
    group = make_group(client, "Raiders", ["u1", "u2"])
    assert group["name"] == "Raiders"
    assert group["role_id"] is None

    detail = client.get(f"/api/groups/{group['id']}").json()
    assert [m["user_id"] for m in detail["members"]] == ["u1", "u2"]
    assert all(m["schedule_id"] is None for m in detail["members"])

    response = client.put(
        f"/api/groups/{group['id']}",
        json={"name": "Raid Team", "add_member_ids": ["u3"], "remove_member_ids": ["u1"]},
    )
    assert response.status_code == 200

    detail = client.get(f"/api/groups/{group['id']}").json()
    assert detail["name"] == "Raid Team"
    assert [m["user_id"] for m in detail["members"]] == ["u2", "u3"]

    role = client.put(f"/api/groups/{group['id']}/role", json={"role_id": "role-42"}).json()
    assert role["role_id"] == "role-42"
    assert [g["id"] for g in client.get("/api/users/u3/groups").json()] == [group["id"]]


def test_group_lookup_errors(client):
    assert client.get("/api/groups/not-a-uuid").status_code == 400
    assert client.get(f"/api/groups/{MISSING}").status_code == 404


def test_group_lookup_ignores_id_case(client):
    g1, _ = seed_scenario(client)

    response = client.get(f"/api/groups/{g1.upper()}")
    assert response.status_code == 200
    assert response.json()["id"] == g1

    match = client.get("/api/availability/match", params={"group_ids": g1.upper()}).json()
    assert match["matches"][0]["groups"][0]["group_id"] == g1


def test_blank_group_name_is_rejected(client):
    response = client.post("/api/groups", json={"name": "  ", "server_id": "srv-1"})
    assert response.status_code == 422


# ============================================================================
# MATCHING
# ============================================================================


def seed_scenario(client):
    make_schedule(client, "raid", [slot(9, 11)], user_id="u1")
    make_schedule(client, "heal", [slot(10, 12)], user_id="u2")
    raiders = make_group(client, "Raiders", ["u1"])
    healers = make_group(client, "Healers", ["u2"])
    return raiders["id"], healers["id"]


def test_match_two_groups(client):
    g1, g2 = seed_scenario(client)

    response = client.get("/api/availability/match", params={"group_ids": f"{g1},{g2}"})
    assert response.status_code == 200

    (match,) = response.json()["matches"]
    assert match["start"].startswith("2025-01-06T10:00:00")
    assert match["end"].startswith("2025-01-06T11:00:00")
    assert [g["name"] for g in match["groups"]] == ["Raiders", "Healers"]
    assert match["groups"][0] == {
        "group_id": g1,
        "name": "Raiders",
        "available_user_ids": ["u1"],
        "count": 1,
        "group_size": 1,
        "roster_size": 1,
    }


def test_match_minimum_not_reachable(client):
    g1, g2 = seed_scenario(client)
    response = client.get(
        "/api/availability/match", params={"group_ids": f"{g1},{g2}", "min_per_group": 2}
    )
    assert response.json() == {"matches": []}


def test_match_with_zero_count(client):
    g1, g2 = seed_scenario(client)
    response = client.get("/api/availability/match", params={"group_ids": f"{g1},{g2}", "count": 0})
    assert response.status_code == 200
    assert response.json() == {"matches": []}


def test_match_request_errors(client):
    g1, _ = seed_scenario(client)

    assert client.get("/api/availability/match").status_code == 400
    assert client.get("/api/availability/match", params={"group_ids": "abc"}).status_code == 400
    assert (
        client.get(
            "/api/availability/match", params={"group_ids": g1, "count": 101}
        ).status_code
        == 400
    )
    assert (
        client.get(
            "/api/availability/match", params={"group_ids": g1, "min_per_group": -1}
        ).status_code
        == 400
    )


def test_match_unknown_group(client):
    g1, _ = seed_scenario(client)

    response = client.get("/api/availability/match", params={"group_ids": f"{g1},{MISSING}"})
    assert response.status_code == 404
    assert response.json() == {
        "error": f"Group with ID {MISSING} not found",
        "entity": "group",
        "id": MISSING,
    }


# ============================================================================
# REQUEST DEADLINE
# ============================================================================


def test_slow_request_times_out(monkeypatch):
    monkeypatch.setattr(main, "REQUEST_TIMEOUT_SECONDS", 0.05)

    slow_app = FastAPI()
    slow_app.middleware("http")(main.request_deadline)

    @slow_app.get("/slow")
    async def slow():
        await asyncio.sleep(2)
        return {"done": True}

    @slow_app.get("/fast")
    async def fast():
        return {"done": True}

    client = TestClient(slow_app)
    assert client.get("/fast").json() == {"done": True}

    response = client.get("/slow")
    assert response.status_code == 504
    assert response.json() == {"error": "Request timed out"}

"""HTTP tests of the gathering endpoints."""
from beanie import PydanticObjectId as ObjId


def _gathering_body(**overrides):
    body = {
        "name": "Sunday session",
        "place": "Studio 4",
        "gatheringDate": "2026-11-01T18:00:00Z",
        "gatheringSessions": [
            {"bandSession": "DRUM", "recruitCount": 1},
            {"bandSession": "VOCAL", "recruitCount": 2},
        ],
    }
    body.update(overrides)
    return body


async def test_create_gathering(client, login, make_user):
    alice = await make_user("alice")
    login(alice)

    response = await client.post("/jammit/gatherings", json=_gathering_body())

    assert response.status_code == 201
    gathering = response.json()["data"]
    assert gathering["status"] == "RECRUITING"
    assert gathering["creatorId"] == str(alice.doc.id)
    assert [session["bandSession"] for session in gathering["sessions"]] == ["DRUM", "VOCAL"]
    assert gathering["sessions"][1]["recruitCount"] == 2
    assert [p["userId"] for p in gathering["participants"]] == [str(alice.doc.id)]


async def test_create_gathering_with_null_band_session_yields_400(
        client, login, make_user, error_logs):
    login(await make_user("alice"))
    body = _gathering_body(gatheringSessions=[{"bandSession": None, "recruitCount": 1}])

    response = await client.post("/jammit/gatherings", json=body)

    assert response.status_code == 400
    assert any("bandSession is null!" in message for message in error_logs)


async def test_create_gathering_rejects_bad_sessions(client, login, make_user):
    login(await make_user("alice"))
    response = await client.post(
        "/jammit/gatherings", json=_gathering_body(gatheringSessions=[]))
    assert response.status_code == 400

    doubled = [{"bandSession": "BASS", "recruitCount": 1}] * 2
    response = await client.post(
        "/jammit/gatherings", json=_gathering_body(gatheringSessions=doubled))
    assert response.status_code == 400

    unknown = [{"bandSession": "KAZOO", "recruitCount": 1}]
    response = await client.post(
        "/jammit/gatherings", json=_gathering_body(gatheringSessions=unknown))
    assert response.status_code == 400


async def test_join_gathering(client, login, make_user):
    alice = await make_user("alice")
    bob = await make_user("bob")
    carol = await make_user("carol")
    login(alice)
    gathering_id = (await client.post(
        "/jammit/gatherings", json=_gathering_body())).json()["data"]["id"]

    login(bob)
    url = f"/jammit/gatherings/{gathering_id}/participants"
    response = await client.post(url, json={"bandSession": "DRUM"})
    assert response.status_code == 200
    drum = response.json()["data"]["sessions"][0]
    assert drum["currentCount"] == 1

    # Joining twice conflicts
    response = await client.post(url, json={"bandSession": "VOCAL"})
    assert response.status_code == 409

    # The drum slot is full now
    login(carol)
    response = await client.post(url, json={"bandSession": "DRUM"})
    assert response.status_code == 400


async def test_complete_gathering_only_by_creator(client, login, make_user):
    alice = await make_user("alice")
    bob = await make_user("bob")
    login(alice)
    gathering_id = (await client.post(
        "/jammit/gatherings", json=_gathering_body())).json()["data"]["id"]

    login(bob)
    response = await client.put(f"/jammit/gatherings/{gathering_id}/complete")
    assert response.status_code == 403

    login(alice)
    response = await client.put(f"/jammit/gatherings/{gathering_id}/complete")
    assert response.status_code == 200
    assert response.json()["data"]["status"] == "COMPLETED"

    response = await client.get(f"/jammit/gatherings/{gathering_id}")
    assert response.json()["data"]["status"] == "COMPLETED"


async def test_unknown_gathering_yields_404(client, login, make_user):
    login(await make_user("alice"))
    response = await client.get(f"/jammit/gatherings/{ObjId()}")
    assert response.status_code == 404
    assert response.json()["result"] == "FAILURE"

    response = await client.get("/jammit/gatherings/xyz")
    assert response.status_code == 400


async def test_cancel_gathering(client, login, make_user):
    alice = await make_user("alice")
    bob = await make_user("bob")
    login(alice)
    gathering_id = (await client.post(
        "/jammit/gatherings", json=_gathering_body())).json()["data"]["id"]

    login(bob)
    response = await client.put(f"/jammit/gatherings/{gathering_id}/cancel")
    assert response.status_code == 403

    login(alice)
    response = await client.put(f"/jammit/gatherings/{gathering_id}/cancel")
    assert response.status_code == 200
    assert response.json()["data"]["status"] == "CANCELED"

    # Canceled gatherings can neither be joined nor completed
    login(bob)
    response = await client.post(f"/jammit/gatherings/{gathering_id}/participants",
                                 json={"bandSession": "DRUM"})
    assert response.status_code == 400
    login(alice)
    response = await client.put(f"/jammit/gatherings/{gathering_id}/complete")
    assert response.status_code == 400

import pytest


def create_user(client, username):
    response = client.post("/api/users/", json={
        "username": username,
        "email": f"{username}@example.com",
        "full_name": username.title(),
    })
    assert response.status_code == 201, response.text
    return response.json()


def create_venue(client, creator, name, latitude, longitude, category="restaurant"):
    response = client.post("/api/venues/", json={
        "name": name,
        "address": f"{name} street",
        "latitude": latitude,
        "longitude": longitude,
        "category": category,
        "created_by": creator["id"],
    })
    assert response.status_code == 201, response.text
    return response.json()


class TestHealth:

    def test_health(self, client):
        assert client.get("/api/health").json() == {"status": "healthy"}

    @pytest.mark.parametrize("path", ["/api/venues/{venue_id}", "/api/users/{user_id}/checkins"])
    def test_read_endpoints_are_documented(self, client, path):
        operation = client.get("/openapi.json").json()["paths"][path]["get"]
        assert operation["description"].strip()


class TestFriendshipEndpoints:

    @pytest.fixture
    def pair(self, client):
        return create_user(client, "alice"), create_user(client, "bob")

    def test_request_accept_and_list_friends(self, client, pair):
        alice, bob = pair

        created = client.post("/api/friendships", json={"requester_id": alice["id"], "addressee_id": bob["id"]})
        assert created.status_code == 201
        assert created.json()["status"] == "pending"
        friendship_id = created.json()["id"]

        requests = client.get(f"/api/friends/{bob['id']}/requests").json()
        assert [r["id"] for r in requests] == [friendship_id]
        assert client.get(f"/api/friends/{alice['id']}/requests").json() == []

        updated = client.put(f"/api/friendships/{friendship_id}", json={"status": "accepted"})
        assert updated.status_code == 200
        assert updated.json()["status"] == "accepted"

        alice_friends = client.get(f"/api/friends/{alice['id']}").json()
        bob_friends = client.get(f"/api/friends/{bob['id']}").json()
        assert [f["username"] for f in alice_friends] == ["bob"]
        assert [f["username"] for f in bob_friends] == ["alice"]
        assert "status" not in alice_friends[0]

    def test_error_codes(self, client, pair):
        alice, bob = pair

        self_request = client.post("/api/friendships", json={"requester_id": alice["id"], "addressee_id": alice["id"]})
        assert self_request.status_code == 400
        assert self_request.json()["code"] == "SELF_REQUEST"

        unknown = client.post("/api/friendships", json={"requester_id": alice["id"], "addressee_id": 999})
        assert unknown.status_code == 404
        assert unknown.json()["code"] == "USER_NOT_FOUND"

        first = client.post("/api/friendships", json={"requester_id": alice["id"], "addressee_id": bob["id"]})
        duplicate = client.post("/api/friendships", json={"requester_id": bob["id"], "addressee_id": alice["id"]})
        assert duplicate.status_code == 409
        assert duplicate.json()["code"] == "DUPLICATE_EDGE"

        friendship_id = first.json()["id"]
        client.put(f"/api/friendships/{friendship_id}", json={"status": "blocked"})
        blocked = client.put(f"/api/friendships/{friendship_id}", json={"status": "accepted"})
        assert blocked.status_code == 409
        assert blocked.json()["code"] == "BLOCKED_IMMUTABLE"

        missing = client.put("/api/friendships/999", json={"status": "accepted"})
        assert missing.status_code == 404
        assert missing.json()["code"] == "NOT_FOUND"

    def test_pending_is_not_an_update_target(self, client, pair):
        alice, bob = pair
        created = client.post("/api/friendships", json={"requester_id": alice["id"], "addressee_id": bob["id"]}).json()

        response = client.put(f"/api/friendships/{created['id']}", json={"status": "pending"})

        assert response.status_code == 422

    def test_remove(self, client, pair):
        alice, bob = pair
        created = client.post("/api/friendships", json={"requester_id": alice["id"], "addressee_id": bob["id"]}).json()

        assert client.delete(f"/api/friendships/{created['id']}").json() == {"removed": True}
        assert client.delete(f"/api/friendships/{created['id']}").json() == {"removed": False}


class TestVenueSearchEndpoint:

    def test_search_example(self, client):
        owner = create_user(client, "owner")
        near = create_venue(client, owner, "Venue A", 40.7580, -73.9855)
        create_venue(client, owner, "Venue B", 40.8500, -73.8500)

        response = client.get("/api/venues/search", params={
            "latitude": 40.7128, "longitude": -74.0060, "radius": 10, "category": "restaurant",
        })

        assert response.status_code == 200
        assert [v["id"] for v in response.json()] == [near["id"]]
        assert "distance" not in response.json()[0]

    @pytest.mark.parametrize("params", [
        {"latitude": 40.7, "longitude": -74.0, "radius": 51},
        {"latitude": 40.7, "longitude": -74.0, "radius": 0},
        {"latitude": 91, "longitude": -74.0},
        {"latitude": 40.7, "longitude": 181},
    ])
    def test_rejects_out_of_range_input(self, client, params):
        assert client.get("/api/venues/search", params=params).status_code == 422

    def test_get_venue(self, client):
        owner = create_user(client, "owner")
        venue = create_venue(client, owner, "Cafe", 1.0, 2.0)

        assert client.get(f"/api/venues/{venue['id']}").json()["name"] == "Cafe"
        assert client.get("/api/venues/999").status_code == 404


class TestFeedEndpoint:

    def test_feed(self, client):
        alice = create_user(client, "alice")
        bob = create_user(client, "bob")
        stranger = create_user(client, "stranger")
        venue = create_venue(client, alice, "Cafe", 40.71, -74.0)

        friendship = client.post("/api/friendships", json={"requester_id": bob["id"], "addressee_id": alice["id"]}).json()
        client.put(f"/api/friendships/{friendship['id']}", json={"status": "accepted"})
        client.post("/api/checkins/", json={"user_id": bob["id"], "venue_id": venue["id"]})
        client.post("/api/checkins/", json={"user_id": stranger["id"], "venue_id": venue["id"], "message": "hi"})

        feed = client.get(f"/api/feed/{alice['id']}").json()

        assert len(feed) == 1
        assert feed[0]["username"] == "bob"
        assert feed[0]["venue_name"] == "Cafe"
        assert feed[0]["message"] is None

    def test_feed_for_user_without_friends(self, client):
        assert client.get("/api/feed/12345").json() == []

    @pytest.mark.parametrize("limit", [0, 101])
    def test_limit_bounds(self, client, limit):
        assert client.get("/api/feed/1", params={"limit": limit}).status_code == 422


class TestUserEndpoints:

    def test_profile_and_duplicates(self, client):
        alice = create_user(client, "alice")

        duplicate = client.post("/api/users/", json={
            "username": "alice", "email": "other@example.com", "full_name": "Other",
        })
        assert duplicate.status_code == 409
        assert duplicate.json()["code"] == "DUPLICATE_USER"

        profile = client.get(f"/api/users/{alice['id']}").json()
        assert profile["checkin_count"] == 0
        assert profile["friend_count"] == 0

        assert client.get("/api/users/999").status_code == 404

    def test_update_and_checkins(self, client):
        alice = create_user(client, "alice")
        venue = create_venue(client, alice, "Cafe", 1.0, 2.0)

        updated = client.put(f"/api/users/{alice['id']}", json={"bio": "Coffee fan"})
        assert updated.json()["bio"] == "Coffee fan"

        missing_venue = client.post("/api/checkins/", json={"user_id": alice["id"], "venue_id": 999})
        assert missing_venue.status_code == 404
        assert missing_venue.json()["code"] == "VENUE_NOT_FOUND"

        client.post("/api/checkins/", json={"user_id": alice["id"], "venue_id": venue["id"], "message": "here"})
        checkins = client.get(f"/api/users/{alice['id']}/checkins").json()
        assert [c["message"] for c in checkins] == ["here"]

    def test_invalid_username(self, client):
        response = client.post("/api/users/", json={
            "username": "bad name!", "email": "bad@example.com", "full_name": "Bad",
        })
        assert response.status_code == 422

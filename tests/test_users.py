"""Tests for User API endpoints."""


def create_user(client, username, email=None, **overrides):
    payload = {"username": username, "email": email or f"{username}@example.com"}
    payload.update(overrides)
    response = client.post("/api/v1/users", json=payload)
    assert response.status_code == 201, response.text
    return response.json()["data"]


def test_create_user(client, user_payload):
    response = client.post("/api/v1/users", json=user_payload)

    assert response.status_code == 201
    data = response.json()["data"]
    assert data["username"] == "alice"
    assert data["fullName"] == "Alice Anderson"
    assert data["status"] == "ACTIVE"
    assert response.headers["Location"] == f"/api/v1/users/{data['id']}"


def test_create_user_accepts_snake_case(client):
    response = client.post(
        "/api/v1/users",
        json={"username": "bob", "email": "bob@example.com", "full_name": "Bob Brown"},
    )

    assert response.status_code == 201
    assert response.json()["data"]["fullName"] == "Bob Brown"


def test_duplicate_username_conflicts(client):
    create_user(client, "alice", "a@x.com")

    response = client.post("/api/v1/users", json={"username": "alice", "email": "other@x.com"})

    assert response.status_code == 409


def test_duplicate_email_conflicts(client):
    create_user(client, "alice", "a@x.com")

    response = client.post("/api/v1/users", json={"username": "alicia", "email": "a@x.com"})

    assert response.status_code == 409


def test_create_user_requires_username_and_email(client):
    assert client.post("/api/v1/users", json={"email": "a@x.com"}).status_code == 400
    assert client.post("/api/v1/users", json={"username": "alice"}).status_code == 400
    assert client.post("/api/v1/users", json={"username": "alice", "email": "not-an-email"}).status_code == 400


def test_get_user_by_id_username_and_email(client):
    user = create_user(client, "carol", "carol@example.com")

    assert client.get(f"/api/v1/users/{user['id']}").json()["data"]["username"] == "carol"
    assert client.get("/api/v1/users/username/carol").json()["data"]["id"] == user["id"]
    assert client.get("/api/v1/users/email/carol@example.com").json()["data"]["id"] == user["id"]


def test_get_user_not_found(client):
    assert client.get("/api/v1/users/9999").status_code == 404
    response = client.get("/api/v1/users/username/ghost")
    assert response.status_code == 404
    assert response.json()["message"] == "User not found with username: ghost"


def test_list_users_with_filters(client):
    create_user(client, "u1", country="Sri Lanka", city="Colombo", status="ACTIVE")
    create_user(client, "u2", country="Sri Lanka", city="Kandy", status="INACTIVE")
    create_user(client, "u3", country="India", city="Chennai", status="ACTIVE")
    create_user(client, "u4")

    everyone = client.get("/api/v1/users")
    active_lankans = client.get("/api/v1/users", params={"country": "sri lanka", "status": "active"})

    assert everyone.headers["X-Total-Count"] == "4"
    assert [u["username"] for u in active_lankans.json()["data"]] == ["u1"]
    assert active_lankans.headers["X-API-Version"] == "1.0"


def test_search_users_by_name(client):
    create_user(client, "jdoe", fullName="John Doe")
    create_user(client, "jsmith", fullName="Jane Smith")
    create_user(client, "anon")

    response = client.get("/api/v1/users/search", params={"name": "DOE"})

    assert [u["username"] for u in response.json()["data"]] == ["jdoe"]


def test_users_by_country_city_and_status(client):
    create_user(client, "u1", country="Sri Lanka", city="Colombo", status="ACTIVE")
    create_user(client, "u2", country="India", city="Colombo", status="INACTIVE")

    assert len(client.get("/api/v1/users/country/SRI LANKA").json()["data"]) == 1
    assert len(client.get("/api/v1/users/city/colombo").json()["data"]) == 2
    assert [u["username"] for u in client.get("/api/v1/users/status/inactive").json()["data"]] == ["u2"]


def test_countries_and_cities(client):
    create_user(client, "u1", country="Sri Lanka", city="Kandy")
    create_user(client, "u2", country="India", city="Chennai")
    create_user(client, "u3", country="Sri Lanka", city="Colombo")
    create_user(client, "u4")

    assert client.get("/api/v1/users/countries").json()["data"] == ["India", "Sri Lanka"]
    assert client.get("/api/v1/users/cities").json()["data"] == ["Chennai", "Colombo", "Kandy"]


def test_exists_checks(client):
    create_user(client, "dave", "dave@example.com")

    assert client.get("/api/v1/users/exists/username/dave").json()["data"] == {"exists": True}
    assert client.get("/api/v1/users/exists/username/erin").json()["data"] == {"exists": False}
    assert client.get("/api/v1/users/exists/email/dave@example.com").json()["data"] == {"exists": True}


def test_update_user(client, user_payload):
    user = client.post("/api/v1/users", json=user_payload).json()["data"]

    response = client.put(
        f"/api/v1/users/{user['id']}",
        json={"username": "alice2", "email": "alice2@x.com", "status": "INACTIVE"},
    )

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["id"] == user["id"]
    assert data["username"] == "alice2"
    assert data["status"] == "INACTIVE"
    assert data["city"] is None
    assert data["createdAt"] == user["createdAt"]


def test_update_user_to_taken_username_conflicts(client):
    create_user(client, "alice")
    bob = create_user(client, "bob")

    response = client.put(
        f"/api/v1/users/{bob['id']}",
        json={"username": "alice", "email": "bob@example.com"},
    )

    assert response.status_code == 409


def test_delete_user(client):
    user = create_user(client, "gone")

    assert client.delete(f"/api/v1/users/{user['id']}").status_code == 200
    assert client.get(f"/api/v1/users/{user['id']}").status_code == 404
    assert client.delete(f"/api/v1/users/{user['id']}").status_code == 404

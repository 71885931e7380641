"""Tests des routes d'authentification."""


def test_register(client):
    response = client.post(
        "/api/auth/register",
        json={
            "email": "alice@example.com",
            "password": "pw",
            "confirmPassword": "pw",
            "role": "photographer",
        },
    )

    assert response.status_code == 201
    body = response.json()
    assert body["token"]
    assert body["user"]["email"] == "alice@example.com"
    assert body["user"]["role"] == "photographer"
    assert "password_hash" not in body["user"]


def test_register_duplicate(client):
    payload = {"email": "alice@example.com", "password": "pw"}
    client.post("/api/auth/register", json=payload)

    response = client.post("/api/auth/register", json=payload)

    assert response.status_code == 409
    assert response.json()["error"]["kind"] == "DuplicatePrincipal"


def test_register_confirmation_mismatch(client):
    response = client.post(
        "/api/auth/register",
        json={"email": "a@example.com", "password": "pw", "confirmPassword": "nope"},
    )
    assert response.status_code == 400
    assert response.json()["error"]["kind"] == "InvalidField"


def test_login(client):
    client.post("/api/auth/register", json={"email": "bob@example.com", "password": "pw"})

    response = client.post(
        "/api/auth/login", json={"email": "bob@example.com", "password": "pw"}
    )

    assert response.status_code == 200
    assert response.json()["token"]
    assert response.json()["user"]["email"] == "bob@example.com"


def test_login_wrong_password(client):
    client.post("/api/auth/register", json={"email": "bob@example.com", "password": "pw"})

    response = client.post(
        "/api/auth/login", json={"email": "bob@example.com", "password": "bad"}
    )

    assert response.status_code == 401
    assert response.json()["error"]["kind"] == "InvalidCredentials"

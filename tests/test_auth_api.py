from dept_events.models.enums import UserRole


def _signup_payload(**overrides):
    payload = {
        "name": "Asha Rao",
        "email": "Asha.Rao@msrit.edu",
        "password": "secret123",
        "department": "ISE",
    }
    payload.update(overrides)
    return payload


def test_signup_creates_student(client):
    response = client.post("/api/auth/signup", json=_signup_payload())

    assert response.status_code == 201
    body = response.json()
    assert body["success"] is True
    assert body["access_token"]
    assert body["user"]["email"] == "asha.rao@msrit.edu"
    assert body["user"]["role"] == "STUDENT"


def test_signup_as_faculty(client):
    response = client.post("/api/auth/signup", json=_signup_payload(role="FACULTY"))

    assert response.status_code == 201
    assert response.json()["user"]["role"] == "FACULTY"


def test_signup_cannot_self_assign_admin(client):
    response = client.post("/api/auth/signup", json=_signup_payload(role="ADMIN"))

    assert response.status_code == 403
    assert response.json()["success"] is False


def test_signup_duplicate_email(client):
    client.post("/api/auth/signup", json=_signup_payload())
    response = client.post("/api/auth/signup", json=_signup_payload(email="asha.rao@MSRIT.edu"))

    assert response.status_code == 400
    assert response.json()["message"] == "User already exists"


def test_signup_validation(client):
    response = client.post("/api/auth/signup", json=_signup_payload(password="123", department="LAW"))

    assert response.status_code == 400
    body = response.json()
    assert body["success"] is False
    fields = {e["field"] for e in body["errors"]}
    assert "body.password" in fields
    assert "body.department" in fields


def test_login_and_me(client):
    client.post("/api/auth/signup", json=_signup_payload())

    login = client.post("/api/auth/login", json={"email": "asha.rao@msrit.edu", "password": "secret123"})
    assert login.status_code == 200
    token = login.json()["access_token"]

    me = client.get("/api/users/me", headers={"Authorization": f"Bearer {token}"})
    assert me.status_code == 200
    assert me.json()["data"]["name"] == "Asha Rao"


def test_login_wrong_password(client, make_user):
    user = make_user()

    response = client.post("/api/auth/login", json={"email": user.email, "password": "not-the-password"})

    assert response.status_code == 401
    assert response.json() == {"success": False, "message": "Invalid credentials"}


def test_missing_and_bad_tokens(client):
    assert client.get("/api/users/me").status_code == 401

    response = client.get("/api/users/me", headers={"Authorization": "Bearer not-a-jwt"})
    assert response.status_code == 401
    assert response.json()["success"] is False


def test_admin_lists_users_and_changes_role(client, make_user, headers):
    admin = make_user(UserRole.ADMIN)
    student = make_user()

    listing = client.get("/api/users", headers=headers(admin))
    assert listing.status_code == 200
    assert listing.json()["count"] == 2

    response = client.put(f"/api/users/role/{student.id}", json={"role": "HOD"}, headers=headers(admin))
    assert response.status_code == 200
    assert response.json()["data"]["role"] == "HOD"


def test_role_change_rules(client, make_user, headers):
    admin = make_user(UserRole.ADMIN)
    faculty = make_user(UserRole.FACULTY)

    assert client.get("/api/users", headers=headers(faculty)).status_code == 403
    assert client.put(
        f"/api/users/role/{faculty.id}", json={"role": "ADMIN"}, headers=headers(faculty)
    ).status_code == 403
    assert client.put(
        f"/api/users/role/{faculty.id}", json={"role": "DEAN"}, headers=headers(admin)
    ).status_code == 400
    assert client.put(
        "/api/users/role/9999", json={"role": "HOD"}, headers=headers(admin)
    ).status_code == 404


def test_stored_role_wins_over_token_role(client, make_user, headers):
    admin = make_user(UserRole.ADMIN)
    student = make_user()
    old_headers = headers(student)

    client.put(f"/api/users/role/{student.id}", json={"role": "FACULTY"}, headers=headers(admin))

    response = client.post("/api/events", headers=old_headers, json={
        "title": "Promoted",
        "description": "Created with a token issued before promotion",
        "department": "CSE",
        "date": "2026-12-10T09:00:00",
        "venue": "Hall A",
    })
    assert response.status_code == 201


def test_health_and_unknown_route(client):
    assert client.get("/api/health").json()["status"] == "OK"

    response = client.get("/api/nope")
    assert response.status_code == 404
    assert response.json() == {"success": False, "message": "Route not found"}

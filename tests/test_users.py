"""Registration: service rules and the POST /api/users route."""

import pytest

from app.core.exceptions import ConflictError, ValidationError
from app.core.security import gravatar_url, verify_password
from app.modules.user_management.schemas.user import UserCreate
from app.modules.user_management.services import user as user_service
from app.modules.user_management.services.user import get_user_by_email, register_user


class TestRegisterService:

    def test_register_stores_hashed_password(self, db):
        user = register_user(db, UserCreate(name="Ada", email="a@x.com", password="secret1"))

        stored = get_user_by_email(db, "a@x.com")
        assert stored.id == user.id
        assert stored.hashed_password != "secret1"
        assert verify_password("secret1", stored.hashed_password)

    def test_avatar_is_derived_from_email(self, db):
        user = register_user(db, UserCreate(name="Ada", email="  A@X.com ", password="secret1"))

        assert user.email == "a@x.com"
        assert user.avatar == gravatar_url("a@x.com")
        assert gravatar_url("a@x.com") == gravatar_url("A@x.COM")
        assert user.avatar.endswith("?s=200&r=pg&d=mm")

    def test_every_violation_is_reported(self, db):
        with pytest.raises(ValidationError) as exc_info:
            register_user(db, UserCreate(name=" ", email="not-an-email", password="123"))

        params = [e["param"] for e in exc_info.value.errors]
        assert params == ["name", "email", "password"]

    def test_duplicate_email_is_a_conflict(self, db):
        register_user(db, UserCreate(name="Ada", email="a@x.com", password="secret1"))

        with pytest.raises(ConflictError):
            register_user(db, UserCreate(name="Other", email="a@x.com", password="secret2"))

    def test_duplicate_email_wins_over_other_invalid_fields(self, db):
        register_user(db, UserCreate(name="Ada", email="a@x.com", password="secret1"))

        with pytest.raises(ConflictError):
            register_user(db, UserCreate(name="", email="A@x.com", password="1"))

    def test_lost_registration_race_is_a_conflict(self, db, monkeypatch):
        register_user(db, UserCreate(name="Ada", email="a@x.com", password="secret1"))
        # the lookup misses, as it would for a registration that started concurrently
        monkeypatch.setattr(user_service, "get_user_by_email", lambda db, email: None)

        with pytest.raises(ConflictError) as exc_info:
            register_user(db, UserCreate(name="Other", email="a@x.com", password="secret2"))

        assert exc_info.value.to_body()["errors"][0]["param"] == "email"
        monkeypatch.undo()
        assert get_user_by_email(db, "a@x.com").name == "Ada"


class TestRegisterRoute:

    def test_register_acknowledges_with_text(self, client):
        response = client.post(
            "/api/users", json={"name": "Ada", "email": "a@x.com", "password": "secret1"}
        )

        assert response.status_code == 200
        assert response.text == "user Registered"

    def test_register_twice_returns_400_with_error_list(self, client):
        body = {"name": "Ada", "email": "a@x.com", "password": "secret1"}
        client.post("/api/users", json=body)

        response = client.post("/api/users", json=body)

        assert response.status_code == 400
        assert response.json()["errors"][0]["msg"] == "user already exist"

    def test_invalid_fields_return_400(self, client):
        response = client.post("/api/users", json={"email": "nope", "password": "12"})

        assert response.status_code == 400
        messages = [e["msg"] for e in response.json()["errors"]]
        assert messages == [
            "name is required",
            "please include a valid email",
            "please enter a password with 6 or more characters",
        ]

    def test_wrong_field_type_is_a_400(self, client):
        response = client.post("/api/users", json={"name": ["Ada"], "email": "a@x.com", "password": "secret1"})

        assert response.status_code == 400
        assert response.json()["errors"][0]["param"] == "name"

"""Posts: create, list, read and delete."""

import pytest

from app.core.exceptions import ForbiddenError, NotFoundError, ValidationError
from app.modules.posts.services.post import create_post, delete_post, find_post, get_post, list_posts


class TestPostService:

    def test_create_post_copies_author_and_starts_empty(self, db, make_user):
        user = make_user(name="Ada")

        post = create_post(db, user.id, "hello")

        assert post.text == "hello"
        assert post.user == user.id
        assert post.name == "Ada"
        assert post.avatar == user.avatar
        assert post.likes == []
        assert post.comments == []

    def test_create_post_requires_text(self, db, make_user):
        user = make_user()

        with pytest.raises(ValidationError):
            create_post(db, user.id, "   ")

    def test_create_post_for_unknown_user(self, db):
        with pytest.raises(NotFoundError):
            create_post(db, "ghost", "hello")

    def test_list_posts_newest_first(self, db, make_user):
        user = make_user()
        first = create_post(db, user.id, "first")
        second = create_post(db, user.id, "second")

        assert [p.id for p in list_posts(db)] == [second.id, first.id]

    def test_malformed_id_is_not_found(self, db):
        assert find_post(db, "%%%not-an-id") is None
        with pytest.raises(NotFoundError):
            get_post(db, "%%%not-an-id")

    def test_non_owner_cannot_delete(self, db, make_user):
        owner, other = make_user(), make_user()
        post = create_post(db, owner.id, "mine")

        with pytest.raises(ForbiddenError):
            delete_post(db, other.id, post.id)

        assert get_post(db, post.id).text == "mine"

    def test_owner_deletes(self, db, make_user):
        owner = make_user()
        post = create_post(db, owner.id, "mine")

        delete_post(db, owner.id, post.id)

        assert find_post(db, post.id) is None

    def test_delete_missing_post(self, db, make_user):
        with pytest.raises(NotFoundError):
            delete_post(db, make_user().id, "missing")


class TestPostRoutes:

    def test_create_and_read(self, client, make_user, headers_for):
        user = make_user()
        headers = headers_for(user.id)

        created = client.post("/api/post", json={"text": "hello"}, headers=headers)
        assert created.status_code == 200
        body = created.json()
        assert body["likes"] == [] and body["comments"] == []

        fetched = client.get(f"/api/post/{body['id']}", headers=headers)
        assert fetched.status_code == 200
        assert fetched.json()["text"] == "hello"

    def test_empty_text_is_400(self, client, make_user, headers_for):
        user = make_user()

        response = client.post("/api/post", json={"text": ""}, headers=headers_for(user.id))

        assert response.status_code == 400
        assert response.json()["errors"][0]["msg"] == "Text is required"

    def test_list_sorted_desc(self, client, make_user, headers_for):
        headers = headers_for(make_user().id)
        for text in ("one", "two", "three"):
            client.post("/api/post", json={"text": text}, headers=headers)

        response = client.get("/api/post", headers=headers)

        assert [p["text"] for p in response.json()] == ["three", "two", "one"]

    def test_unknown_post_is_404(self, client, make_user, headers_for):
        response = client.get("/api/post/does-not-exist", headers=headers_for(make_user().id))

        assert response.status_code == 404
        assert response.json() == {"msg": "post not found"}

    def test_delete_by_non_owner_is_401(self, client, make_user, headers_for):
        owner, other = make_user(), make_user()
        post_id = client.post("/api/post", json={"text": "x"}, headers=headers_for(owner.id)).json()["id"]

        response = client.delete(f"/api/post/{post_id}", headers=headers_for(other.id))

        assert response.status_code == 401
        assert response.json() == {"msg": "user not authorised"}

    def test_delete_by_owner(self, client, make_user, headers_for):
        headers = headers_for(make_user().id)
        post_id = client.post("/api/post", json={"text": "x"}, headers=headers).json()["id"]

        response = client.delete(f"/api/post/{post_id}", headers=headers)

        assert response.status_code == 200
        assert response.json() == {"msg": "Post removed"}
        assert client.get(f"/api/post/{post_id}", headers=headers).status_code == 404

    def test_delete_unknown_post_is_404(self, client, make_user, headers_for):
        response = client.delete("/api/post/does-not-exist", headers=headers_for(make_user().id))

        assert response.status_code == 404
        assert response.json() == {"msg": "post not found"}

    def test_dates_carry_utc_offset(self, client, make_user, headers_for):
        headers = headers_for(make_user().id)
        post_id = client.post("/api/post", json={"text": "hi"}, headers=headers).json()["id"]
        post = client.post(f"/api/post/comment/{post_id}", json={"text": "nice"}, headers=headers).json()

        assert post["date"].endswith(("Z", "+00:00"))
        assert post["comments"][0]["date"].endswith(("Z", "+00:00"))

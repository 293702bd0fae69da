"""Tests for the /user endpoints."""

import base64

from sqlalchemy import func, select

from facerec.model.face_rec import FaceRec
from facerec.model.user import User


class TestCreateUser:
    def test_create_then_get_returns_user_without_face_rec(self, client):
        response = client.post("/user", json={"name": "Alfalfa"})
        assert response.status_code == 201
        created = response.json()
        assert created["name"] == "Alfalfa"
        assert "faceRec" not in created
        assert created["id"]

        response = client.get("/user/Alfalfa")
        assert response.status_code == 200
        assert response.json() == created

    def test_duplicate_name_conflicts(self, client, db_session):
        assert client.post("/user", json={"name": "Alfalfa"}).status_code == 201

        response = client.post("/user", json={"name": "Alfalfa"})
        assert response.status_code == 409
        assert response.json() == {"message": "User with this name already exists."}

        count = db_session.execute(
            select(func.count()).select_from(User).where(User.name == "Alfalfa")
        ).scalar_one()
        assert count == 1

    def test_missing_name_is_bad_input(self, client):
        response = client.post("/user", json={})
        assert response.status_code == 400
        assert response.json() == {"message": "Bad user input."}

    def test_blank_name_is_bad_input(self, client):
        assert client.post("/user", json={"name": "  "}).status_code == 400

    def test_malformed_body_is_bad_input(self, client):
        response = client.post("/user", content=b"not json", headers={"Content-Type": "application/json"})
        assert response.status_code == 400


class TestGetAndListUsers:
    def test_get_unknown_user(self, client):
        response = client.get("/user/nobody")
        assert response.status_code == 404
        assert response.json() == {"message": "User does not exist."}

    def test_list_empty_store_returns_empty_list(self, client):
        response = client.get("/user")
        assert response.status_code == 200
        assert response.json() == []

    def test_list_returns_names_only(self, client):
        for name in ("ana", "bruno", "carla"):
            client.post("/user", json={"name": name})

        response = client.get("/user")
        assert response.status_code == 200
        assert sorted(response.json()) == ["ana", "bruno", "carla"]

    def test_get_user_exposes_face_rec_reference(self, client, image_upload):
        client.post("/user", json={"name": "ana"})
        face_rec = client.post("/faceRec/ana", files=image_upload()).json()

        user = client.get("/user/ana").json()
        assert user["faceRec"] == face_rec["id"]


class TestDeleteUser:
    def test_delete_unknown_user(self, client):
        response = client.delete("/user/nobody")
        assert response.status_code == 404

    def test_delete_without_face_rec(self, client):
        client.post("/user", json={"name": "ana"})

        response = client.delete("/user/ana")
        assert response.status_code == 200
        assert response.json() == {"message": "User deleted."}
        assert client.get("/user/ana").status_code == 404

    def test_delete_cascades_to_face_rec(self, client, db_session, image_upload):
        client.post("/user", json={"name": "ana"})
        face_rec_id = client.post("/faceRec/ana", files=image_upload()).json()["id"]

        response = client.delete("/user/ana")
        assert response.status_code == 200

        assert client.get("/user/ana").status_code == 404
        assert db_session.get(FaceRec, face_rec_id) is None

    def test_name_can_be_reused_after_delete(self, client):
        client.post("/user", json={"name": "ana"})
        client.delete("/user/ana")
        assert client.post("/user", json={"name": "ana"}).status_code == 201


def test_face_rec_images_are_base64_encoded(client, image_upload):
    client.post("/user", json={"name": "ana"})
    payload = b"\x00\x01binary\xff"
    body = client.post("/faceRec/ana", files=image_upload(payload, "image/png")).json()

    assert body["images"] == [
        {"data": base64.b64encode(payload).decode("ascii"), "contentType": "image/png"}
    ]

"""End-to-end tests running the real application lifespan and database."""

import uuid

from fastapi.testclient import TestClient

from notes_api.main import app


def test_note_lifecycle_through_database():
    with TestClient(app) as client:
        service = app.state.note_service
        owner = client.portal.call(service.users.create, f"user-{uuid.uuid4().hex[:8]}")
        title = f"Lifecycle {uuid.uuid4().hex[:8]}"

        created = client.post("/notes", json={"user": str(owner.id), "title": title, "text": "first"})
        assert created.status_code == 201

        listed = client.get("/notes").json()
        note = next(n for n in listed if n["title"] == title)
        assert note["username"] == owner.username

        updated = client.patch(
            "/notes",
            json={"id": note["id"], "user": str(owner.id), "title": title, "text": "second", "completed": True},
        )
        assert updated.json() == {"message": f"{title} updated"}

        duplicate = client.post("/notes", json={"user": str(owner.id), "title": title, "text": "again"})
        assert duplicate.status_code == 409

        deleted = client.request("DELETE", "/notes", json={"id": note["id"]})
        assert deleted.json() == {"message": f"Note {title} with ID {note['id']} deleted"}
        remaining = client.get("/notes")
        assert remaining.status_code == 400
        assert remaining.json() == {"message": "No notes found"}

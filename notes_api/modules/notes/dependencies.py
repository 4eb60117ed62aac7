# notes_api/modules/notes/dependencies.py

from fastapi import Request

from notes_api.modules.notes.note_service import NoteService

def get_note_service(request: Request) -> NoteService:
    """
    Dependency returning the NoteService built during application startup.
    """
    return request.app.state.note_service

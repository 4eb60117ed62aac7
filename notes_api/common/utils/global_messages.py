class GlobalMessages:
    # Request Messages
    ALL_FIELDS_REQUIRED = "All fields are required"
    INTERNAL_SERVER_ERROR = "Internal server error"

    # Note Messages
    NOTES_NOT_FOUND = "No notes found"
    NOTE_NOT_FOUND = "Note not found"
    NOTE_ID_REQUIRED = "Note ID required"
    NOTE_CREATED = "New note created"
    NOTE_DUPLICATE_TITLE = "Duplicate note title"
    NOTE_INVALID_DATA = "Invalid note data received"

    # Rate Limit Messages
    TOO_MANY_LOGIN_ATTEMPTS = "Too many login attempts from this IP, please try again after a 60 second pause"

    @staticmethod
    def note_updated(title: str) -> str:
        return f"{title} updated"

    @staticmethod
    def note_deleted(title: str, note_id) -> str:
        return f"Note {title} with ID {note_id} deleted"

"""FamilyHub Database Models."""

from familyhub.models.user import User
from familyhub.models.family import Family, FamilyMember
from familyhub.models.event import Event
from familyhub.models.todo import Todo
from familyhub.models.note import Note, NoteAttachment

__all__ = [
    "User",
    "Family",
    "FamilyMember",
    "Event",
    "Todo",
    "Note",
    "NoteAttachment",
]

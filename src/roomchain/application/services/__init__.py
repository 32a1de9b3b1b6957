"""Application services."""

from roomchain.application.services.room_edit_service import EditOutcome, RoomEditService

__all__ = ["EditOutcome", "RoomEditService"]

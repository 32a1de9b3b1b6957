"""Application layer - room documents and room-level editing."""

from roomchain.application.services import EditOutcome, RoomEditService

__all__ = ["EditOutcome", "RoomEditService"]

from __future__ import annotations


class AggregationError(Exception):
    """Base class for conditions reported to the user by the aggregate command."""

    user_message = "Aggregation failed."

    def __init__(self, message: str | None = None):
        super().__init__(message or self.user_message)


class NoActiveNote(AggregationError):
    user_message = "No active file to process."


class EmptyResult(AggregationError):
    user_message = "No content to aggregate based on current settings and links."


class ClipboardWriteFailure(AggregationError):
    user_message = "Failed to write to the clipboard."

"""
Layout Errors — structural misuse of the layout engine.

Per-event problems (missing times, all-day, end <= start) are NOT errors:
they become Exclusion diagnostics. Everything here is a caller bug and
should fail loudly.
"""


class LayoutError(Exception):
    """Base class for layout engine errors."""

    pass


class InvalidEventError(LayoutError):
    """Raised when an input item cannot be validated into a CalendarEvent."""

    pass


class DuplicateEventError(LayoutError):
    """Raised when the same event id appears twice in one day's input."""

    def __init__(self, duplicates: list[str]):
        self.duplicates = duplicates
        super().__init__(f"Duplicate event ids in day input: {', '.join(duplicates)}")


class ClusterIntegrityError(LayoutError):
    """Raised when the column assignor is handed intervals that are not one cluster."""

    pass

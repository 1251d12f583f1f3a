"""Domain errors raised by services and the layout engine."""


class LifeTracerError(Exception):
    """Base class for Life Tracer errors."""


class NotFoundError(LifeTracerError):
    """A category or event does not exist for the current owner."""

    def __init__(self, kind: str, item_id: str):
        self.kind = kind
        self.item_id = item_id
        super().__init__(f"{kind} not found: {item_id}")


class UnknownCategoryError(LifeTracerError):
    """An event references a category the owner does not have."""

    def __init__(self, category_id: str):
        self.category_id = category_id
        super().__init__(f"Unknown category: {category_id}")


class InvalidEventDate(LifeTracerError, ValueError):
    """An event date is not a calendar date."""

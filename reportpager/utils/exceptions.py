class DomainError(Exception):
    """Base domain error."""


class InvalidPageNumberError(DomainError):
    """Requested page lies outside 1..max for the current result set.

    Compared by value: two errors with the same ``requested`` and ``max``
    are equal, so handlers and tests can match on fields instead of identity.
    """

    def __init__(self, requested: int, max: int) -> None:
        self.requested = requested
        self.max = max
        super().__init__(requested, max)

    def __str__(self) -> str:
        return f"Недопустимый номер страницы {self.requested}. Максимум {self.max}."

    def __repr__(self) -> str:
        return f"InvalidPageNumberError(requested={self.requested}, max={self.max})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, InvalidPageNumberError):
            return NotImplemented
        return (self.requested, self.max) == (other.requested, other.max)

    def __hash__(self) -> int:
        return hash((InvalidPageNumberError, self.requested, self.max))

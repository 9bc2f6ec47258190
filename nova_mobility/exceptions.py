class NovaMobilityError(Exception):
    """Base class for errors raised by the data layer."""


class NotFoundError(NovaMobilityError):
    def __init__(self, entity: str, key: object) -> None:
        super().__init__(f"{entity} {key} not found")
        self.entity = entity
        self.key = key


class PreconditionFailed(NovaMobilityError):
    """A guarded write found its guard condition false and changed nothing."""


class AppendOnlyError(NovaMobilityError):
    """An append-only row was modified in place."""

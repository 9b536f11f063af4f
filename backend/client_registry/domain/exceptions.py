"""Domain-specific exceptions — framework-independent."""


class EntityNotFoundError(Exception):
    """Raised when a requested entity does not exist."""

    def __init__(self, entity_type: str, entity_id: int | str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} with id '{entity_id}' not found")


class ConflictError(Exception):
    """Base class for mutations rejected because of the current stored state."""


class DuplicateEntityError(ConflictError):
    """Raised when attempting to create a duplicate entity."""

    def __init__(self, entity_type: str, field: str, value: str):
        self.entity_type = entity_type
        self.field = field
        self.value = value
        super().__init__(f"{entity_type} with {field}='{value}' already exists")


class InvalidStateTransitionError(ConflictError):
    """Raised when an entity cannot move from its current status to the requested one."""

    def __init__(self, entity_type: str, entity_id: str, current: str, requested: str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        self.current = current
        self.requested = requested
        super().__init__(
            f"{entity_type} '{entity_id}' is already {current} and cannot be saved as {requested}"
        )


class MissingFieldError(Exception):
    """Raised when a required field is absent or empty."""

    def __init__(self, entity_type: str, field: str):
        self.entity_type = entity_type
        self.field = field
        super().__init__(f"{entity_type} field '{field}' is required")


class MalformedPayloadError(Exception):
    """Raised when a payload cannot be interpreted as the expected structure."""


class StorageError(Exception):
    """Raised when a persisted document cannot be read or written.

    A missing document is not an error (it means "empty"); an unreadable,
    unparsable or structurally wrong one is.
    """

    def __init__(self, path: str, message: str):
        self.path = path
        self.message = message
        super().__init__(f"{path}: {message}")

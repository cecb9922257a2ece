"""Repository-level error definitions."""


class RepositoryError(Exception):
    """Base class for repository errors."""


class EntityNotFoundError(RepositoryError):
    """Raised when an entity reference cannot be resolved."""

    entity_name: str
    entity_id: int

    def __init__(self, entity_name: str, entity_id: int):
        super().__init__(f"{entity_name} with ID {entity_id} not found.")
        self.entity_name = entity_name
        self.entity_id = entity_id


class IntegrityConflictError(RepositoryError):
    """Raised when a write is refused because other rows depend on the target."""

    entity_name: str
    entity_id: int

    def __init__(self, entity_name: str, entity_id: int):
        super().__init__(f"{entity_name} with ID {entity_id} is still referenced.")
        self.entity_name = entity_name
        self.entity_id = entity_id

"""Domain-specific exceptions — framework-independent."""


class EntityNotFoundError(Exception):
    """Raised when a requested entity does not exist."""

    def __init__(self, entity_type: str, entity_id: str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} with id '{entity_id}' not found")


class DuplicateEntityError(Exception):
    """Raised when attempting to create a duplicate entity."""

    def __init__(self, entity_type: str, field: str, value: str):
        self.entity_type = entity_type
        self.field = field
        self.value = value
        super().__init__(f"{entity_type} with {field}='{value}' already exists")


class DanglingReferenceError(Exception):
    """Raised when a foreign key points to a parent that no longer exists.

    Only raised when strict reference checking is enabled; otherwise the
    orphaned record is silently left out of projections.
    """

    def __init__(self, entity_type: str, entity_id: str, missing_type: str, missing_id: str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        self.missing_type = missing_type
        self.missing_id = missing_id
        super().__init__(
            f"{entity_type} '{entity_id}' references missing {missing_type} '{missing_id}'"
        )


class InvalidExtensionError(Exception):
    """Raised when a warranty extension does not push the expiration later."""

    def __init__(self, product_id: str, message: str):
        self.product_id = product_id
        super().__init__(f"Invalid extension for product '{product_id}': {message}")

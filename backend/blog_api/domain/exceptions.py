"""Domain-specific exceptions — framework-independent."""


class EntityNotFoundError(Exception):
    """Raised when a requested entity does not exist (or is outside the requested scope)."""

    def __init__(self, entity_type: str, entity_id: int | str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} with id '{entity_id}' not found")


class ValidationError(Exception):
    """Raised when proposed entity fields violate one or more field rules.

    ``messages`` holds one display string per violated rule, in rule order.
    """

    def __init__(self, messages: list[str]):
        self.messages = list(messages)
        super().__init__("; ".join(self.messages))


class AuthenticationError(Exception):
    """Raised when no valid bearer credential identifies the caller.

    The underlying cause is kept on ``reason`` for logging only; it is never
    returned to the client.
    """

    def __init__(self, reason: str = "unauthenticated"):
        self.reason = reason
        super().__init__(reason)


class PermissionDeniedError(Exception):
    """Raised when an authenticated caller may not mutate the target entity."""

    def __init__(self, entity_type: str, entity_id: int | str, user_id: int):
        self.entity_type = entity_type
        self.entity_id = entity_id
        self.user_id = user_id
        super().__init__(f"User {user_id} may not modify {entity_type} '{entity_id}'")

"""Custom exception hierarchy for rentdash."""


class RentDashError(Exception):
    """Base exception for all rentdash errors."""


class EntityNotFoundError(RentDashError):
    """Raised when a record does not exist in its collection."""

    def __init__(self, collection: str, entity_id: str):
        self.collection = collection
        self.entity_id = entity_id
        super().__init__(f"{collection} {entity_id} not found")


class ConfigurationError(RentDashError):
    """Raised when configuration is invalid or missing."""


class StoreError(RentDashError):
    """Raised when a write to the backing store fails."""

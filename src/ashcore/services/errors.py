"""Service-layer exceptions."""


class ServiceError(Exception):
    """Base exception for simulation set-up failures."""


class FactoryError(ServiceError):
    """Raised when a runtime entity cannot be created from its definition."""


class SpawnError(ServiceError):
    """Raised when an entity or prop cannot be placed on the requested cell."""

"""Error taxonomy shared by both handlers."""


class ItemsApiError(Exception):
    """An error the handler boundary turns into a specific response."""

    status_code = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(ItemsApiError):
    status_code = 400


class NotFoundError(ItemsApiError):
    status_code = 404


class ConfigError(Exception):
    """Deployment-time misconfiguration (e.g. TABLE_NAME not injected)."""

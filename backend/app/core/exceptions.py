class AppError(Exception):
    """Base class for all application exceptions."""
    def __init__(self, message: str, status_code: int = 500, details: dict = None):
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)

class InvalidTransitionError(AppError):
    """Raised when a workflow status change is not permitted from the current status."""
    def __init__(self, entity_type: str, current: str, target: str, reason: str | None = None):
        message = f"{entity_type} cannot move from {current} to {target}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(
            message,
            status_code=409,
            details={"entity_type": entity_type, "current": current, "target": target},
        )

class ResourceNotFoundError(AppError):
    """Raised when a requested resource is not found."""
    def __init__(self, resource_type: str, resource_id: str):
        super().__init__(f"{resource_type} with id {resource_id} not found", status_code=404)

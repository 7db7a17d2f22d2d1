"""
Domain exceptions raised by the service layer.
"""


class ConfigValidationError(ValueError):
    """A configuration payload failed one or more field rules."""

    def __init__(self, errors: dict[str, str]):
        super().__init__("Configuration payload is invalid")
        self.errors = errors

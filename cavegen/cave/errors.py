"""Error taxonomy for cave generation.

``ConfigurationError`` is raised before any stage runs; ``EmptyResultWarning``
is issued (never raised) when a pass leaves no floor at all.
"""


class ConfigurationError(ValueError):
    """Invalid generation parameters."""

    def __init__(self, field: str, message: str):
        self.field = field
        super().__init__(f"{field}: {message}")


class EmptyResultWarning(UserWarning):
    """Generation produced an all-wall grid."""


__all__ = ["ConfigurationError", "EmptyResultWarning"]

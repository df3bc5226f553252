# core/errors.py


class ConfigurationError(ValueError):
    """Raised when a board or session cannot be built from the given settings."""


class ObstaclePlacementError(ConfigurationError):
    """Raised when the requested obstacles do not fit on the board."""

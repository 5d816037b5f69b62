"""Exception types raised by abpdev components and handled at the CLI boundary."""


class AbpDevError(Exception):
    """Base exception for all abpdev errors."""


class NotFoundError(AbpDevError):
    """A required directory does not exist."""

    def __init__(self, path: object):
        super().__init__(f"Directory not found: {path}")
        self.path = path


class UserInputError(AbpDevError):
    """User-supplied input matched nothing."""


class ProcessSpawnError(AbpDevError):
    """The external interpreter is not configured or failed to start."""

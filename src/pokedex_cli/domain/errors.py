"""Errors raised by the catalog and command layers."""


class CatalogError(RuntimeError):
    """A catalog request could not be completed."""


class NotFoundError(CatalogError):
    """The requested catalog resource does not exist."""


class CommandError(ValueError):
    """A command was invoked with missing or invalid arguments."""

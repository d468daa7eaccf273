"""Custom exceptions for bean-match."""


class BeanMatchError(Exception):
    """Base exception for bean-match."""

    pass


class TaxonomyError(BeanMatchError):
    """Raised when a flavor taxonomy version cannot be loaded."""

    pass


class FlavorPathError(BeanMatchError):
    """Raised when a hierarchical flavor selection cannot be flattened."""

    pass

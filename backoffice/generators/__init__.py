"""Sample data generators."""

from backoffice.generators.account import AccountGenerator

__all__ = ["AccountGenerator"]

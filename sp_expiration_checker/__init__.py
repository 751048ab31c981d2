"""Warn about Entra ID application credentials that are about to expire."""

__version__ = "1.0.0"

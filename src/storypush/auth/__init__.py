"""Auth module public exports."""

from storypush.auth.base import TokenResolver
from storypush.auth.factory import create_token_resolver

__all__ = ["TokenResolver", "create_token_resolver"]

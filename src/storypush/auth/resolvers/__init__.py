"""Concrete token resolvers."""

from storypush.auth.resolvers.env import EnvTokenResolver
from storypush.auth.resolvers.static import StaticTokenResolver

__all__ = ["EnvTokenResolver", "StaticTokenResolver"]

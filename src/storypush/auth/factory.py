"""Token resolver factory."""

from __future__ import annotations

from storypush.auth.base import TokenResolver
from storypush.auth.resolvers.env import EnvTokenResolver
from storypush.auth.resolvers.static import StaticTokenResolver
from storypush.contracts.config import PushConfig
from storypush.contracts.exceptions import ConfigError

RESOLVERS: dict[str, type[TokenResolver]] = {
    "env": EnvTokenResolver,
    "token": StaticTokenResolver,
}


def create_token_resolver(config: PushConfig) -> TokenResolver:
    auth_mode = config.auth
    if auth_mode not in RESOLVERS:
        raise ConfigError(f"Unknown auth mode: {auth_mode}")

    if auth_mode == "env":
        return EnvTokenResolver()
    return StaticTokenResolver(token=config.token or "")

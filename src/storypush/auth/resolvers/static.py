"""Inline config token resolver."""

from __future__ import annotations

from dataclasses import dataclass

from storypush.auth.base import TokenResolver
from storypush.auth.resolvers.env import TOKEN_ENV_VAR
from storypush.contracts.exceptions import AuthenticationError


@dataclass(frozen=True)
class StaticTokenResolver(TokenResolver):
    token: str

    async def resolve(self) -> str:
        token = self.token.strip()
        if not token:
            raise AuthenticationError(
                f'Config "token" is empty; set a Jira API token or use "auth": "env" with {TOKEN_ENV_VAR}'
            )
        return token

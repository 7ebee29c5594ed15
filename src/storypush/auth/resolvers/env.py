"""Environment token resolver."""

from __future__ import annotations

import os

from storypush.auth.base import TokenResolver
from storypush.contracts.exceptions import AuthenticationError

TOKEN_ENV_VAR = "JIRA_API_TOKEN"
API_TOKEN_URL = "https://id.atlassian.com/manage-profile/security/api-tokens"


class EnvTokenResolver(TokenResolver):
    """Read the Atlassian API token paired with ``PushConfig.email``."""

    def __init__(self, env_var: str = TOKEN_ENV_VAR) -> None:
        self._env_var = env_var

    async def resolve(self) -> str:
        token = (os.getenv(self._env_var) or "").strip()
        if not token:
            raise AuthenticationError(
                f"{self._env_var} is not set or empty; create an API token at {API_TOKEN_URL} "
                f'and export it, or set "auth": "token" with an inline "token" in the config'
            )
        return token

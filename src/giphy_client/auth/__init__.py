"""Authentication components for the Giphy client.

This module provides:
- Bearer token authentication (``BearerAuth``, an ``httpx.Auth``)
- Credential resolution (value → env → .env → default)

Example:
    ```python
    from giphy_client.auth import CredentialResolver

    resolver = CredentialResolver()
    api_key = resolver.resolve(env_var_name="GIPHY_API_KEY", required=True)
    ```
"""

from giphy_client.auth.bearer import BearerAuth
from giphy_client.auth.credentials import DEFAULT_ENV_VAR, CredentialResolver
from giphy_client.auth.exceptions import CredentialError, CredentialNotFoundError

__all__ = [
    "DEFAULT_ENV_VAR",
    "BearerAuth",
    "CredentialError",
    "CredentialNotFoundError",
    "CredentialResolver",
]

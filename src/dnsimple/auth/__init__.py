"""Authentication components for the DNSimple client.

This module provides:
- Credential resolution from settings, ``DNSIMPLE_*`` env vars and the
  YAML credentials file
- Standard request options with Basic or token header authentication

Example:
    ```python
    from dnsimple.auth import CredentialResolver, standard_options

    resolver = CredentialResolver()
    config = resolver.load_credentials_if_necessary(resolver.resolve_config())
    options = standard_options(config)
    ```
"""

from dnsimple.auth.credentials import CONFIG_ENV_VAR, DEFAULT_CONFIG_PATH, CredentialResolver
from dnsimple.auth.options import TOKEN_HEADER, merge_options, standard_options

__all__ = [
    "CONFIG_ENV_VAR",
    "DEFAULT_CONFIG_PATH",
    "TOKEN_HEADER",
    "CredentialResolver",
    "merge_options",
    "standard_options",
]

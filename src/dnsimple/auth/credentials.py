"""Credential resolution for the DNSimple client.

Credentials come from explicit settings first and from a YAML credentials
file second. The file lives at ``~/.dnsimple`` unless the ``DNSIMPLE_CONFIG``
environment variable (or a ``.env`` entry, loaded with python-dotenv) points
elsewhere.

Credentials file format:
    ```yaml
    username: alice@example.com
    api_token: s3cr3t
    base_uri: https://api.sandbox.dnsimple.com/v1
    proxy_addr: proxy.example.com
    proxy_port: 8080
    ```

Merge rules applied by ``load_credentials``:
    - ``username``, ``password`` and ``api_token`` only fill unset fields
    - ``site`` or ``base_uri`` replace the base URI (``base_uri`` wins)
    - ``proxy_addr`` or ``proxy_port`` replace the proxy

Example:
    ```python
    from dnsimple.auth import CredentialResolver
    from dnsimple.config import ClientConfig

    resolver = CredentialResolver()
    config = resolver.load_credentials_if_necessary(ClientConfig())
    ```

Security Considerations:
    - Credentials are never logged in full (masked with ***)
    - Only source information is logged (env var name, file path, etc.)
    - Thread-safe dotenv loading with lock
"""

import logging
import os
from dataclasses import replace
from pathlib import Path
from threading import Lock
from typing import Any

import yaml
from dotenv import load_dotenv

from dnsimple.config import ClientConfig, HttpProxy
from dnsimple.errors.exceptions import ConfigurationError, CredentialFileError

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "DNSIMPLE_CONFIG"
DEFAULT_CONFIG_PATH = "~/.dnsimple"


class CredentialResolver:
    """Resolve DNSimple credentials from settings, environment and file.

    Attributes:
        _dotenv_loaded: Whether .env file has been loaded.
        _dotenv_lock: Thread lock for safe dotenv loading.
    """

    def __init__(self, dotenv_path: str | None = None, load_dotenv: bool = True):
        """Initialize credential resolver.

        Args:
            dotenv_path: Path to .env file. If None, searches parent directories
                for .env file (default behavior of python-dotenv).
            load_dotenv: Whether to load .env file. Set to False to skip
                .env file loading (useful for testing or when not using .env).
        """
        self._dotenv_loaded = False
        self._dotenv_lock = Lock()
        self._dotenv_path = dotenv_path
        self._load_dotenv_enabled = load_dotenv

        if self._load_dotenv_enabled:
            self._ensure_dotenv_loaded()

    def _ensure_dotenv_loaded(self) -> None:
        """Ensure .env file is loaded (thread-safe). It only loads once."""
        if self._dotenv_loaded:
            return

        with self._dotenv_lock:
            if self._dotenv_loaded:
                return

            try:
                load_dotenv(dotenv_path=self._dotenv_path)
                self._dotenv_loaded = True
                logger.debug("Loaded .env file for credential resolution")
            except OSError as e:
                logger.warning(f"Failed to load .env file: {e}")
                # Continue without .env
                self._dotenv_loaded = True

    def _mask_credential(self, value: str | None) -> str:
        if value is None:
            return "None"
        return "***"

    def resolve(
        self,
        *,
        value: str | None = None,
        env_var_name: str | None = None,
        default: str | None = None,
        required: bool = False,
        mask_in_logs: bool = True,
    ) -> str | None:
        """Resolve a single setting.

        Resolution order (first match wins):
        1. Explicitly provided `value` parameter
        2. Environment variable (if `env_var_name` provided)
        3. Default value (if `default` provided)

        Args:
            value: Explicitly provided value (highest priority).
            env_var_name: Environment variable name to check.
            default: Default value if not found elsewhere.
            required: If True, raises ConfigurationError when the setting
                cannot be resolved.
            mask_in_logs: If True (default), masks values in log messages.

        Returns:
            Resolved value, or None if not found and not required.

        Raises:
            ConfigurationError: If required=True and nothing was found.
        """
        result = None
        source = None

        if value is not None:
            result = value
            source = "explicit parameter"
        elif env_var_name and env_var_name in os.environ:
            result = os.environ[env_var_name]
            source = f"environment variable '{env_var_name}'"
        elif default is not None:
            result = default
            source = "default value"

        if result is not None:
            shown = self._mask_credential(result) if mask_in_logs else result
            logger.debug(f"Resolved setting from {source}: {shown}")

        if required and result is None:
            error_msg = "Required setting not found"
            if env_var_name:
                error_msg += f" (checked env var: {env_var_name})"
            raise ConfigurationError(error_msg)

        return result

    def resolve_config(
        self,
        *,
        username: str | None = None,
        password: str | None = None,
        api_token: str | None = None,
        base_uri: str | None = None,
        **settings: Any,
    ) -> ClientConfig:
        """Build a config from explicit values and ``DNSIMPLE_*`` env vars.

        Extra keyword arguments (``http_proxy``, ``debug``, ``timeout``) are
        passed to ``ClientConfig`` unchanged.
        """
        resolved_base_uri = self.resolve(
            value=base_uri, env_var_name="DNSIMPLE_BASE_URI", mask_in_logs=False
        )
        if resolved_base_uri is not None:
            settings["base_uri"] = resolved_base_uri

        return ClientConfig(
            username=self.resolve(value=username, env_var_name="DNSIMPLE_USERNAME", mask_in_logs=False),
            password=self.resolve(value=password, env_var_name="DNSIMPLE_PASSWORD"),
            api_token=self.resolve(value=api_token, env_var_name="DNSIMPLE_API_TOKEN"),
            **settings,
        )

    def config_path(self) -> str:
        """Path of the credentials file, honouring ``DNSIMPLE_CONFIG``."""
        return self.resolve(env_var_name=CONFIG_ENV_VAR, default=DEFAULT_CONFIG_PATH, mask_in_logs=False)

    def read_credentials_file(self, file_path: str | Path) -> dict[str, Any]:
        """Read and parse the YAML credentials file.

        Supports ``~`` and ``$VAR`` expansion in the path.

        Raises:
            CredentialFileError: If the file is missing, unreadable, not
                valid YAML, or does not contain a mapping.
        """
        expanded_path = os.path.expanduser(os.path.expandvars(str(file_path)))
        path_obj = Path(expanded_path)

        try:
            content = yaml.safe_load(path_obj.read_text())
        except FileNotFoundError:
            raise CredentialFileError(f"Credential file not found: {path_obj}", path=str(path_obj)) from None
        except PermissionError:
            raise CredentialFileError(
                f"Permission denied reading credential file: {path_obj}", path=str(path_obj)
            ) from None
        except (OSError, yaml.YAMLError) as e:
            raise CredentialFileError(f"Error reading credential file {path_obj}: {e}", path=str(path_obj)) from e

        if not isinstance(content, dict):
            raise CredentialFileError(
                f"Credential file {path_obj} must contain a mapping, got {type(content).__name__}",
                path=str(path_obj),
            )

        logger.debug(f"Read credential file: {path_obj} (keys: {', '.join(sorted(map(str, content)))})")
        return content

    def load_credentials(self, config: ClientConfig, path: str | Path | None = None) -> ClientConfig:
        """Merge the credentials file into ``config``.

        Args:
            config: The current configuration.
            path: Credentials file. Defaults to ``config_path()``.

        Returns:
            A new config with ``credentials_loaded`` set.

        Raises:
            CredentialFileError: If the file cannot be read.
        """
        if path is None:
            path = self.config_path()

        credentials = self.read_credentials_file(path)
        changes: dict[str, Any] = {"credentials_loaded": True}

        # Explicit settings win over the file
        for key in ("username", "password", "api_token"):
            if not getattr(config, key) and credentials.get(key):
                changes[key] = str(credentials[key])

        # base_uri is applied after site so it wins when both are present
        for key in ("site", "base_uri"):
            if credentials.get(key):
                changes["base_uri"] = credentials[key]

        if credentials.get("proxy_addr") or credentials.get("proxy_port"):
            changes["http_proxy"] = HttpProxy(
                addr=credentials.get("proxy_addr"),
                port=credentials.get("proxy_port"),
            )

        logger.info(f"Credentials loaded from {path}")
        return replace(config, **changes)

    def load_credentials_if_necessary(self, config: ClientConfig) -> ClientConfig:
        """Load the credentials file unless ``config`` already has credentials."""
        if config.has_credentials:
            return config
        return self.load_credentials(config)

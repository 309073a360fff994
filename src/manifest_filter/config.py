"""Runtime settings for the HTTP server and CLI.

Values come from the environment (``LISTEN_ADDRESS``, ``LOG_LEVEL``) or a
local ``.env`` file.
"""

from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict

from manifest_filter.exceptions import ConfigurationError

_ADDRESS_HINT = "value for LISTEN_ADDRESS must be like 127.0.0.1:3000"


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_name: str = "manifest-filter"
    listen_address: str = "127.0.0.1:3000"
    log_level: str = "INFO"

    def socket_address(self) -> tuple[str, int]:
        """Split :attr:`listen_address` into ``(host, port)``.

        Raises
        ------
        ConfigurationError
            When the address is not ``HOST:PORT`` with a port in 1-65535.
        """
        host, sep, port_text = self.listen_address.strip().rpartition(":")
        host = host.strip("[]")
        if not sep or not host or not port_text.isdigit():
            raise ConfigurationError(
                f"Invalid listen address: {self.listen_address!r}",
                hint=_ADDRESS_HINT,
            )
        port = int(port_text)
        if not 0 < port < 65536:
            raise ConfigurationError(
                f"Listen port out of range: {port}",
                hint=_ADDRESS_HINT,
            )
        return host, port


def get_settings() -> Settings:
    """Build a fresh :class:`Settings` from the current environment."""
    return Settings()

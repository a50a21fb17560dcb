"""
Runtime Configuration

Reads the service configuration from environment variables once, at import time.

Includes:
- Endpoint settings (application name used in alert headers, translation flag)
- Storage location and database URL
- Logging level and server bind address
"""
import os
import logging
from dataclasses import dataclass, field
from pathlib import Path

from constants import EntityNames, ServerConfig
from exceptions import ConfigurationError

logger = logging.getLogger(__name__)

_TRUE_VALUES = ('true', '1', 'yes')


@dataclass(frozen=True)
class EndpointConfig:
    """
    Settings handed to a REST endpoint at construction.

    application_name prefixes the alert headers (``X-{application_name}-alert``)
    and, with translation enabled, the alert message keys.
    """

    application_name: str
    entity_name: str
    enable_translation: bool = True


@dataclass(frozen=True)
class AppConfig:
    """Process-wide settings loaded from the environment."""

    application_name: str
    enable_translation: bool
    data_dir: Path
    database_url: str
    log_level: str
    server_host: str
    server_port: int
    cors_origins: list[str] = field(default_factory=lambda: ["*"])

    @property
    def log_dir(self) -> Path:
        return self.data_dir / "logs"

    def endpoint_config(self, entity_name: str) -> EndpointConfig:
        """Build the endpoint settings for one entity."""
        return EndpointConfig(
            application_name=self.application_name,
            entity_name=entity_name,
            enable_translation=self.enable_translation,
        )


def _parse_port(raw: str) -> int:
    try:
        port = int(raw)
    except ValueError:
        raise ConfigurationError(f"SERVER_PORT must be an integer, got '{raw}'")
    if not 0 < port < 65536:
        raise ConfigurationError(f"SERVER_PORT out of range: {port}")
    return port


def load_config(environ: dict | None = None) -> AppConfig:
    """
    Build an AppConfig from environment variables.

    Args:
        environ: Mapping to read from (defaults to os.environ)

    Returns:
        AppConfig instance

    Raises:
        ConfigurationError: If a variable holds an unusable value
    """
    env = os.environ if environ is None else environ

    application_name = env.get('APP_NAME', 'crownApp').strip()
    if not application_name:
        raise ConfigurationError("APP_NAME must not be empty", missing_keys=['APP_NAME'])

    data_dir = Path(env.get('DATA_DIR', str(Path.home() / '.delivery-api'))).expanduser()
    database_url = env.get('DATABASE_URL') or f"sqlite:///{data_dir / 'deliveries.db'}"

    origins = [o.strip() for o in env.get('CORS_ORIGINS', '*').split(',') if o.strip()]

    return AppConfig(
        application_name=application_name,
        enable_translation=env.get('ALERT_TRANSLATION', 'true').lower() in _TRUE_VALUES,
        data_dir=data_dir,
        database_url=database_url,
        log_level=env.get('LOG_LEVEL', 'INFO').upper(),
        server_host=env.get('SERVER_HOST', ServerConfig.HOST),
        server_port=_parse_port(env.get('SERVER_PORT', str(ServerConfig.PORT))),
        cors_origins=origins or ["*"],
    )


settings = load_config()


def get_delivery_config() -> EndpointConfig:
    """Endpoint settings for the Delivery resource."""
    return settings.endpoint_config(EntityNames.DELIVERY)

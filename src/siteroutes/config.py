"""Server configuration.

ServerConfig is a frozen dataclass, immutable after creation and passed
explicitly to ``start_server()``.
"""

from dataclasses import dataclass

from siteroutes.errors import ConfigurationError

_LOG_LEVELS = ("critical", "error", "warning", "info", "debug")


@dataclass(frozen=True, slots=True)
class ServerConfig:
    """Listener configuration. Immutable after creation.

    All fields have defaults matching the shipped site::

        config = ServerConfig()                      # 0.0.0.0:3000
        config = ServerConfig(host="127.0.0.1", port=0)  # ephemeral port (tests)
    """

    host: str = "0.0.0.0"
    port: int = 3000
    backlog: int = 2048
    log_level: str = "info"
    startup_timeout: float = 30.0

    def __post_init__(self) -> None:
        if not self.host:
            msg = "host must not be empty"
            raise ConfigurationError(msg)
        if not 0 <= self.port <= 65535:
            msg = f"port must be between 0 and 65535, got {self.port}"
            raise ConfigurationError(msg)
        if self.backlog < 1:
            msg = f"backlog must be positive, got {self.backlog}"
            raise ConfigurationError(msg)
        if self.startup_timeout <= 0:
            msg = f"startup_timeout must be positive, got {self.startup_timeout}"
            raise ConfigurationError(msg)
        if self.log_level.lower() not in _LOG_LEVELS:
            msg = f"log_level must be one of {', '.join(_LOG_LEVELS)}, got {self.log_level!r}"
            raise ConfigurationError(msg)

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Process configuration for the PackageKit tooling.

    The architecture core reads none of these; they only shape logging
    for the CLI and any host that chooses to reuse ``setup_logging``.
    """

    LOG_LEVEL: str = "WARNING"
    LOG_FILE: str = ""  # empty -> stderr
    LOG_FORMAT: str = "%(asctime)s [%(name)s] %(levelname)s: %(message)s"

    # Per-send dispatch tracing on core.event_bus
    TRACE_EVENTS: bool = False

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
    }

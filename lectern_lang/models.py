import logging
import os
import sys
from dataclasses import dataclass

DEFAULT_MAX_RECURSION = 1000
DEFAULT_LOG_LEVEL = "WARNING"


def _env_int(name: str, default: int) -> int:
    try:
        value = int(os.environ.get(name, default))
    except ValueError:
        return default
    return value if value > 0 else default


@dataclass
class LecternConfig:
    max_recursion: int = DEFAULT_MAX_RECURSION
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls) -> "LecternConfig":
        return cls(
            max_recursion=_env_int("LECTERN_MAX_RECURSION", DEFAULT_MAX_RECURSION),
            log_level=os.environ.get("LECTERN_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper(),
        )

    @classmethod
    def verbose(cls) -> "LecternConfig":
        config = cls.from_env()
        config.log_level = "DEBUG"
        return config


def configure_logging(config: LecternConfig) -> None:
    logging.basicConfig(
        stream=sys.stderr,
        level=config.log_level,
        format="%(asctime)s %(levelname)s %(message)s",
    )


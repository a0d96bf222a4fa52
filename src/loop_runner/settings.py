from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseSettings):
    """Project settings. Only logging is configurable from the environment."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="LOOP_RUNNER_",
        extra="ignore",
    )

    log_level: LogLevel = "INFO"
    dep_log_level: LogLevel = "WARNING"
    noisy_loggers: list[str] = ["asyncio"]

    @property
    def logging_config(self) -> dict:
        """logging.config.dictConfig() spec."""

        loggers: dict[str, dict] = {
            "loop_runner": {
                "level": self.log_level,
                "handlers": ["console"],
                "propagate": False,
            },
        }

        for name in self.noisy_loggers:
            loggers[name] = {
                "level": self.dep_log_level,
                "handlers": ["console"],
                "propagate": False,
            }

        return {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "standard": {
                    "format": "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
                    "datefmt": "%H:%M:%S",
                }
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "formatter": "standard",
                    "level": self.log_level,
                }
            },
            "root": {
                "handlers": ["console"],
                "level": self.log_level,
            },
            "loggers": loggers,
        }


settings = Settings()

from dataclasses import dataclass
import logging
import os
from fsview.utils.exceptions import ConfigurationError
from fsview.utils.logger import DEFAULT_FORMAT, logger


@dataclass
class AppConfig(object):
    """
    Command line configuration.

    This class represents the settings the fsview entry point reads from the
    environment: the logging level and format, and the filter applied when no filter is
    given on the command line.
    """

    log_level: str
    log_format: str
    exclude: str
    predicate: str

    @classmethod
    def load(cls) -> "AppConfig":
        """
        Create an AppConfig instance from environment variables.

        Returns:
            AppConfig: Configured instance with values from environment variables
                      or defaults if the environment variables are not set.

        Raises:
            ConfigurationError: If LOG_LEVEL is not a standard logging level name.
        """
        log_level = os.getenv("LOG_LEVEL", "INFO").upper()
        log_format = os.getenv("LOG_FORMAT", DEFAULT_FORMAT)
        exclude = os.getenv("FSVIEW_EXCLUDE", "")
        predicate = os.getenv("FSVIEW_PREDICATE", "any").lower()

        if not isinstance(logging.getLevelName(log_level), int):
            raise ConfigurationError(f"Invalid LOG_LEVEL: {log_level}")

        logger.debug(f"Config: log_level={log_level}, exclude={exclude!r}, predicate={predicate}")

        return cls(
            log_level=log_level,
            log_format=log_format,
            exclude=exclude,
            predicate=predicate,
        )

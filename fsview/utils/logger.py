import logging
from typing import Optional

DEFAULT_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


class Logger:
    """
    Singleton owner of the "fsview" logger.

    Library modules log through the shared instance, at debug level only, so a
    view never writes output on its own. The command line entry point applies
    the level and format from AppConfig through ``configure``.
    """

    _instance: Optional["Logger"] = None

    def __init__(self, log_level: str = "INFO", log_format: str = DEFAULT_FORMAT):
        self.logger = logging.getLogger("fsview")
        self.handler = logging.StreamHandler()

        self.logger.handlers.clear()
        self.logger.addHandler(self.handler)
        self.logger.propagate = False

        self.set_format(log_format)
        self.set_level(log_level)

    def set_level(self, log_level: str) -> None:
        """
        Set or update the logging level.

        Args:
            log_level (str): The logging level (e.g., "INFO", "DEBUG"). Unknown names fall back to INFO.
        """
        level = getattr(logging, log_level.upper(), logging.INFO)
        self.logger.setLevel(level)

    def set_format(self, log_format: str) -> None:
        """
        Replace the format of the console handler.

        Args:
            log_format (str): A logging.Formatter format string.
        """
        self.handler.setFormatter(logging.Formatter(log_format))

    @classmethod
    def instance(cls) -> "Logger":
        if cls._instance is None:
            cls._instance = Logger()
        return cls._instance

    @classmethod
    def get_logger(cls) -> logging.Logger:
        """
        Get the shared logger, creating it on first use.

        Returns:
            logging.Logger: The configured logger instance.
        """
        return cls.instance().logger

    @classmethod
    def configure(cls, log_level: str, log_format: Optional[str] = None) -> None:
        """
        Apply a level and, optionally, a format to the shared logger.

        Args:
            log_level (str): The new logging level.
            log_format (str, optional): The new format. Kept as is when None.
        """
        instance = cls.instance()
        instance.set_level(log_level)
        if log_format is not None:
            instance.set_format(log_format)
        instance.logger.debug(f"Logging configured: level={log_level}")


logger = Logger.get_logger()

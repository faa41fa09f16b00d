import logging
import sys

_FORMAT = "%(asctime)s [%(levelname)s] {service}: %(message)s"
_UVICORN_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")


class Log:
    """Process-wide logging for the extraction API and the PDF extractor.

    Both servers write one line per event to stdout, tagged with the service
    name, and uvicorn's own loggers are routed through the same handler.
    """

    _logger: logging.Logger = logging.getLogger("cedulas")
    _handler: logging.Handler | None = None

    @classmethod
    def configure(cls, log_level: str, service: str = "api") -> None:
        """Set the level and install the stdout handler once per process."""
        level = log_level.upper()
        cls._logger.setLevel(level)
        if cls._handler is None:
            cls._handler = logging.StreamHandler(sys.stdout)
            cls._logger.addHandler(cls._handler)
            cls._logger.propagate = False
        cls._handler.setFormatter(logging.Formatter(_FORMAT.format(service=service)))

        for name in _UVICORN_LOGGERS:
            server_logger = logging.getLogger(name)
            server_logger.handlers = [cls._handler]
            server_logger.setLevel(level)
            server_logger.propagate = False

    @classmethod
    def info(cls, message: str, **kwargs: object) -> None:
        cls._logger.info(message, extra=kwargs)

    @classmethod
    def error(cls, message: str, **kwargs: object) -> None:
        cls._logger.error(message, extra=kwargs)

    @classmethod
    def exception(cls, message: str, **kwargs: object) -> None:
        """Error with the active traceback; only call from an ``except`` block."""
        cls._logger.exception(message, extra=kwargs)

    @classmethod
    def warning(cls, message: str, **kwargs: object) -> None:
        cls._logger.warning(message, extra=kwargs)

    @classmethod
    def debug(cls, message: str, **kwargs: object) -> None:
        cls._logger.debug(message, extra=kwargs)

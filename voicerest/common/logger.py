import logging
from sys import stderr
from typing import Optional

from voicerest.common.environments import env
from voicerest.feature_flags import in_global_debug_mode

logging_format = '[ %(asctime)s | %(levelname)s ] %(name)s: %(message)s'
overriding_logging_level_name = env(
    'VOICEREST_LOG_LEVEL',
    description='Default CLI/library log level. In the debug mode, the log level will be overridden to DEBUG',
    required=False
)
default_logging_level = getattr(logging, overriding_logging_level_name) \
    if overriding_logging_level_name in ('DEBUG', 'INFO', 'WARNING', 'ERROR') \
    else logging.WARNING

if in_global_debug_mode:
    default_logging_level = logging.DEBUG

# Keep the HTTP connection pool as verbose as the library.
logging.getLogger('urllib3').setLevel(default_logging_level)


class RequestLogger(logging.Logger):
    """ Logger which may carry the ID of the HTTP exchange it reports on """

    def __init__(self, name, level=logging.NOTSET, request_id: Optional[str] = None):
        super().__init__(name, level)

        self.actual_name = name
        self.request_id = request_id

        if self.request_id:
            self.name = f'{self.actual_name},{self.request_id}'

    def fork(self, level: Optional[int] = None, request_id: Optional[str] = None):
        return self.make(self.actual_name, level or self.level, request_id)

    @classmethod
    def make(cls, name, level: Optional[int] = None, request_id: Optional[str] = None):
        log_level = level or default_logging_level

        handler = logging.StreamHandler(stderr)
        handler.setLevel(log_level)
        handler.setFormatter(logging.Formatter(logging_format))

        logger = cls(name, level=log_level, request_id=request_id)
        logger.setLevel(log_level)
        logger.addHandler(handler)

        return logger


def get_logger(name: str, level: Optional[int] = None) -> RequestLogger:
    return RequestLogger.make(name, level)


def get_logger_for(ref: object, level: Optional[int] = None) -> RequestLogger:
    """ Shortcut for creating a logger named after the fully qualified class name of the given object """
    return RequestLogger.make(f'{type(ref).__module__}.{type(ref).__name__}', level)

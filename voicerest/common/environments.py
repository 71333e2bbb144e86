import logging
import os
from typing import Any, Callable, Optional

# Settings are read before "voicerest.common.logger" is configured, so this module reports through the
# standard logging tree only.
_logger = logging.getLogger('voicerest.environment')


class EnvironmentVariableRequired(RuntimeError):
    def __init__(self, key: str, hint: Optional[str] = None):
        super().__init__(f'Environment variable required: {key}' + (f' ({hint})' if hint else ''))


class InvalidEnvironmentVariable(ValueError):
    """ Raised when the value of an environment variable cannot be converted """

    def __init__(self, key: str, value: str, hint: Optional[str] = None):
        super().__init__(f'Invalid value for the environment variable {key}: {value!r}' + (f' ({hint})' if hint else ''))


def env(key: str,
        default: Any = None,
        required: bool = False,
        transform: Optional[Callable[[str], Any]] = None,
        hint: Optional[str] = None,
        description: Optional[str] = None,
        secret: bool = False) -> Any:
    """ Read an environment variable, converted with "transform" when it is set """
    raw_value = os.getenv(key)

    if raw_value is None:
        if required:
            raise EnvironmentVariableRequired(key, hint or description)
        return default

    try:
        value = transform(raw_value) if transform else raw_value
    except ValueError:
        raise InvalidEnvironmentVariable(key, raw_value, hint or description)

    _logger.debug(f'{key} ({description or "no description"}) → {"***" if secret else value!r}')

    return value


def flag(key: str, description: Optional[str] = None) -> bool:
    return env(key, default=False, transform=lambda v: v.lower() in ('1', 'true', 'yes'), description=description)

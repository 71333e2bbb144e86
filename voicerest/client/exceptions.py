import json
from typing import Optional, Union

from pydantic import BaseModel, ValidationError

from voicerest.feature_flags import detailed_error, in_global_debug_mode


class ApiConnectionError(ConnectionError):
    """ Raised when the transport receives no response at all """


class ApiError(RuntimeError):
    """ Raised when the server responds with a non-success status or an undecodable body """

    def __init__(self,
                 message: Optional[str],
                 code: Optional[int] = None,
                 more_info: Optional[str] = None,
                 status: Optional[int] = None):
        super(ApiError, self).__init__(message, code, more_info, status)

    @property
    def message(self) -> Optional[str]:
        return self.args[0]

    @property
    def code(self) -> Optional[int]:
        return self.args[1]

    @property
    def more_info(self) -> Optional[str]:
        return self.args[2]

    @property
    def status(self) -> Optional[int]:
        return self.args[3]

    def __str__(self):
        summary = self.message or (f'HTTP {self.status}' if self.status else 'Unknown API error')

        if not (in_global_debug_mode or detailed_error):
            return summary

        blocks = [summary]
        if self.status is not None:
            blocks.append(f'HTTP Status: {self.status}')
        if self.code is not None:
            blocks.append(f'Error Code: {self.code}')
        if self.more_info:
            blocks.append(f'More Info: {self.more_info}')

        return '\n'.join(blocks)


# Every failure of a list operation is exactly one of these.
ListError = Union[ApiConnectionError, ApiError]


class RestError(BaseModel):
    """ Error envelope of a non-success response """
    message: Optional[str] = None
    code: Optional[int] = None
    more_info: Optional[str] = None
    status: Optional[int] = None

    @classmethod
    def from_json(cls, content: Optional[str]) -> Optional['RestError']:
        """ Parse the error envelope, or return None if the content is not one. """
        if not content or not content.strip():
            return None

        try:
            raw_error = json.loads(content)
        except ValueError:
            return None

        if not isinstance(raw_error, dict):
            return None

        try:
            return cls(**raw_error)
        except ValidationError:
            return None

    def to_exception(self) -> ApiError:
        return ApiError(self.message, self.code, self.more_info, self.status)

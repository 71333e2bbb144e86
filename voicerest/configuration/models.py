from typing import Optional

from pydantic import BaseModel, Field

from voicerest.common.environments import env
from voicerest.constants import DEFAULT_BASE_URL


class ClientConfiguration(BaseModel):
    """ Settings of the API client """
    account_sid: str
    auth_token: str = Field(repr=False)
    base_url: str = DEFAULT_BASE_URL
    timeout: Optional[float] = None
    """ Seconds to wait for the server, or None to wait forever """

    @classmethod
    def from_env(cls) -> 'ClientConfiguration':
        return cls(
            account_sid=env('VOICEREST_ACCOUNT_SID',
                            required=True,
                            description='Account SID used as the username of the API credentials'),
            auth_token=env('VOICEREST_AUTH_TOKEN',
                           required=True,
                           secret=True,
                           description='Auth token used as the password of the API credentials'),
            base_url=env('VOICEREST_BASE_URL',
                         default=DEFAULT_BASE_URL,
                         description='Base URL of the API'),
            timeout=env('VOICEREST_TIMEOUT',
                        transform=float,
                        hint='a number of seconds, e.g., 10',
                        description='HTTP timeout in seconds'),
        )

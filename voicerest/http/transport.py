import platform
import sys
from abc import ABC
from contextlib import AbstractContextManager
from typing import List, Optional, Tuple
from uuid import uuid4

from requests import Session
from requests import exceptions as requests_exc

from voicerest.common.logger import get_logger
from voicerest.constants import __version__
from voicerest.http.models import Request, Response


class HttpClient(ABC):
    """ Transport used by the API operations

        An implementation sends exactly one HTTP exchange per call and returns None when no complete response
        could be received. Retries, rate limiting and authentication are left to the implementation.
    """

    def request(self, request: Request) -> Optional[Response]:
        raise NotImplementedError()

    def close(self):
        pass


class RequestsHttpClient(HttpClient, AbstractContextManager):
    """ HTTP transport backed by a "requests" session """

    def __init__(self,
                 auth: Optional[Tuple[str, str]] = None,
                 timeout: Optional[float] = None,
                 session: Optional[Session] = None):
        super().__init__()

        self.__id = str(uuid4())
        self.__logger = get_logger(f'{type(self).__name__}/{self.__id}')
        self.__auth = auth
        self.__timeout = timeout
        self.__session: Optional[Session] = session

    @property
    def _session(self) -> Session:
        if not self.__session:
            self.__session = Session()
            self.__session.headers.update({
                'User-Agent': self.generate_http_user_agent(),
                'Accept': 'application/json',
            })

        return self.__session

    def __enter__(self):
        super().__enter__()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        super().__exit__(exc_type, exc_val, exc_tb)
        self.close()

    def request(self, request: Request) -> Optional[Response]:
        logger = self.__logger.fork(request_id=str(uuid4()))
        logger.debug(f'{request} (AUTH: {"Enabled" if self.__auth else "Disabled"})')

        try:
            raw_response = self._session.request(request.method,
                                                 request.url,
                                                 params=request.query_params or None,
                                                 auth=self.__auth,
                                                 timeout=self.__timeout)
        except requests_exc.RequestException as e:
            logger.warning(f'{request.method} {request.url}: no response ({type(e).__name__}: {e})')
            return None

        logger.debug(f'Response/URL {raw_response.url}')
        logger.debug(f'Response/HTTP {raw_response.status_code} ({len(raw_response.text)}B)')
        logger.debug(f'Response/Body:\n{raw_response.text}')

        return Response(status_code=raw_response.status_code,
                        content=raw_response.text,
                        headers={k: v for k, v in raw_response.headers.items()})

    def close(self):
        if self.__session:
            self.__session.close()
            self.__session = None

    def __del__(self):
        self.close()

    @staticmethod
    def generate_http_user_agent(comments: Optional[List[str]] = None) -> str:
        # NOTE: https://developer.mozilla.org/en-US/docs/Web/HTTP/Headers/User-Agent
        final_comments = [
            f'Platform/{platform.platform()}',
            'Python/{}.{}.{}'.format(*sys.version_info),
            *(comments or list()),
        ]

        return f'voicerest/{__version__} {" ".join(final_comments)}'.strip()

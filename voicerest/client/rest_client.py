import re
from contextlib import AbstractContextManager
from typing import Dict, Optional

from voicerest.client.resource_set import ResourceSet
from voicerest.common.logger import get_logger_for
from voicerest.configuration.models import ClientConfiguration
from voicerest.constants import DEFAULT_BASE_URL
from voicerest.http.models import Domain, Request, Response
from voicerest.http.transport import HttpClient, RequestsHttpClient
from voicerest.resources.notifications import NotificationRecord, read_account_notifications, \
    read_call_notifications


class UnknownDomainError(ValueError):
    """ Raised when a relative request targets a domain without a base URL """


class VoiceRestClient(HttpClient, AbstractContextManager):
    """ Entry point of the API

        Requests with a relative URL, including the next-page URIs given by the server, are resolved against the
        base URL of their domain before being handed to the transport.
    """

    def __init__(self,
                 account_sid: str,
                 auth_token: Optional[str] = None,
                 base_url: str = DEFAULT_BASE_URL,
                 http_client: Optional[HttpClient] = None,
                 timeout: Optional[float] = None):
        if not account_sid:
            raise ValueError('The account SID is required.')

        self._account_sid = account_sid
        self._domain_urls: Dict[str, str] = {Domain.API: base_url.rstrip('/')}
        self._http_client = http_client or RequestsHttpClient(auth=(account_sid, auth_token) if auth_token else None,
                                                              timeout=timeout)
        self._logger = get_logger_for(self)

    @classmethod
    def from_configuration(cls, config: ClientConfiguration, http_client: Optional[HttpClient] = None):
        return cls(config.account_sid,
                   config.auth_token,
                   base_url=config.base_url,
                   http_client=http_client,
                   timeout=config.timeout)

    @property
    def account_sid(self) -> str:
        return self._account_sid

    @property
    def http_client(self) -> HttpClient:
        return self._http_client

    def __exit__(self, exc_type, exc_val, exc_tb):
        super().__exit__(exc_type, exc_val, exc_tb)
        self.close()

    def close(self):
        self._http_client.close()

    def resolve_url(self, request: Request) -> str:
        if re.search(r'^https?://', request.url):
            return request.url

        domain = request.domain or Domain.API
        if domain not in self._domain_urls:
            raise UnknownDomainError(f'No base URL for the domain "{domain}" ({request.url})')

        return f'{self._domain_urls[domain]}/{request.url.lstrip("/")}'

    def request(self, request: Request) -> Optional[Response]:
        resolved_request = request.model_copy(update=dict(url=self.resolve_url(request)))
        self._logger.debug(f'Submitting {resolved_request}')
        return self._http_client.request(resolved_request)

    def list_call_notifications(self,
                                call_sid: str,
                                log: Optional[int] = None,
                                message_date: Optional[str] = None,
                                page_size: Optional[int] = None,
                                limit: Optional[int] = None,
                                account_sid: Optional[str] = None) -> ResourceSet[NotificationRecord]:
        """ List the notifications raised while processing the given call """
        return read_call_notifications(account_sid or self._account_sid,
                                       call_sid,
                                       log=log,
                                       message_date=message_date,
                                       page_size=page_size,
                                       limit=limit).execute(self)

    def list_account_notifications(self,
                                   log: Optional[int] = None,
                                   message_date: Optional[str] = None,
                                   page_size: Optional[int] = None,
                                   limit: Optional[int] = None,
                                   account_sid: Optional[str] = None) -> ResourceSet[NotificationRecord]:
        """ List the notifications of every call of the account """
        return read_account_notifications(account_sid or self._account_sid,
                                          log=log,
                                          message_date=message_date,
                                          page_size=page_size,
                                          limit=limit).execute(self)

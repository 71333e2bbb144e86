from dataclasses import dataclass
from string import Formatter
from typing import Any, Dict, Generic, List, Optional, Tuple, Type
from urllib.parse import quote

from voicerest.client.exceptions import ApiConnectionError, ApiError, RestError
from voicerest.client.page import Page, T
from voicerest.client.resource_set import ResourceSet
from voicerest.common.logger import get_logger
from voicerest.constants import DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE
from voicerest.http.models import Domain, HttpMethod, Request
from voicerest.http.transport import HttpClient

_logger = get_logger('module/list_operation')


class UnknownFilterError(KeyError):
    """ Raised when the filter is not defined for the resource """


@dataclass(frozen=True)
class FilterDefinition:
    """ Optional query filter of a list operation """
    name: str
    """ Python-side name, e.g., "message_date" """

    param_name: str
    """ Query parameter name, e.g., "MessageDate" """

    value_type: type

    def check(self, value: Any):
        # "bool" is a subclass of "int" but never a valid integer filter.
        if isinstance(value, bool) and self.value_type is not bool:
            raise TypeError(f'The filter "{self.name}" expects {self.value_type.__name__}, not bool')
        if not isinstance(value, self.value_type):
            raise TypeError(f'The filter "{self.name}" expects {self.value_type.__name__}, '
                            f'not {type(value).__name__}')


@dataclass(frozen=True)
class ListResourceDefinition(Generic[T]):
    """ Everything that distinguishes one list operation from another """
    name: str
    path_template: str
    envelope_key: str
    record_type: Type[T]
    filters: Tuple[FilterDefinition, ...] = ()
    domain: str = Domain.API

    @property
    def path_param_names(self) -> List[str]:
        return [field_name for _, field_name, _, _ in Formatter().parse(self.path_template) if field_name]

    def get_filter(self, name: str) -> FilterDefinition:
        for filter_definition in self.filters:
            if filter_definition.name == name:
                return filter_definition
        raise UnknownFilterError(f'{self.name} has no filter named "{name}"')

    def build_path(self, path_params: Dict[str, str]) -> str:
        return self.path_template.format(**{k: quote(str(v), safe='') for k, v in path_params.items()})


class PagedListOperation(Generic[T]):
    """ Filtered, paginated listing of the records of one resource

        The operation is immutable. The "with_*" methods return a new operation so that an operation can be
        shared and executed any number of times.
    """

    def __init__(self,
                 definition: ListResourceDefinition[T],
                 path_params: Dict[str, str],
                 filters: Optional[Dict[str, Any]] = None,
                 page_size: Optional[int] = None,
                 limit: Optional[int] = None):
        missing_param_names = [n for n in definition.path_param_names if not path_params.get(n)]
        if missing_param_names:
            raise ValueError(f'{definition.name}: missing path parameters: {", ".join(missing_param_names)}')

        self.__definition = definition
        self.__path_params = dict(path_params)
        self.__filters: Dict[str, Any] = dict()
        self.__page_size = self.__check_positive('page_size', page_size)
        self.__limit = self.__check_positive('limit', limit)

        for name, value in (filters or dict()).items():
            filter_definition = definition.get_filter(name)
            if value is not None:
                filter_definition.check(value)
                self.__filters[name] = value

    @staticmethod
    def __check_positive(name: str, value: Optional[int]) -> Optional[int]:
        if value is None:
            return None
        if isinstance(value, bool) or not isinstance(value, int) or value < 1:
            raise ValueError(f'"{name}" must be a positive integer, got {value!r}')
        return value

    @property
    def definition(self) -> ListResourceDefinition[T]:
        return self.__definition

    @property
    def path_params(self) -> Dict[str, str]:
        return dict(self.__path_params)

    @property
    def filters(self) -> Dict[str, Any]:
        """ The filters which have been set """
        return dict(self.__filters)

    @property
    def limit(self) -> Optional[int]:
        return self.__limit

    @property
    def page_size(self) -> int:
        """ The page size sent to the server """
        if self.__page_size is not None:
            return min(self.__page_size, MAX_PAGE_SIZE)
        elif self.__limit is not None:
            return min(self.__limit, DEFAULT_PAGE_SIZE)
        else:
            return DEFAULT_PAGE_SIZE

    def __copy_with(self, **changes) -> 'PagedListOperation[T]':
        arguments = dict(definition=self.__definition,
                         path_params=self.__path_params,
                         filters=self.__filters,
                         page_size=self.__page_size,
                         limit=self.__limit)
        arguments.update(changes)
        return PagedListOperation(**arguments)

    def with_filter(self, name: str, value: Any) -> 'PagedListOperation[T]':
        """ Return a copy of this operation with the filter set, or unset if the value is None """
        self.__definition.get_filter(name)
        filters = dict(self.__filters)
        filters[name] = value
        return self.__copy_with(filters=filters)

    def with_page_size(self, page_size: Optional[int]) -> 'PagedListOperation[T]':
        return self.__copy_with(page_size=page_size)

    def with_limit(self, limit: Optional[int]) -> 'PagedListOperation[T]':
        return self.__copy_with(limit=limit)

    def build_request(self) -> Request:
        request = Request(method=HttpMethod.GET,
                          url=self.__definition.build_path(self.__path_params),
                          domain=self.__definition.domain)

        for filter_definition in self.__definition.filters:
            value = self.__filters.get(filter_definition.name)
            if value is not None:
                request.add_query_param(filter_definition.param_name, value)

        request.add_query_param('PageSize', self.page_size)

        return request

    def execute(self, client: HttpClient, auto_paging: bool = True) -> ResourceSet[T]:
        """ Request the first page and return the record set spanning every page """
        page = self._page_for_request(client, self.build_request())
        return ResourceSet(self, client, page, auto_paging=auto_paging)

    def next_page(self, next_page_uri: str, client: HttpClient) -> Page[T]:
        """ Retrieve the page at the URI given by the server, which already carries every filter """
        return self._page_for_request(client, Request(method=HttpMethod.GET,
                                                      url=next_page_uri,
                                                      domain=self.__definition.domain))

    def _page_for_request(self, client: HttpClient, request: Request) -> Page[T]:
        response = client.request(request)

        if response is None:
            _logger.error(f'{request}: no response')
            raise ApiConnectionError(f'{self.__definition.name} read failed: Unable to connect to server')
        elif response.status_code != 200:
            rest_error = RestError.from_json(response.content)
            _logger.warning(f'{request}: HTTP {response.status_code}')
            if rest_error is None:
                raise ApiError('Server Error, no content')
            raise rest_error.to_exception()

        page = Page.deserialize(self.__definition.envelope_key, response.content, self.__definition.record_type)
        _logger.debug(f'{request}: {len(page)} record(s), next page: {page.next_page_uri}')

        return page

    def __repr__(self):
        return (f'{type(self).__name__}({self.__definition.name}, path_params={self.__path_params}, '
                f'filters={self.__filters}, page_size={self.page_size}, limit={self.__limit})')

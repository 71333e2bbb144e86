from threading import Lock
from typing import TYPE_CHECKING, Generic, List, Optional

from voicerest.client.page import Page, T
from voicerest.common.logger import get_logger
from voicerest.http.transport import HttpClient

if TYPE_CHECKING:
    from voicerest.client.list_operation import PagedListOperation

_logger = get_logger('module/resource_set')


class ResourceSet(Generic[T]):
    """ Lazy sequence of records spanning every page of a list operation

        Only the current page is held. The next page is requested once every record of the current page has been
        yielded, since its URI is only known from the current page. A failed page request can be retried by
        iterating again; the iteration resumes where it stopped.
    """

    def __init__(self,
                 operation: 'PagedListOperation[T]',
                 client: HttpClient,
                 first_page: Page[T],
                 auto_paging: bool = True):
        self.__read_lock = Lock()
        self.__operation = operation
        self.__client = client
        self.__first_page = first_page
        self.__current_page = first_page
        self.__auto_paging = auto_paging
        self.__position = 0
        self.__yielded_records = 0
        self.__loaded_pages = 1
        self.__exhausted = False
        self.__visited_uris: List[str] = [first_page.metadata.uri] if first_page.metadata.uri else []

    @property
    def operation(self) -> 'PagedListOperation[T]':
        return self.__operation

    @property
    def client(self) -> HttpClient:
        return self.__client

    @property
    def first_page(self) -> Page[T]:
        return self.__first_page

    @property
    def current_page(self) -> Page[T]:
        return self.__current_page

    @property
    def loaded_pages(self) -> int:
        return self.__loaded_pages

    def __iter__(self):
        return self

    def __next__(self) -> T:
        with self.__read_lock:
            limit = self.__operation.limit
            if self.__exhausted or (limit is not None and self.__yielded_records >= limit):
                raise StopIteration()

            while self.__position >= len(self.__current_page):
                next_page = self.__next_page()
                if next_page is None:
                    self.__exhausted = True
                    raise StopIteration()

                self.__current_page = next_page
                self.__position = 0

            record = self.__current_page.records[self.__position]
            self.__position += 1
            self.__yielded_records += 1

        return record

    def __next_page(self) -> Optional[Page[T]]:
        next_page_uri = self.__current_page.next_page_uri

        if not self.__auto_paging or not next_page_uri:
            return None

        if next_page_uri in self.__visited_uris:
            _logger.warning(f'The server returned an already visited page ({next_page_uri}). Stop paging.')
            return None

        page = self.__operation.next_page(next_page_uri, self.__client)
        self.__visited_uris.append(next_page_uri)
        self.__loaded_pages += 1

        return page

import json
from dataclasses import dataclass, field
from typing import Any, Dict, Generic, Optional, Tuple, Type, TypeVar

from pydantic import BaseModel, ValidationError

from voicerest.client.exceptions import ApiError

T = TypeVar('T', bound=BaseModel)


class PageMetadata(BaseModel):
    """ Pagination fields at the top level of a list response """
    page: Optional[int] = None
    page_size: Optional[int] = None
    num_pages: Optional[int] = None
    total: Optional[int] = None
    start: Optional[int] = None
    end: Optional[int] = None
    uri: Optional[str] = None
    first_page_uri: Optional[str] = None
    previous_page_uri: Optional[str] = None
    next_page_uri: Optional[str] = None


@dataclass(frozen=True)
class Page(Generic[T]):
    """ One response worth of records """
    records: Tuple[T, ...] = field(default_factory=tuple)
    metadata: PageMetadata = field(default_factory=PageMetadata)

    @property
    def next_page_uri(self) -> Optional[str]:
        return self.metadata.next_page_uri

    @property
    def page_size(self) -> Optional[int]:
        return self.metadata.page_size

    @property
    def num_pages(self) -> Optional[int]:
        return self.metadata.num_pages

    def has_next_page(self) -> bool:
        return bool(self.metadata.next_page_uri)

    def __len__(self):
        return len(self.records)

    def __iter__(self):
        return iter(self.records)

    @classmethod
    def deserialize(cls, envelope_key: str, content: str, record_type: Type[T]) -> 'Page[T]':
        """ Build a page from a list response body

            The records are expected under the envelope key. Any deviation from the expected shape is raised as
            an API error since the server is at fault.
        """
        try:
            body: Dict[str, Any] = json.loads(content)
        except ValueError:
            raise ApiError(f'Unable to deserialize JSON from the response: {content}')

        if not isinstance(body, dict) or not isinstance(body.get(envelope_key), list):
            raise ApiError(f'Invalid response body: expected a list under "{envelope_key}"')

        try:
            records = tuple(record_type(**raw_record) for raw_record in body[envelope_key])
            metadata = PageMetadata(**{k: v for k, v in body.items() if k != envelope_key})
        except (TypeError, ValidationError) as e:
            raise ApiError(f'Invalid response body: {e}')

        return cls(records=records, metadata=metadata)

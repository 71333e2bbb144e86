from typing import Any, Dict, List, Optional, Tuple

from pydantic import BaseModel, Field


class HttpMethod:
    GET = 'GET'


class Domain:
    """ Known API hosts. A request without a domain targets a literal URI. """
    API = 'api'


class Request(BaseModel):
    """ Outgoing HTTP request

        Query parameters are kept in insertion order and repeated names are never merged.
    """
    method: str = HttpMethod.GET
    url: str
    domain: Optional[str] = None
    query_params: List[Tuple[str, str]] = Field(default_factory=list)

    def add_query_param(self, name: str, value: Any):
        self.query_params.append((name, str(value)))

    def __str__(self):
        if self.query_params:
            rendered_params = '&'.join(f'{k}={v}' for k, v in self.query_params)
            return f'{self.method} {self.url}?{rendered_params}'
        return f'{self.method} {self.url}'


class Response(BaseModel):
    status_code: int
    content: str = ''
    headers: Dict[str, str] = Field(default_factory=dict)

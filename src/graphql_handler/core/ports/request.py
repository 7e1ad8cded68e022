from collections.abc import Mapping
from typing import Protocol

from starlette.datastructures import Headers


class IncomingRequest(Protocol):
    """What the pipeline reads from a request. ``starlette.requests.Request`` satisfies it.

    Header lookup must be case-insensitive, hence ``Headers`` rather than a plain mapping.
    """

    @property
    def method(self) -> str: ...

    @property
    def query_params(self) -> Mapping[str, str]: ...

    @property
    def headers(self) -> Headers: ...

    async def body(self) -> bytes: ...

from typing import Callable, Dict, Union

import httpx
import pytest

Answer = Union[httpx.Response, Exception, Callable[[httpx.Request], httpx.Response]]


@pytest.fixture
def mock_client() -> Callable[[Dict[str, Answer]], httpx.AsyncClient]:
    """Build an AsyncClient answering from a ``{url: answer}`` table.

    An answer may be a response, an exception to raise, or a callable taking the
    request. Unknown URLs get a 404. Every request is recorded on
    ``client.seen``.
    """

    def make(routes: Dict[str, Answer]) -> httpx.AsyncClient:
        seen = []

        def handler(request: httpx.Request) -> httpx.Response:
            url = str(request.url)
            seen.append(url)
            answer = routes.get(url)
            if answer is None:
                return httpx.Response(404)
            if isinstance(answer, Exception):
                raise answer
            if callable(answer):
                return answer(request)
            return httpx.Response(answer.status_code, headers=answer.headers, content=answer.content)

        client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        client.seen = seen
        return client

    return make

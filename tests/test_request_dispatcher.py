import pytest

from jsonapi_repository.domain.entities import QueryParams
from jsonapi_repository.services.request_dispatcher import HttpMethod, RequestDispatcher, Verb


@pytest.mark.parametrize(
    ("verb", "method"),
    [
        (Verb.FIND, HttpMethod.GET),
        (Verb.FIND_BY, HttpMethod.GET),
        (Verb.FIND_ONE_BY, HttpMethod.GET),
        (Verb.FIND_ALL, HttpMethod.GET),
        (Verb.CREATE, HttpMethod.POST),
        (Verb.UPDATE, HttpMethod.PUT),
        (Verb.PATCH, HttpMethod.PATCH),
        (Verb.DELETE, HttpMethod.DELETE),
        (Verb.RESTORE, HttpMethod.PUT),
    ],
)
def test_every_verb_maps_to_one_method(transport, verb, method):
    RequestDispatcher(transport).dispatch(verb, "https://x/users/1", {"a": 1})

    assert transport.last["method"] == method.value


def test_get_sends_query_and_include(transport):
    RequestDispatcher(transport).dispatch(
        Verb.FIND_BY, "https://x/users", QueryParams(sort=("-id",)), include=("team",)
    )

    assert transport.last["query"] == [("include", "team"), ("sort", "-id")]


def test_write_sends_body_without_include(transport):
    RequestDispatcher(transport).dispatch(
        Verb.CREATE, "https://x/users", {"name": "Bob"}, include=("team",)
    )

    assert transport.last["body"] == {"name": "Bob"}
    assert "query" not in transport.last


def test_restore_sends_no_body(transport):
    RequestDispatcher(transport).dispatch(Verb.RESTORE, "https://x/users/1/restore", {"x": 1})

    assert transport.last["body"] is None


def test_headers_are_forwarded(transport):
    RequestDispatcher(transport).dispatch(Verb.DELETE, "https://x/users/1", headers={"X-A": "1"})

    assert transport.last["headers"] == {"X-A": "1"}

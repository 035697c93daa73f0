"""Tests for the relay polled by the main app."""

import pytest

from yommy.models import NOT_IMPLEMENTED, RelayMethod
from yommy.services.relay import ShareRelay


@pytest.fixture
def relay(store):
    return ShareRelay(store)


def test_batch_peek_then_clear(relay, store):
    store.append("https://a.example")
    store.append("https://b.example")

    result = relay.handle("getSharedURLs")
    assert result.implemented
    assert result.method is RelayMethod.GET_SHARED_URLS
    assert result.value == ["https://a.example", "https://b.example"]

    # peek is non-destructive
    assert relay.handle("getSharedURLs").value == ["https://a.example", "https://b.example"]

    cleared = relay.handle("clearSharedURLs")
    assert cleared.implemented and cleared.value is None
    assert relay.handle("getSharedURLs").value == []


def test_drain_single(relay, store):
    store.append("https://a.example")
    store.append("https://b.example")
    assert relay.handle("getSharedUrl").value == "https://a.example"
    assert relay.handle("getSharedUrl").value == "https://b.example"
    assert relay.handle("getSharedUrl").value is None


def test_drain_single_on_empty_store(relay):
    result = relay.handle(RelayMethod.GET_SHARED_URL)
    assert result.implemented
    assert result.value is None


@pytest.mark.parametrize("name", ["getSharedURL", "unknown", "", None])
def test_unknown_request_is_not_implemented(relay, name):
    assert relay.handle(name) is NOT_IMPLEMENTED
    assert not relay.handle(name).implemented


def test_every_method_has_a_handler(relay, store):
    for method in RelayMethod:
        assert relay.handle(method.value).implemented

"""
Tests for CatalogClient argument validation and path building.

A call-recording stub stands in for the signed dispatcher.
"""
from __future__ import annotations

import os
from unittest.mock import MagicMock, patch

import pytest

from bricklink import CatalogClient, ItemType
from bricklink.api.signed import SignedRequestDispatcher
from bricklink.exceptions import APIError, ValidationError


class RecordingHandler:
    def __init__(self, body: str = "{}") -> None:
        self.body = body
        self.calls = []

    def request(self, method, path, params=None):
        self.calls.append((method, path, params))
        return self.body


@pytest.fixture
def handler():
    return RecordingHandler()


@pytest.fixture
def client(handler):
    return CatalogClient("ck", "cs", "tk", "ts", request_handler=handler)


# ---------------------------------------------------------------------------
# item type validation
# ---------------------------------------------------------------------------

class TestItemTypeValidation:
    @pytest.mark.parametrize("token", [member.value for member in ItemType])
    def test_every_known_type_in_any_case(self, client, handler, token):
        for spelling in (token, token.lower(), token.capitalize()):
            client.get_item(spelling, "3001")
        assert len(handler.calls) == 3

    def test_caller_spelling_kept_in_path(self, client, handler):
        client.get_item("set", "1234-1")
        assert handler.calls == [("GET", "/items/set/1234-1", None)]

    def test_enum_member_accepted(self, client, handler):
        client.get_item(ItemType.MINIFIG, "sw0001a")
        assert handler.calls == [("GET", "/items/MINIFIG/sw0001a", None)]

    @pytest.mark.parametrize("bad", ["BRICK", "sets", "UNSORTED LOT", " PART"])
    def test_unknown_type_rejected(self, client, handler, bad):
        with pytest.raises(ValidationError) as excinfo:
            client.get_item(bad, "3001")
        assert excinfo.value.kind == ValidationError.INVALID
        assert excinfo.value.param == "item_type"
        assert str(excinfo.value) == f'param "{bad}" is not valid'
        assert handler.calls == []

    def test_empty_type_rejected(self, client, handler):
        with pytest.raises(ValidationError) as excinfo:
            client.get_item("", "1234-1")
        assert str(excinfo.value) == "param is empty"
        assert excinfo.value.kind == ValidationError.MISSING
        assert handler.calls == []

    def test_is_valid(self):
        assert ItemType.is_valid("original_box")
        assert not ItemType.is_valid("box")


# ---------------------------------------------------------------------------
# item number validation
# ---------------------------------------------------------------------------

class TestItemNumberValidation:
    @pytest.mark.parametrize(
        "call",
        [
            lambda c: c.get_item("PART", ""),
            lambda c: c.get_item_image("PART", "", 5),
            lambda c: c.get_item_price("PART", "", {"color_id": "5"}),
        ],
    )
    def test_empty_item_number_never_dispatches(self, client, handler, call):
        with pytest.raises(ValidationError) as excinfo:
            call(client)
        assert str(excinfo.value) == "itemNumber is not specified"
        assert excinfo.value.param == "item_number"
        assert handler.calls == []

    def test_item_type_checked_before_item_number(self, client):
        with pytest.raises(ValidationError) as excinfo:
            client.get_item("", "")
        assert excinfo.value.param == "item_type"

    def test_validation_error_never_touches_session(self):
        session = MagicMock()
        client = CatalogClient("ck", "cs", "tk", "ts", session=session)
        with pytest.raises(ValidationError):
            client.get_item("SET", "")
        session.request.assert_not_called()


# ---------------------------------------------------------------------------
# resource paths
# ---------------------------------------------------------------------------

class TestPaths:
    def test_get_item(self, client, handler):
        assert client.get_item("SET", "1234-1") == "{}"
        assert handler.calls == [("GET", "/items/SET/1234-1", None)]

    def test_get_item_image(self, client, handler):
        client.get_item_image("PART", "3001", 11)
        assert handler.calls == [("GET", "/items/PART/3001/images/11", None)]

    def test_get_item_price_with_params(self, client, handler):
        client.get_item_price("PART", "3001", {"color_id": "5"})
        assert handler.calls == [("GET", "/items/PART/3001/price", {"color_id": "5"})]

    @pytest.mark.parametrize("params", [None, {}])
    def test_get_item_price_without_params(self, client, handler, params):
        client.get_item_price("PART", "3001", params)
        assert handler.calls == [("GET", "/items/PART/3001/price", None)]

    @pytest.mark.parametrize(
        "call, path",
        [
            (lambda c: c.get_color_list(), "/colors"),
            (lambda c: c.get_color(5), "/colors/5"),
            (lambda c: c.get_category_list(), "/categories"),
            (lambda c: c.get_category(143), "/categories/143"),
            (lambda c: c.get_inventories(143), "/inventories/143"),
        ],
    )
    def test_unvalidated_endpoints(self, client, handler, call, path):
        call(client)
        assert handler.calls == [("GET", path, None)]

    def test_negative_ids_pass_through_unchecked(self, client, handler):
        client.get_color(-1)
        assert handler.calls == [("GET", "/colors/-1", None)]


# ---------------------------------------------------------------------------
# end to end through the real dispatcher
# ---------------------------------------------------------------------------

class TestWithDispatcher:
    def _client(self, status_code=200, text="{}"):
        response = MagicMock(status_code=status_code, text=text)
        response.json.side_effect = ValueError("no json")
        session = MagicMock()
        session.request.return_value = response
        return CatalogClient("ck", "cs", "tk", "ts", session=session), session

    def test_price_query_in_url(self):
        client, session = self._client()
        client.get_item_price("PART", "3001", {"color_id": "5", "guide_type": "sold"})
        _, url = session.request.call_args.args
        path, _, query = url.partition("?")
        assert path.endswith("/items/PART/3001/price")
        assert set(query.split("&")) == {"color_id=5", "guide_type=sold"}

    def test_404_surfaces_as_api_error(self):
        client, _ = self._client(status_code=404, text='{"meta": {"code": 404}}')
        with pytest.raises(APIError) as excinfo:
            client.get_item("SET", "9999-1")
        assert excinfo.value.status_code == 404
        assert excinfo.value.body == '{"meta": {"code": 404}}'

    def test_default_handler_is_signed_dispatcher(self):
        client, _ = self._client()
        assert isinstance(client.request_handler, SignedRequestDispatcher)
        assert client.request_handler.credentials is client.credentials


# ---------------------------------------------------------------------------
# construction
# ---------------------------------------------------------------------------

class TestConstruction:
    def test_credentials_exposed(self, client):
        assert client.consumer_key == "ck"
        assert client.token == "tk"
        assert client.credentials.consumer_secret == "cs"
        assert client.credentials.token_secret == "ts"

    def test_empty_credentials_accepted(self):
        client = CatalogClient("", "", "", "", request_handler=RecordingHandler())
        assert client.consumer_key == ""

    def test_from_env(self):
        env = {
            "BRICKLINK_CONSUMER_KEY": "env-ck",
            "BRICKLINK_CONSUMER_SECRET": "env-cs",
            "BRICKLINK_TOKEN": "env-tk",
            "BRICKLINK_TOKEN_SECRET": "env-ts",
            "BRICKLINK_BASE_URL": "http://localhost:9000",
            "BRICKLINK_TIMEOUT": "2.5",
        }
        with patch.dict(os.environ, env, clear=False):
            client = CatalogClient.from_env(session=MagicMock())
        assert client.consumer_key == "env-ck"
        assert client.request_handler.base_url == "http://localhost:9000"
        assert client.request_handler.timeout == 2.5

    def test_context_manager_closes_handler(self):
        handler = MagicMock()
        with CatalogClient("ck", "cs", "tk", "ts", request_handler=handler):
            pass
        handler.close.assert_called_once_with()

    def test_close_without_close_method(self, client):
        client.close()

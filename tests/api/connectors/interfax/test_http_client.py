"""Testes do adapter InterFAX sobre httpx.MockTransport."""

from __future__ import annotations

import base64
import json
from decimal import Decimal
from typing import Any

import httpx
import pytest

from api.connectors.interfax import InterfaxHttpClient, create_interfax_client
from app.domain.fax import AccountCredentials, FaxDirection, FaxDocument, FaxStatus
from config.settings import InterfaxSettings
from utils.errors import ContentUnavailableError, ProviderError

CREDENTIALS = AccountCredentials(username="acme-user", password="s3cret-pass")
SETTINGS = InterfaxSettings(api_base_url="https://rest.interfax.test")


def _client(handler: Any) -> InterfaxHttpClient:
    return create_interfax_client(CREDENTIALS, SETTINGS, transport=httpx.MockTransport(handler))


class TestListings:
    @pytest.mark.asyncio
    async def test_sends_basic_auth_and_window_params(self) -> None:
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json=[])

        await _client(handler).list_outbound(50, 0)

        request = seen[0]
        assert request.url.path == "/outbound/faxes"
        assert request.url.params["limit"] == "50"
        assert request.url.params["offset"] == "0"
        expected = base64.b64encode(b"acme-user:s3cret-pass").decode()
        assert request.headers["authorization"] == f"Basic {expected}"

    @pytest.mark.asyncio
    async def test_keeps_non_mapping_records_in_window(self) -> None:
        payload = [{"id": i} for i in range(5)]
        payload.insert(3, "corrupt")

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json=payload)

        records = await _client(handler).list_inbound(50)

        assert len(records) == 6
        assert records[3] == "corrupt"

    @pytest.mark.asyncio
    async def test_non_list_payload_is_empty(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json={"unexpected": True})

        assert await _client(handler).list_inbound(50) == []

    @pytest.mark.asyncio
    async def test_provider_error_message_is_surfaced(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(
                401,
                json={"code": -1003, "message": "Authentication error", "moreInfo": "bad creds"},
            )

        with pytest.raises(ProviderError) as exc_info:
            await _client(handler).list_outbound(50)

        assert "Authentication error" in str(exc_info.value)
        assert exc_info.value.status_code == 401
        assert exc_info.value.operation == "list_outbound"

    @pytest.mark.asyncio
    async def test_transport_failure_becomes_provider_error(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("boom", request=request)

        with pytest.raises(ProviderError, match="list_inbound"):
            await _client(handler).list_inbound(50)


class TestFindAndContent:
    @pytest.mark.asyncio
    async def test_find_returns_record(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            assert request.url.path == "/inbound/faxes/1001"
            return httpx.Response(200, json={"messageId": 1001, "messageStatus": 0})

        record = await _client(handler).find(FaxDirection.INBOUND, "1001")

        assert record["messageId"] == 1001

    @pytest.mark.asyncio
    async def test_find_404_is_content_unavailable(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(404, json={"code": -1062, "message": "Transaction ID not found"})

        with pytest.raises(ContentUnavailableError) as exc_info:
            await _client(handler).find(FaxDirection.OUTBOUND, "999")

        assert "999" in str(exc_info.value)
        assert "outbound" in str(exc_info.value)

    @pytest.mark.asyncio
    async def test_content_bytes(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            assert request.url.path == "/outbound/faxes/42/image"
            return httpx.Response(200, content=b"II*\x00tiffdata")

        content = await _client(handler).content_bytes(FaxDirection.OUTBOUND, "42")

        assert content.startswith(b"II*")

    @pytest.mark.asyncio
    async def test_empty_content_is_unavailable(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, content=b"")

        with pytest.raises(ContentUnavailableError):
            await _client(handler).content_bytes(FaxDirection.INBOUND, "42")


class TestDeliverCancelBalance:
    @pytest.mark.asyncio
    async def test_deliver_upload_parses_location(self) -> None:
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(
                201,
                headers={"Location": "https://rest.interfax.test/outbound/faxes/854759652"},
            )

        document = FaxDocument(content=b"%PDF-1.4 body", filename="invoice.pdf")
        receipt = await _client(handler).deliver(
            "+15551234567",
            document,
            {"reference": "Invoice 42", "replyAddress": "ops@example.com"},
        )

        assert receipt.id == "854759652"
        assert receipt.status is FaxStatus.PENDING
        request = seen[0]
        assert request.method == "POST"
        assert request.url.params["faxNumber"] == "+15551234567"
        assert request.url.params["reference"] == "Invoice 42"
        assert request.url.params["replyAddress"] == "ops@example.com"
        assert request.headers["content-type"] == "application/pdf"
        assert request.content == b"%PDF-1.4 body"

    @pytest.mark.asyncio
    async def test_deliver_by_url_uses_content_location(self) -> None:
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(201, headers={"Location": "/outbound/faxes/77"})

        document = FaxDocument(url="https://files.example.com/doc.pdf")
        receipt = await _client(handler).deliver("+15551234567", document, {})

        assert receipt.id == "77"
        assert seen[0].headers["content-location"] == "https://files.example.com/doc.pdf"

    @pytest.mark.asyncio
    async def test_deliver_without_location_fails(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(201)

        with pytest.raises(ProviderError, match="Location"):
            await _client(handler).deliver("+15551234567", FaxDocument(url="https://x.io/a.pdf"), {})

    @pytest.mark.asyncio
    async def test_cancel_posts_to_cancel_endpoint(self) -> None:
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200)

        await _client(handler).cancel("854759652")

        assert seen[0].method == "POST"
        assert seen[0].url.path == "/outbound/faxes/854759652/cancel"

    @pytest.mark.asyncio
    async def test_balance(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            assert request.url.path == "/accounts/self/ppcards/balance"
            return httpx.Response(200, text="15.75")

        assert await _client(handler).get_balance() == Decimal("15.75")

    @pytest.mark.asyncio
    async def test_unparseable_balance(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, text=json.dumps({"weird": 1}))

        with pytest.raises(ProviderError, match="balance"):
            await _client(handler).get_balance()


def test_credentials_never_appear_in_repr() -> None:
    assert "s3cret-pass" not in repr(CREDENTIALS)
    assert "acme-user" not in repr(CREDENTIALS)

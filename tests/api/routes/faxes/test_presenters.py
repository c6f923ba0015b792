"""Testes dos presenters (formato achatado + remetente/destinatário)."""

from __future__ import annotations

from decimal import Decimal

from api.routes.faxes.presenters import (
    present_inbound,
    present_outbound,
    recipient_info,
    sender_info,
)
from app.domain.fax import FaxDirection, FaxRecord, FaxStatus


def _record(direction: FaxDirection, **fields: object) -> FaxRecord:
    return FaxRecord(id="1", direction=direction, **fields)  # type: ignore[arg-type]


class TestSenderInfo:
    def test_real_csid_is_the_name(self) -> None:
        info = sender_info(
            _record(FaxDirection.INBOUND, csid="ACME FAX", counterparty_number="+15550001111")
        )

        assert info.name == "ACME FAX"
        assert info.details == "CSID: ACME FAX | From: +15550001111"

    def test_placeholder_csid_falls_back_to_number(self) -> None:
        info = sender_info(
            _record(
                FaxDirection.INBOUND,
                csid="INTERFAX",
                counterparty_number="+15550001111",
                reply_email="a@b.co",
                subject="Hi",
            )
        )

        assert info.name == "+15550001111"
        assert info.email == "a@b.co"
        assert info.details == "Reply Email: a@b.co | Subject: Hi | From: +15550001111"

    def test_nothing_known(self) -> None:
        info = sender_info(_record(FaxDirection.INBOUND, csid="INTERFAX"))

        assert info.name == "Unknown Sender"
        assert info.email is None
        assert info.details == ""

    def test_details_without_number_keep_unknown_name(self) -> None:
        info = sender_info(_record(FaxDirection.INBOUND, subject="Hi"))

        assert info.name == "Unknown Sender"
        assert info.details == "Subject: Hi"


class TestRecipientInfo:
    def test_number_is_the_name(self) -> None:
        info = recipient_info(
            _record(FaxDirection.OUTBOUND, counterparty_number="+15551234567", csid="REMOTE")
        )

        assert info.name == "+15551234567"
        assert info.details == "To: +15551234567 | CSID: REMOTE"

    def test_unknown_recipient(self) -> None:
        assert recipient_info(_record(FaxDirection.OUTBOUND)).name == "Unknown Recipient"


def test_inbound_flattening() -> None:
    record = _record(
        FaxDirection.INBOUND,
        status=FaxStatus.COMPLETED,
        counterparty_number="+15550001111",
        page_count=2,
        completion_time="2025-09-10T09:00:00Z",
    )

    payload = present_inbound(record)

    assert payload["from_number"] == "+15550001111"
    assert payload["received_at"] == "2025-09-10T09:00:00Z"
    assert payload["created_at"] == payload["updated_at"] == "2025-09-10T09:00:00Z"
    assert payload["metadata"]["id"] == "1"
    assert payload["type"] == "inbound"


def test_outbound_flattening_falls_back_to_submit_time() -> None:
    record = _record(
        FaxDirection.OUTBOUND,
        status=FaxStatus.PENDING,
        counterparty_number="+15551234567",
        submit_time="2025-09-10T10:00:00Z",
        cost_per_unit=Decimal("0.25"),
        raw_metadata={"replyEmail": None},
    )

    payload = present_outbound(record)

    assert payload["sent_at"] == "2025-09-10T10:00:00Z"
    assert payload["completion_time"] is None
    assert payload["updated_at"] == "2025-09-10T10:00:00Z"
    assert payload["cost"] == "0.25"
    assert payload["metadata"] == {"replyEmail": None}
    assert payload["status"] == "pending"

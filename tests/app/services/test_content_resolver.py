"""Testes do resolver de conteúdo (sniff + conversão TIFF → PDF)."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import AsyncMock

import pytest

from app.domain.fax import FaxDirection
from app.infra.converters import Tiff2PdfConverter
from app.protocols.content_converter import ConversionResult
from app.services.content_resolver import (
    ContentResolver,
    SniffedFormat,
    choose_disposition,
    sniff_format,
)
from tests.fakes.fake_fax_provider import FakeFaxProvider
from utils.errors import ContentUnavailableError

PDF_BYTES = b"%PDF-1.4\n%fake pdf body"
TIFF_BYTES = b"II*\x00\x08\x00\x00\x00fake tiff body"


class TestSniffFormat:
    @pytest.mark.parametrize(
        ("content", "expected"),
        [
            (PDF_BYTES, SniffedFormat.PDF),
            (TIFF_BYTES, SniffedFormat.TIFF),
            (b"MM*\x00big endian", SniffedFormat.TIFF),
            (b"\x89PNG\r\n", SniffedFormat.IMAGE),
            (b"GIF89a", SniffedFormat.IMAGE),
            (b"hello", SniffedFormat.UNKNOWN),
            (b"", SniffedFormat.UNKNOWN),
        ],
    )
    def test_magic_bytes(self, content: bytes, expected: SniffedFormat) -> None:
        assert sniff_format(content) is expected


class TestDisposition:
    def test_tiff_always_attachment(self) -> None:
        assert choose_disposition("image/tiff", inline_requested=True) == "attachment"

    def test_pdf_always_inline(self) -> None:
        assert choose_disposition("application/pdf", inline_requested=False) == "inline"

    def test_png_follows_request(self) -> None:
        assert choose_disposition("image/png", inline_requested=True) == "inline"
        assert choose_disposition("image/png", inline_requested=False) == "attachment"


class TestResolve:
    @pytest.mark.asyncio
    async def test_pdf_is_served_unchanged(self) -> None:
        converter = AsyncMock()
        provider = FakeFaxProvider(content={"10": PDF_BYTES})

        blob = await ContentResolver(provider, converter).resolve(FaxDirection.OUTBOUND, "10")

        assert blob.content == PDF_BYTES
        assert blob.mime_type == "application/pdf"
        assert blob.content_disposition == 'inline; filename="fax_10.pdf"'
        converter.convert.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_tiff_without_binary_serves_original(self, tmp_path: Path) -> None:
        converter = Tiff2PdfConverter(str(tmp_path / "missing-tiff2pdf"), temp_dir=tmp_path)
        provider = FakeFaxProvider(content={"11": TIFF_BYTES})

        blob = await ContentResolver(provider, converter).resolve(FaxDirection.INBOUND, "11")

        assert blob.content == TIFF_BYTES
        assert blob.mime_type == "image/tiff"
        assert blob.conversion_degraded is True
        assert blob.content_disposition == 'attachment; filename="fax_11.tiff"'
        assert list(tmp_path.iterdir()) == []

    @pytest.mark.asyncio
    async def test_tiff_converted_to_pdf(self) -> None:
        converter = AsyncMock()
        converter.convert.return_value = ConversionResult(content=PDF_BYTES)
        provider = FakeFaxProvider(content={"12": TIFF_BYTES})

        blob = await ContentResolver(provider, converter).resolve(FaxDirection.INBOUND, "12")

        assert blob.content == PDF_BYTES
        assert blob.mime_type == "application/pdf"
        assert blob.disposition == "inline"
        assert blob.conversion_degraded is False
        converter.convert.assert_awaited_once_with(TIFF_BYTES)

    @pytest.mark.asyncio
    async def test_converter_returning_non_pdf_degrades(self) -> None:
        converter = AsyncMock()
        converter.convert.return_value = ConversionResult(content=b"not a pdf")
        provider = FakeFaxProvider(content={"13": TIFF_BYTES})

        blob = await ContentResolver(provider, converter).resolve(FaxDirection.INBOUND, "13")

        assert blob.content == TIFF_BYTES
        assert blob.conversion_degraded is True

    @pytest.mark.asyncio
    async def test_converter_exception_degrades(self) -> None:
        converter = AsyncMock()
        converter.convert.side_effect = RuntimeError("crashed")
        provider = FakeFaxProvider(content={"14": TIFF_BYTES})

        blob = await ContentResolver(provider, converter).resolve(FaxDirection.OUTBOUND, "14")

        assert blob.mime_type == "image/tiff"
        assert blob.conversion_degraded is True

    @pytest.mark.asyncio
    async def test_png_honours_inline_request(self) -> None:
        provider = FakeFaxProvider(content={"15": b"\x89PNG\r\n\x1a\n"})

        blob = await ContentResolver(provider, AsyncMock()).resolve(
            FaxDirection.INBOUND, "15", inline_requested=True
        )

        assert blob.mime_type == "image/png"
        assert blob.content_disposition == "inline"

    @pytest.mark.asyncio
    async def test_unknown_format_served_as_pdf(self) -> None:
        provider = FakeFaxProvider(content={"16": b"mystery bytes"})

        blob = await ContentResolver(provider, AsyncMock()).resolve(FaxDirection.INBOUND, "16")

        assert blob.mime_type == "application/pdf"
        assert blob.content == b"mystery bytes"

    @pytest.mark.asyncio
    async def test_missing_content_propagates(self) -> None:
        provider = FakeFaxProvider()

        with pytest.raises(ContentUnavailableError):
            await ContentResolver(provider, AsyncMock()).resolve(FaxDirection.INBOUND, "404")

"""Conversores de formato de conteúdo de fax."""

from .tiff2pdf import PDF_MAGIC, Tiff2PdfConverter, create_tiff2pdf_converter

__all__ = ["PDF_MAGIC", "Tiff2PdfConverter", "create_tiff2pdf_converter"]

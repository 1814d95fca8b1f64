"""Text rendering package."""

from aerostop.transformers.invoice_formatter import InvoiceFormatter

__all__ = [
    "InvoiceFormatter",
]

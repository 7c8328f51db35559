"""Input readers for text handed to the converter."""

from .txt_adapter import TXTReader

__all__ = ["TXTReader"]

"""
Interfaces for transaction decoding components.

This module defines the interface for turning the raw bytes of a
transaction into the structured Transaction format.
"""
from abc import ABC, abstractmethod

from ..types import Transaction


class TransactionDecoderInterface(ABC):
    """Interface for transaction decoder implementations."""

    @abstractmethod
    def decode(self, tx_bytes: bytes) -> Transaction:
        """
        Decode one transaction.

        Raises any exception on malformed input; the fetcher wraps it.
        """
        pass

    def __call__(self, tx_bytes: bytes) -> Transaction:
        return self.decode(tx_bytes)

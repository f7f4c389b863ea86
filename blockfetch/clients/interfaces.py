"""
Interfaces for node clients.

This module defines the interface the fetcher uses to talk to a
height-indexed ledger node.
"""
from abc import ABC, abstractmethod
from typing import Optional, Any, Dict


class NodeClientInterface(ABC):
    """Interface for node client implementations."""

    @abstractmethod
    def get_block(self, height: Optional[int] = None) -> Dict[str, Any]:
        """
        Get a block by height.

        Args:
            height: Block height, or None for the chain's latest block

        Returns:
            The node's raw `block` result

        Raises:
            NodeClientError: If the request fails or the node reports an error
        """
        pass

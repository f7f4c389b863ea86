from .interfaces import NodeClientInterface
from .tendermint_rpc import TendermintRpcClient, normalize_node_address

__all__ = [
    'NodeClientInterface',
    'TendermintRpcClient',
    'normalize_node_address',
]

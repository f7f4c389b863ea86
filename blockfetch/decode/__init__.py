from .interfaces import TransactionDecoderInterface
from .transaction_decoder import JsonTxDecoder

__all__ = [
    'TransactionDecoderInterface',
    'JsonTxDecoder',
]

from .block_parser import BlockParser, to_hex
from .rlp_utils import RlpItem, decode_item, peek_item_length, encode_item, encode_uint
from .records import Block, Header, Transaction, TxLegacy, TxMeta, Withdrawal, get_block_schema, get_header_schema
from .schema import SchemaMapper, RecordSchema, record_to_rlp
from .errors import (
    BlockImportError, RlpDecodeError, BufferUnderflow, NonCanonicalLength, NonCanonicalInteger,
    IntegerOverflow, UnexpectedItemKind, FieldCountMismatch, FixedSizeMismatch, DomainValidationError
)

__all__ = [
    "BlockParser", "to_hex",
    "RlpItem", "decode_item", "peek_item_length", "encode_item", "encode_uint",
    "Block", "Header", "Transaction", "TxLegacy", "TxMeta", "Withdrawal",
    "get_block_schema", "get_header_schema",
    "SchemaMapper", "RecordSchema", "record_to_rlp",
    "BlockImportError", "RlpDecodeError", "BufferUnderflow", "NonCanonicalLength",
    "NonCanonicalInteger", "IntegerOverflow", "UnexpectedItemKind", "FieldCountMismatch",
    "FixedSizeMismatch", "DomainValidationError"
]

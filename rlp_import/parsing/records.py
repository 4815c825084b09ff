"""Block record types and their RLP schemas"""

from dataclasses import dataclass
from functools import lru_cache
from typing import List, Optional

from ..config import get_format_config, MAX_EXTRA_DATA_SIZE, MAX_NONCE_SIZE
from .errors import DomainValidationError
from .schema import (
    FixedBytes, Nested, NestedList, OpaqueBytes, OptionalFixedBytes, RecordSchema, UnsignedInt
)

HASH_SIZE = 32
ADDRESS_SIZE = 20
BLOOM_SIZE = 256


@dataclass
class Header:
    """Block header, fields in wire order"""
    parent_hash: bytes
    uncle_hash: bytes
    coinbase: bytes
    state_root: bytes
    transactions_root: bytes
    receipts_root: bytes
    logs_bloom: bytes
    difficulty: int
    number: int
    gas_limit: int
    gas_used: int
    timestamp: int
    extra_data: bytes
    mix_digest: bytes
    nonce: bytes
    base_fee_per_gas: Optional[int] = None
    withdrawals_root: Optional[bytes] = None

    def validate(self):
        if len(self.extra_data) > MAX_EXTRA_DATA_SIZE:
            raise DomainValidationError(
                "extra_data", f"{len(self.extra_data)} bytes exceeds {MAX_EXTRA_DATA_SIZE}"
            )
        if len(self.nonce) > MAX_NONCE_SIZE:
            raise DomainValidationError(
                "nonce", f"{len(self.nonce)} bytes exceeds {MAX_NONCE_SIZE}"
            )


@dataclass
class TxLegacy:
    """Legacy transaction payload; `to` is None for contract creation"""
    nonce: int
    gas_price: int
    gas_limit: int
    to: Optional[bytes]
    value: int
    input: bytes
    v: int
    r: int
    s: int

    @property
    def is_contract_creation(self) -> bool:
        return self.to is None


@dataclass
class TxMeta:
    block_number: int
    timestamp: int
    message_sender: Optional[bytes]
    rest: bytes


@dataclass
class Transaction:
    data: TxLegacy
    meta: TxMeta
    hash: bytes
    size: int
    sender: bytes


@dataclass
class Withdrawal:
    index: int
    validator_index: int
    address: bytes
    amount: int


@dataclass
class Block:
    header: Header
    transactions: List[Transaction]
    uncles: List[Header]
    withdrawals: Optional[List[Withdrawal]] = None


HEADER_FIELDS = (
    ('parent_hash', FixedBytes(HASH_SIZE)),
    ('uncle_hash', FixedBytes(HASH_SIZE)),
    ('coinbase', FixedBytes(ADDRESS_SIZE)),
    ('state_root', FixedBytes(HASH_SIZE)),
    ('transactions_root', FixedBytes(HASH_SIZE)),
    ('receipts_root', FixedBytes(HASH_SIZE)),
    ('logs_bloom', FixedBytes(BLOOM_SIZE)),
    ('difficulty', UnsignedInt(256)),
    ('number', UnsignedInt(256)),
    ('gas_limit', UnsignedInt(64)),
    ('gas_used', UnsignedInt(64)),
    ('timestamp', UnsignedInt(64)),
    ('extra_data', OpaqueBytes()),
    ('mix_digest', FixedBytes(HASH_SIZE)),
    ('nonce', OpaqueBytes()),
)

HEADER_TRAILING_FIELDS = {
    'base_fee_per_gas': UnsignedInt(256),
    'withdrawals_root': FixedBytes(HASH_SIZE),
}

TX_LEGACY_SCHEMA = RecordSchema('TxLegacy', TxLegacy, (
    ('nonce', UnsignedInt(64)),
    ('gas_price', UnsignedInt(128)),
    ('gas_limit', UnsignedInt(64)),
    ('to', OptionalFixedBytes(ADDRESS_SIZE)),
    ('value', UnsignedInt(256)),
    ('input', OpaqueBytes()),
    ('v', UnsignedInt(256)),
    ('r', UnsignedInt(256)),
    ('s', UnsignedInt(256)),
))

TX_META_SCHEMA = RecordSchema('TxMeta', TxMeta, (
    ('block_number', UnsignedInt(256)),
    ('timestamp', UnsignedInt(64)),
    ('message_sender', OptionalFixedBytes(ADDRESS_SIZE)),
    ('rest', OpaqueBytes()),
))

TRANSACTION_SCHEMA = RecordSchema('Transaction', Transaction, (
    ('data', Nested(TX_LEGACY_SCHEMA)),
    ('meta', Nested(TX_META_SCHEMA)),
    ('hash', FixedBytes(HASH_SIZE)),
    ('size', UnsignedInt(32)),
    ('sender', FixedBytes(ADDRESS_SIZE)),
))

WITHDRAWAL_SCHEMA = RecordSchema('Withdrawal', Withdrawal, (
    ('index', UnsignedInt(64)),
    ('validator_index', UnsignedInt(64)),
    ('address', FixedBytes(ADDRESS_SIZE)),
    ('amount', UnsignedInt(64)),
))

BLOCK_TRAILING_FIELDS = {
    'withdrawals': NestedList(WITHDRAWAL_SCHEMA),
}


@lru_cache(maxsize=None)
def get_header_schema(block_format: str = 'legacy') -> RecordSchema:
    """Header schema with the trailing fields known to a block format"""
    config = get_format_config(block_format)
    trailing = tuple((name, HEADER_TRAILING_FIELDS[name]) for name in config['header_trailing'])
    return RecordSchema('Header', Header, HEADER_FIELDS, trailing, trailing=bool(trailing))


@lru_cache(maxsize=None)
def get_block_schema(block_format: str = 'legacy') -> RecordSchema:
    """Block schema for a format; blocks always accept trailing sections"""
    config = get_format_config(block_format)
    header_schema = get_header_schema(block_format)
    trailing = tuple((name, BLOCK_TRAILING_FIELDS[name]) for name in config['block_trailing'])
    return RecordSchema('Block', Block, (
        ('header', Nested(header_schema)),
        ('transactions', NestedList(TRANSACTION_SCHEMA)),
        ('uncles', NestedList(header_schema)),
    ), trailing, trailing=True)

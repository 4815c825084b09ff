"""Block decoding bound to one format revision and trailing policy"""

from typing import Dict, Any, Optional

from ..config import DecoderConfig
from .errors import RlpDecodeError
from .records import Block, Header, Transaction, Withdrawal, get_block_schema
from .rlp_utils import RlpItem, decode_item, encode_item
from .schema import SchemaMapper, record_to_rlp


def to_hex(value: Optional[bytes]) -> Optional[str]:
    """0x-prefixed hex, None stays None"""
    if value is None:
        return None
    return "0x" + value.hex()


class BlockParser:
    """Turns top-level RLP items into Block records"""

    def __init__(self, block_format: str = 'legacy', trailing_policy: str = 'strict',
                 validate_domain: bool = True):
        """
        Initialize block parser

        Args:
            block_format: Format revision deciding the known trailing fields
            trailing_policy: 'strict' or 'tolerant' handling of unknown trailing fields
            validate_domain: Check semantic bounds such as extra_data length
        """
        self.block_format = block_format.lower()
        self.schema = get_block_schema(self.block_format)
        self.mapper = SchemaMapper(trailing_policy, validate_domain)

    @classmethod
    def from_config(cls, config: DecoderConfig) -> "BlockParser":
        return cls(config.block_format, config.trailing_policy, config.validate_domain)

    def parse_item(self, item: RlpItem) -> Block:
        """Map an already decoded top-level item onto a Block"""
        return self.mapper.map_record(item, self.schema)

    def decode_block(self, data: bytes) -> Block:
        """
        Decode a buffer holding exactly one encoded block

        Raises:
            RlpDecodeError: Malformed block, or bytes left over after it
        """
        item, consumed = decode_item(data)
        if consumed != len(data):
            raise RlpDecodeError(
                f"{len(data) - consumed} trailing bytes after block", consumed
            )
        return self.parse_item(item)

    def encode_block(self, block: Block) -> bytes:
        """Encode a block with this parser's schema"""
        return encode_item(record_to_rlp(block, self.schema))

    def block_to_dict(self, block: Block) -> Dict[str, Any]:
        """
        Convert a block to JSON-friendly dictionaries

        Hashes and byte strings become 0x-hex, integers become decimal strings.
        """
        result = {
            "header": self.header_to_dict(block.header),
            "transactions": [self.transaction_to_dict(tx) for tx in block.transactions],
            "uncles": [self.header_to_dict(uncle) for uncle in block.uncles],
        }
        if block.withdrawals is not None:
            result["withdrawals"] = [self.withdrawal_to_dict(w) for w in block.withdrawals]
        return result

    def header_to_dict(self, header: Header) -> Dict[str, Any]:
        result = {
            "parent_hash": to_hex(header.parent_hash),
            "uncle_hash": to_hex(header.uncle_hash),
            "coinbase": to_hex(header.coinbase),
            "state_root": to_hex(header.state_root),
            "transactions_root": to_hex(header.transactions_root),
            "receipts_root": to_hex(header.receipts_root),
            "logs_bloom": to_hex(header.logs_bloom),
            "difficulty": str(header.difficulty),
            "number": str(header.number),
            "gas_limit": str(header.gas_limit),
            "gas_used": str(header.gas_used),
            "timestamp": str(header.timestamp),
            "extra_data": to_hex(header.extra_data),
            "mix_digest": to_hex(header.mix_digest),
            "nonce": to_hex(header.nonce),
        }
        if header.base_fee_per_gas is not None:
            result["base_fee_per_gas"] = str(header.base_fee_per_gas)
        if header.withdrawals_root is not None:
            result["withdrawals_root"] = to_hex(header.withdrawals_root)
        return result

    def transaction_to_dict(self, tx: Transaction) -> Dict[str, Any]:
        return {
            "hash": to_hex(tx.hash),
            "size": tx.size,
            "from": to_hex(tx.sender),
            "nonce": str(tx.data.nonce),
            "gas_price": str(tx.data.gas_price),
            "gas_limit": str(tx.data.gas_limit),
            "to": to_hex(tx.data.to),
            "value": str(tx.data.value),
            "input": to_hex(tx.data.input),
            "v": str(tx.data.v),
            "r": str(tx.data.r),
            "s": str(tx.data.s),
            "meta": {
                "block_number": str(tx.meta.block_number),
                "timestamp": str(tx.meta.timestamp),
                "message_sender": to_hex(tx.meta.message_sender),
                "rest": to_hex(tx.meta.rest),
            },
        }

    def withdrawal_to_dict(self, withdrawal: Withdrawal) -> Dict[str, Any]:
        return {
            "index": str(withdrawal.index),
            "validator_index": str(withdrawal.validator_index),
            "address": to_hex(withdrawal.address),
            "amount": str(withdrawal.amount),
        }

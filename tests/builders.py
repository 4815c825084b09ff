"""
Builders for sample block records and their encodings
"""
from typing import List, Optional, Tuple

from rlp_import.parsing import (
    Block, BlockParser, Header, Transaction, TxLegacy, TxMeta, Withdrawal,
    encode_item, get_header_schema, record_to_rlp
)

SENDER = bytes.fromhex("5a0b54d5dc17e0aadc383d2db43b0a0d3e029c4c")
RECIPIENT = bytes.fromhex("095e7baea6a6c7c4c2dfeb977efac326af552d87")


def make_header(number: int = 1, **overrides) -> Header:
    """Header with distinct, valid field values"""
    fields = dict(
        parent_hash=bytes([number % 256]) * 32,
        uncle_hash=bytes.fromhex("1dcc4de8dec75d7aab85b567b6ccd41ad312451b948a7413f0a142fd40d49347"),
        coinbase=bytes.fromhex("8888f1f195afa192cfee860698584c030f4c9db1"),
        state_root=b"\x33" * 32,
        transactions_root=b"\x44" * 32,
        receipts_root=b"\x55" * 32,
        logs_bloom=b"\x00" * 256,
        difficulty=131072,
        number=number,
        gas_limit=8_000_000,
        gas_used=21_000,
        timestamp=1_600_000_000 + number,
        extra_data=b"geth",
        mix_digest=b"\x66" * 32,
        nonce=bytes.fromhex("a13a5a8c8f2bb1c4"),
    )
    fields.update(overrides)
    return Header(**fields)


def make_transaction(nonce: int = 0, to: Optional[bytes] = RECIPIENT, block_number: int = 1) -> Transaction:
    return Transaction(
        data=TxLegacy(
            nonce=nonce,
            gas_price=20_000_000_000,
            gas_limit=21_000,
            to=to,
            value=10 ** 18,
            input=b"" if to else b"\x60\x80\x60\x40",
            v=27,
            r=2 ** 255 + nonce,
            s=2 ** 254 + 7,
        ),
        meta=TxMeta(
            block_number=block_number,
            timestamp=1_600_000_000 + block_number,
            message_sender=None,
            rest=b"",
        ),
        hash=bytes([nonce % 256]) * 32,
        size=110,
        sender=SENDER,
    )


def make_withdrawal(index: int = 0) -> Withdrawal:
    return Withdrawal(index=index, validator_index=1000 + index, address=RECIPIENT, amount=32 * 10 ** 9)


def make_block(number: int = 1, tx_count: int = 2, uncle_count: int = 0,
               withdrawals: Optional[List[Withdrawal]] = None, **header_overrides) -> Block:
    return Block(
        header=make_header(number, **header_overrides),
        transactions=[make_transaction(i, block_number=number) for i in range(tx_count)],
        uncles=[make_header(number - 1, extra_data=b"uncle") for _ in range(uncle_count)],
        withdrawals=withdrawals,
    )


def encode_block(block: Block, block_format: str = "legacy") -> bytes:
    return BlockParser(block_format).encode_block(block)


def header_values(header: Header) -> list:
    """Header as a list of wire values (bytes/ints), ready to tweak and encode"""
    return record_to_rlp(header, get_header_schema())


def block_values(block: Block, block_format: str = "legacy") -> list:
    return record_to_rlp(block, BlockParser(block_format).schema)


def encode_values(values) -> bytes:
    return encode_item(values)


def block_stream(count: int, start: int = 1) -> Tuple[List[Block], List[bytes]]:
    """Blocks start..start+count-1 with their individual encodings"""
    blocks = [make_block(number, tx_count=number % 3, uncle_count=number % 2) for number in range(start, start + count)]
    return blocks, [encode_block(block) for block in blocks]

"""
Simple data models for validating exported files
"""
from typing import Any, Dict, List, Optional
from pydantic import BaseModel, field_validator


class ExportedHeader(BaseModel):
    """Header as written by the JSON exporter"""
    parent_hash: str
    uncle_hash: str
    coinbase: str
    state_root: str
    transactions_root: str
    receipts_root: str
    logs_bloom: str
    difficulty: str
    number: str
    gas_limit: str
    gas_used: str
    timestamp: str
    extra_data: str
    mix_digest: str
    nonce: str
    base_fee_per_gas: Optional[str] = None
    withdrawals_root: Optional[str] = None

    @field_validator("parent_hash", "uncle_hash", "state_root", "transactions_root",
                     "receipts_root", "mix_digest")
    @classmethod
    def check_hash(cls, value: str) -> str:
        if not value.startswith("0x") or len(value) != 66:
            raise ValueError(f"not a 32-byte hex hash: {value}")
        return value

    @field_validator("coinbase")
    @classmethod
    def check_address(cls, value: str) -> str:
        if not value.startswith("0x") or len(value) != 42:
            raise ValueError(f"not a 20-byte hex address: {value}")
        return value


class ExportedBlock(BaseModel):
    header: ExportedHeader
    transactions: List[Dict[str, Any]]
    uncles: List[ExportedHeader]
    withdrawals: Optional[List[Dict[str, Any]]] = None


class BlockExportFile(BaseModel):
    """Top-level JSON export document"""
    source: Dict[str, Any]
    data_type: str
    record_count: int
    export_timestamp: str
    data: List[ExportedBlock]

import logging
import os
from abc import ABC, abstractmethod
from typing import List, Dict, Any, Optional
from datetime import datetime, timezone

from ..parsing.block_parser import BlockParser, to_hex
from ..parsing.records import Block

logger = logging.getLogger(__name__)

DATA_TYPES = ['blocks', 'transactions', 'uncles', 'withdrawals']

class BlockConsumer(ABC):
    """Downstream stage that receives decoded blocks in file order"""

    @abstractmethod
    def consume(self, block: Block) -> None:
        """Handle one block"""
        pass

    def finish(self) -> None:
        """Called once after the last block"""
        pass

class BaseExporter(BlockConsumer):
    """Base class for all exporters; collects rows and writes them on finish"""

    def __init__(self, parser: BlockParser, output_file: str, data_type: str = "blocks",
                 source_info: Optional[Dict[str, Any]] = None, output_dir: str = "output"):
        """
        Initialize exporter

        Args:
            parser: Block parser used to render records
            output_file: File name inside output_dir
            data_type: One of blocks, transactions, uncles, withdrawals
            source_info: Description of the input (path/url, format)
            output_dir: Directory for exported files
        """
        if data_type not in DATA_TYPES:
            raise ValueError(f"Unknown data type: {data_type}. Available: {DATA_TYPES}")
        self.parser = parser
        self.output_file = output_file
        self.data_type = data_type
        self.source_info = source_info or {}
        self.output_dir = output_dir
        self.rows: List[Dict[str, Any]] = []

    @property
    def output_path(self) -> str:
        return os.path.join(self.output_dir, self.output_file)

    def consume(self, block: Block) -> None:
        self.rows.extend(self.extract_rows(block))

    def finish(self) -> None:
        os.makedirs(self.output_dir, exist_ok=True)
        self.write(self.rows)
        logger.info("Exported %d %s records to %s", len(self.rows), self.data_type, self.output_path)

    @abstractmethod
    def write(self, rows: List[Dict[str, Any]]) -> None:
        """Write collected rows to output_path"""
        pass

    def create_metadata(self, data_count: int) -> Dict[str, Any]:
        """Create common metadata"""
        return {
            "source": self.source_info,
            "data_type": self.data_type,
            "record_count": data_count,
            "export_timestamp": datetime.now(timezone.utc).isoformat()
        }

    def extract_rows(self, block: Block) -> List[Dict[str, Any]]:
        """Rows contributed by one block for this exporter's data type"""
        if self.data_type == "blocks":
            return [self.block_row(block)]
        if self.data_type == "transactions":
            return self.transaction_rows(block)
        if self.data_type == "uncles":
            return self.uncle_rows(block)
        return self.withdrawal_rows(block)

    def block_row(self, block: Block) -> Dict[str, Any]:
        return self.flatten_block_for_table(block)

    def flatten_block_for_table(self, block: Block) -> Dict[str, Any]:
        """Flatten block structure for tabular formats"""
        flattened = self.parser.header_to_dict(block.header)
        flattened.update({
            "transaction_count": len(block.transactions),
            "uncle_count": len(block.uncles),
            "withdrawal_count": len(block.withdrawals) if block.withdrawals is not None else None,
            "contract_creation_count": sum(1 for tx in block.transactions if tx.data.is_contract_creation),
        })
        return flattened

    def transaction_rows(self, block: Block) -> List[Dict[str, Any]]:
        rows = []
        for tx_index, tx in enumerate(block.transactions):
            tx_dict = self.parser.transaction_to_dict(tx)
            meta = tx_dict.pop("meta")
            rows.append({
                "block_number": str(block.header.number),
                "parent_hash": to_hex(block.header.parent_hash),
                "transaction_index": tx_index,
                **tx_dict,
                "is_contract_creation": tx.data.is_contract_creation,
                "meta_block_number": meta["block_number"],
                "meta_timestamp": meta["timestamp"],
                "message_sender": meta["message_sender"],
                "meta_rest": meta["rest"],
            })
        return rows

    def uncle_rows(self, block: Block) -> List[Dict[str, Any]]:
        rows = []
        for uncle_index, uncle in enumerate(block.uncles):
            row = {
                "block_number": str(block.header.number),
                "uncle_index": uncle_index,
            }
            row.update({f"uncle_{key}": value for key, value in self.parser.header_to_dict(uncle).items()})
            rows.append(row)
        return rows

    def withdrawal_rows(self, block: Block) -> List[Dict[str, Any]]:
        rows = []
        for withdrawal in block.withdrawals or []:
            row = {"block_number": str(block.header.number)}
            row.update(self.parser.withdrawal_to_dict(withdrawal))
            rows.append(row)
        return rows

"""Core import processing: byte source -> stream reader -> consumers"""

from dataclasses import dataclass, asdict
from typing import Dict, Any, Iterator, List, Optional

from ..config import DecoderConfig, get_format_config
from ..export import BlockConsumer, BaseExporter, DATA_TYPES, get_exporter_class
from ..ingestion import BlockStreamReader, RemoteBlockSource, iter_file_chunks
from ..parsing import Block, BlockParser
from .channel import BlockChannel

PROGRESS_INTERVAL = 1000

def is_remote_source(source: str) -> bool:
    return source.startswith(('http://', 'https://'))

@dataclass
class ImportStats:
    """Running totals over the decoded blocks"""
    blocks: int = 0
    transactions: int = 0
    uncles: int = 0
    withdrawals: int = 0
    contract_creations: int = 0
    first_block: Optional[int] = None
    last_block: Optional[int] = None
    bytes_consumed: int = 0

    def record(self, block: Block) -> None:
        number = block.header.number
        if self.first_block is None:
            self.first_block = number
        self.last_block = number
        self.blocks += 1
        self.transactions += len(block.transactions)
        self.uncles += len(block.uncles)
        self.withdrawals += len(block.withdrawals or [])
        self.contract_creations += sum(1 for tx in block.transactions if tx.data.is_contract_creation)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

class ConsumerGroup(BlockConsumer):
    """Delivers each block to several consumers, in registration order"""

    def __init__(self, consumers: List[BlockConsumer]):
        self.consumers = list(consumers)

    def consume(self, block: Block) -> None:
        for consumer in self.consumers:
            consumer.consume(block)

    def finish(self) -> None:
        for consumer in self.consumers:
            consumer.finish()

class ImportProcessor:
    """Core block import functionality"""

    def __init__(self, config: Optional[DecoderConfig] = None):
        self.config = config or DecoderConfig()
        self.parser = BlockParser.from_config(self.config)
        self.stats = ImportStats()
        self.reader: Optional[BlockStreamReader] = None
        self.source: Optional[str] = None

    def open_source(self, source: str) -> Iterator[bytes]:
        """Decompressed byte chunks of a local path or HTTP(S) URL"""
        self.source = source
        if is_remote_source(source):
            return RemoteBlockSource.from_config(source, self.config).iter_chunks()
        return iter_file_chunks(source, self.config.chunk_size)

    def iter_blocks(self, source: str) -> Iterator[Block]:
        """Decode blocks from a source in file order, updating stats"""
        self.stats = ImportStats()
        self.reader = BlockStreamReader(self.parser)

        for block in self.reader.consume(self.open_source(source)):
            self.stats.record(block)
            self.stats.bytes_consumed = self.reader.cursor
            if self.stats.blocks % PROGRESS_INTERVAL == 0:
                print(f"📈 Decoded {self.stats.blocks} blocks (block {block.header.number}, offset {self.reader.cursor})")
            yield block

    def run(self, source: str, consumers: List[BlockConsumer], channel_capacity: int = 0) -> ImportStats:
        """
        Decode a source and hand every block to the consumers

        Args:
            source: Local block file or HTTP(S) URL
            consumers: Downstream stages, each sees every block in order
            channel_capacity: If > 0, consumers run on a worker thread behind a bounded queue

        Raises:
            BlockImportError: Decoding failed; consumers are not finished
        """
        group = ConsumerGroup(consumers)

        if channel_capacity > 0:
            with BlockChannel(group, channel_capacity) as channel:
                for block in self.iter_blocks(source):
                    channel.send(block)
        else:
            for block in self.iter_blocks(source):
                group.consume(block)

        group.finish()
        print(f"✅ Successfully decoded {self.stats.blocks} blocks ({self.stats.bytes_consumed} bytes)")
        return self.stats

    def source_info(self) -> Dict[str, Any]:
        return {
            "source": self.source,
            "block_format": self.config.block_format,
            "trailing_policy": self.config.trailing_policy,
        }

    def create_exporters(self, output_file: str, data_type: str = "blocks") -> List[BaseExporter]:
        """
        Exporters for one data type, or one per data type when data_type is 'all'

        With 'all', output names get a _<data_type> suffix before the extension.
        """
        exporter_class = get_exporter_class(output_file)
        if data_type != "all":
            return [exporter_class(self.parser, output_file, data_type,
                                   self.source_info(), self.config.output_dir)]

        base_name, extension = output_file.rsplit('.', 1)
        exporters = []
        for name in self._available_data_types():
            exporters.append(exporter_class(self.parser, f"{base_name}_{name}.{extension}", name,
                                            self.source_info(), self.config.output_dir))
        return exporters

    def export(self, source: str, output_file: str, data_type: str = "blocks",
               channel_capacity: int = 0) -> ImportStats:
        """Decode a source straight into file exporters"""
        self.source = source
        exporters = self.create_exporters(output_file, data_type)
        stats = self.run(source, exporters, channel_capacity)
        for exporter in exporters:
            print(f"📝 Exported {len(exporter.rows):,} {exporter.data_type} records to {exporter.output_path}")
        return stats

    def show_stats(self, source: str) -> ImportStats:
        """Decode a source and print statistics"""
        stats = self.run(source, [])
        format_config = get_format_config(self.config.block_format)

        print(f"📊 Block File Statistics: {source.split('/')[-1]}")
        print(f"   Format: {format_config['name']} ({self.config.trailing_policy} trailing fields)")
        print(f"   Blocks: {stats.blocks}")
        if stats.blocks:
            print(f"   Block Range: {stats.first_block} - {stats.last_block}")
        print(f"   Transactions: {stats.transactions} ({stats.contract_creations} contract creations)")
        print(f"   Uncles: {stats.uncles}")
        print(f"   Withdrawals: {stats.withdrawals}")
        print(f"   Bytes Decoded: {stats.bytes_consumed}")
        return stats

    def _available_data_types(self) -> List[str]:
        format_config = get_format_config(self.config.block_format)
        return [name for name in DATA_TYPES
                if name != 'withdrawals' or 'withdrawals' in format_config['block_trailing']]

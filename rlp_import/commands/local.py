"""Local file processing commands"""

import json
from typing import List

from .base import BaseCommand, DATA_COMMANDS
from ..core import ImportProcessor
from ..parsing.errors import BlockImportError

USAGE = "rlp-import <block_file> <command> [output_file] [--format <name>] [--tolerant] [--no-validate] [--threaded]"

class LocalCommand(BaseCommand):
    """Handler for block file processing commands"""

    def execute(self, args: List[str]) -> None:
        """Execute block file processing command"""
        flags, clean_args = self.parse_flags(args)
        self.validate_required_args(clean_args, 2, USAGE)

        source = clean_args[0]
        command = clean_args[1]
        self.validate_source(source)

        processor = ImportProcessor(self.build_config(flags))

        try:
            if command == "stats":
                processor.show_stats(source)

            elif command == "block":
                self._handle_single_block(processor, source, clean_args[2:])

            elif command in DATA_COMMANDS:
                self._handle_export(processor, source, command, clean_args[2:], flags)

            else:
                print(f"❌ Unknown command: {command}")
                self.fail(f"Available commands: stats, block, {', '.join(DATA_COMMANDS)}")

        except BlockImportError as e:
            self.handle_decode_error(e)

        self.print_success("Operation completed successfully!")

    def validate_source(self, source: str) -> None:
        self.validate_file_exists(source)

    def _handle_single_block(self, processor: ImportProcessor, source: str, args: List[str]) -> None:
        """Print one block by number as JSON"""
        self.validate_required_args(args, 1, "rlp-import <block_file> block <number>")

        try:
            number = int(args[0])
        except ValueError:
            self.fail("Block number must be a valid integer")

        for block in processor.iter_blocks(source):
            if block.header.number == number:
                print(json.dumps(processor.parser.block_to_dict(block), indent=2))
                return

        self.fail(f"Block {number} not found in {source}")

    def _handle_export(self, processor: ImportProcessor, source: str, data_type: str,
                       args: List[str], flags: dict) -> None:
        """Decode and export one data type (or all of them)"""
        if not args:
            print("❌ Output file required")
            self.fail(f"Usage: rlp-import <block_file> {data_type} <output_file>")

        output_file = args[0]
        self.validate_output_file(output_file)
        try:
            processor.export(source, output_file, data_type, self.get_channel_capacity(flags))
        except ValueError as e:
            self.fail(str(e))

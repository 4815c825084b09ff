"""Batch processing commands"""

import os
from typing import List

from .base import BaseCommand, DATA_COMMANDS
from ..core import ImportProcessor, OutputManager
from ..parsing.errors import BlockImportError

class BatchCommand(BaseCommand):
    """Handler for batch processing operations"""

    def execute(self, args: List[str]) -> None:
        """Execute batch processing command"""
        flags, clean_args = self.parse_flags(args)
        self.validate_required_args(clean_args, 3, "rlp-import --batch <pattern> <command> <base_output> [--format <name>] [--tolerant]")

        pattern = clean_args[0]
        command = clean_args[1]
        base_output = clean_args[2]

        if command not in DATA_COMMANDS:
            self.fail(f"Unknown batch command: {command}. Available: {', '.join(DATA_COMMANDS)}")
        if os.path.splitext(base_output)[1]:
            # Extensionless base names export to Parquet
            self.validate_output_file(base_output)

        config = self.build_config(flags)
        output_manager = OutputManager(config.output_dir)
        block_files = output_manager.find_block_files(pattern)

        if not block_files:
            self.fail(f"No block files found matching pattern: {pattern}")

        print(f"🔍 Found {len(block_files)} block files to process")

        processed_count = 0
        failed_files = []

        for i, block_file in enumerate(block_files, 1):
            print(f"\n📁 Processing file {i}/{len(block_files)}: {block_file}")
            output_file = output_manager.generate_batch_output_filename(base_output, block_file)

            processor = ImportProcessor(config)
            try:
                processor.export(block_file, output_file, command, self.get_channel_capacity(flags))
                processed_count += 1
            except BlockImportError as e:
                print(f"❌ {block_file}: {e}")
                failed_files.append(block_file)

        print(f"\n📊 Batch complete: {processed_count} processed, {len(failed_files)} failed")
        if failed_files:
            for block_file in failed_files:
                print(f"   ❌ {block_file}")
            self.fail("Some block files failed to decode")
        self.print_success("Batch completed successfully!")

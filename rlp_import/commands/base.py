"""Base command class with common functionality"""

import os
import sys
from abc import ABC, abstractmethod
from dataclasses import replace
from typing import List, Dict, Any, NoReturn

from ..config import DecoderConfig, get_decoder_config
from ..core.output_manager import OutputManager
from ..parsing.errors import BlockImportError

DATA_COMMANDS = ["blocks", "transactions", "uncles", "withdrawals", "all"]

class BaseCommand(ABC):
    """Base class for all CLI commands"""

    def __init__(self):
        """Initialize base command"""
        self.debug = False

    @abstractmethod
    def execute(self, args: List[str]) -> None:
        """Execute the command with given arguments"""
        pass

    def parse_flags(self, args: List[str]) -> tuple:
        """Parse common flags from arguments"""
        flags = {
            'tolerant': '--tolerant' in args,
            'no_validate': '--no-validate' in args,
            'threaded': '--threaded' in args,
            'format': None,
        }
        self.debug = '--debug' in args

        clean_args = []
        skip_next = False
        for i, arg in enumerate(args):
            if skip_next:
                skip_next = False
                continue
            if arg == '--format':
                if i + 1 >= len(args):
                    self.fail("--format requires a value (legacy, london, shanghai)")
                flags['format'] = args[i + 1]
                skip_next = True
            elif not arg.startswith('--'):
                clean_args.append(arg)

        return flags, clean_args

    def build_config(self, flags: Dict[str, Any]) -> DecoderConfig:
        """Environment configuration overridden by command line flags"""
        config = get_decoder_config()
        overrides = {}
        if flags['format']:
            overrides['block_format'] = flags['format']
        if flags['tolerant']:
            overrides['trailing_policy'] = 'tolerant'
        if flags['no_validate']:
            overrides['validate_domain'] = False
        try:
            return replace(config, **overrides)
        except ValueError as e:
            self.fail(str(e))

    def get_channel_capacity(self, flags: Dict[str, Any]) -> int:
        return 64 if flags['threaded'] else 0

    def handle_decode_error(self, error: BlockImportError) -> NoReturn:
        """Report a decode failure and exit nonzero"""
        print(f"❌ Decode failed: {error.kind}")
        if error.offset is not None:
            print(f"   Offset: {error.offset}")
        if error.context:
            print(f"   Field: {error.path}")
        print(f"   Detail: {error.message}")
        if self.debug:
            import traceback
            traceback.print_exc()
        sys.exit(1)

    def fail(self, message: str) -> NoReturn:
        """Print an error and exit nonzero"""
        print(f"❌ {message}")
        sys.exit(1)

    def print_success(self, message: str) -> None:
        """Print success message"""
        print(f"✅ {message}")

    def validate_output_file(self, output_file: str) -> None:
        """Exit unless the output extension has an exporter"""
        if not OutputManager.validate_output_format(output_file):
            self.fail(f"Unsupported output format: {output_file}. Use .json, .jsonl, .csv or .parquet")

    def validate_file_exists(self, filepath: str) -> None:
        """Exit unless a file exists"""
        if not os.path.exists(filepath):
            self.fail(f"File not found: {filepath}")

    def validate_required_args(self, args: List[str], min_count: int, usage: str) -> None:
        """Exit unless enough positional arguments are present"""
        if len(args) < min_count:
            print(f"❌ Insufficient arguments")
            print(f"Usage: {usage}")
            sys.exit(1)

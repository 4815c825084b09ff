"""Decoder settings loaded from the environment"""

import os
from dataclasses import dataclass

from .formats import get_format_config, validate_trailing_policy

DEFAULT_CHUNK_SIZE = 1024 * 1024


@dataclass
class DecoderConfig:
    """Runtime options for decoding a block file"""
    block_format: str = 'legacy'
    trailing_policy: str = 'strict'
    validate_domain: bool = True
    chunk_size: int = DEFAULT_CHUNK_SIZE
    max_retries: int = 3
    output_dir: str = 'output'

    def __post_init__(self):
        self.block_format = self.block_format.lower()
        get_format_config(self.block_format)
        self.trailing_policy = validate_trailing_policy(self.trailing_policy)
        if self.chunk_size <= 0:
            raise ValueError(f"chunk_size must be positive, got {self.chunk_size}")


def load_env_file(env_file_path: str = '.env'):
    """Load environment variables from .env file"""
    if os.path.exists(env_file_path):
        print(f"📁 Loading environment from {env_file_path}")
        with open(env_file_path, 'r') as f:
            for line in f:
                line = line.strip()
                if line and not line.startswith('#') and '=' in line:
                    key, value = line.split('=', 1)
                    # Only set if not already in environment
                    if key not in os.environ:
                        os.environ[key] = value
                        print(f"   ✅ Set {key}")


def get_decoder_config(env_file_path: str = '.env') -> DecoderConfig:
    """
    Build DecoderConfig from environment variables

    Environment variables:
        RLP_IMPORT_BLOCK_FORMAT: legacy, london or shanghai (default: legacy)
        RLP_IMPORT_TRAILING_POLICY: strict or tolerant (default: strict)
        RLP_IMPORT_VALIDATE: run domain validation (default: true)
        RLP_IMPORT_CHUNK_SIZE: bytes read per chunk (default: 1 MiB)
        RLP_IMPORT_MAX_RETRIES: download retry attempts (default: 3)
        RLP_IMPORT_OUTPUT_DIR: export directory (default: output)
    """
    load_env_file(env_file_path)

    return DecoderConfig(
        block_format=os.getenv('RLP_IMPORT_BLOCK_FORMAT', 'legacy'),
        trailing_policy=os.getenv('RLP_IMPORT_TRAILING_POLICY', 'strict'),
        validate_domain=os.getenv('RLP_IMPORT_VALIDATE', 'true').lower() == 'true',
        chunk_size=int(os.getenv('RLP_IMPORT_CHUNK_SIZE', str(DEFAULT_CHUNK_SIZE))),
        max_retries=int(os.getenv('RLP_IMPORT_MAX_RETRIES', '3')),
        output_dir=os.getenv('RLP_IMPORT_OUTPUT_DIR', 'output'),
    )

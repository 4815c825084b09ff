"""Output file naming and input discovery for batch runs"""

import os
import glob
from typing import List

from ..export import EXPORTERS

BLOCK_FILE_SUFFIXES = ('.rlp', '.rlp.gz', '.rlp.sz', '.rlp.snappy', '.blocks', '.gz', '.sz', '.snappy')

class OutputManager:
    """Manages output file naming and directory operations"""

    def __init__(self, base_output_dir: str = "output"):
        """Initialize output manager"""
        self.base_output_dir = base_output_dir
        self.ensure_output_directory()

    def ensure_output_directory(self) -> None:
        """Ensure output directory exists"""
        if not os.path.exists(self.base_output_dir):
            os.makedirs(self.base_output_dir)

    def generate_batch_output_filename(self, base_output: str, input_file: str) -> str:
        """Output filename for one input of a batch: <base>_<input stem>.<ext>"""
        stem = os.path.basename(input_file)
        for suffix in ('.gz', '.sz', '.snappy', '.rlp', '.blocks'):
            if stem.lower().endswith(suffix):
                stem = stem[:-len(suffix)]

        if self.validate_output_format(base_output):
            base_name, extension = base_output.rsplit('.', 1)
            return f"{base_name}_{stem}.{extension}"
        return f"{base_output}_{stem}.parquet"

    def find_block_files(self, pattern: str) -> List[str]:
        """Find block files matching a glob pattern or inside a directory, sorted by name"""
        if os.path.isdir(pattern):
            matches = []
            for suffix in BLOCK_FILE_SUFFIXES:
                matches.extend(glob.glob(os.path.join(pattern, f"*{suffix}")))
        else:
            matches = glob.glob(pattern)

        block_files = sorted({match for match in matches if os.path.isfile(match)})
        return block_files

    @staticmethod
    def validate_output_format(output_file: str) -> bool:
        """Validate that output format is supported"""
        extension = os.path.splitext(output_file)[1].lower()
        return extension in EXPORTERS

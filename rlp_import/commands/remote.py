"""Remote block file processing"""

from typing import List

from .local import LocalCommand
from ..core import is_remote_source

class RemoteCommand(LocalCommand):
    """Handler for block files streamed over HTTP(S)"""

    def execute(self, args: List[str]) -> None:
        """Execute remote processing: <url> <command> [output_file] [options]"""
        if not args:
            self.fail("Remote command requires a URL")
        print(f"🌐 Remote source: {args[0]}")
        super().execute(args)

    def validate_source(self, source: str) -> None:
        if not is_remote_source(source):
            self.fail(f"Not an HTTP(S) URL: {source}")

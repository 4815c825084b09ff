from .base import BaseCommand
from .local import LocalCommand
from .remote import RemoteCommand
from .batch import BatchCommand

__all__ = ["BaseCommand", "LocalCommand", "RemoteCommand", "BatchCommand"]

"""Error types raised while decoding RLP block files"""

from typing import List, Optional


class BlockImportError(Exception):
    """
    Base class for every decode or validation failure

    Attributes:
        offset: Absolute byte offset of the item that failed (None if unknown)
        context: Record/field path segments, outermost first
    """

    def __init__(self, message: str, offset: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.offset = offset
        self.context: List[str] = []

    @property
    def kind(self) -> str:
        return type(self).__name__

    @property
    def path(self) -> str:
        """Dotted field path, e.g. Block.transactions[2].data.gas_price"""
        path = ""
        for segment in self.context:
            if not path or segment.startswith("["):
                path += segment
            else:
                path += "." + segment
        return path

    def add_context(self, segment: str) -> "BlockImportError":
        """Prepend a path segment while the error unwinds through nested records"""
        self.context.insert(0, segment)
        return self

    def shift(self, base_offset: int) -> "BlockImportError":
        """Rebase a buffer-relative offset onto the absolute stream position"""
        if self.offset is not None:
            self.offset += base_offset
        return self

    def __str__(self) -> str:
        parts = [f"{self.kind}: {self.message}"]
        if self.offset is not None:
            parts.append(f"at offset {self.offset}")
        if self.context:
            parts.append(f"in {self.path}")
        return " ".join(parts)


class RlpDecodeError(BlockImportError):
    """Structural decode failure"""


class BufferUnderflow(RlpDecodeError):
    """Declared length runs past the available bytes"""

    def __init__(self, needed: int, available: int, offset: Optional[int] = None):
        super().__init__(f"item needs {needed} bytes but only {available} remain", offset)
        self.needed = needed
        self.available = available


class NonCanonicalLength(RlpDecodeError):
    """Length prefix is not the minimal encoding"""


class NonCanonicalInteger(RlpDecodeError):
    """Integer encoded with a leading zero byte"""


class IntegerOverflow(RlpDecodeError):
    """Integer wider than the target field"""

    def __init__(self, field: str, max_bits: int, actual_len: int, offset: Optional[int] = None):
        super().__init__(
            f"{field}: {actual_len} bytes exceed {max_bits}-bit integer", offset
        )
        self.field = field
        self.max_bits = max_bits
        self.actual_len = actual_len


class UnexpectedItemKind(RlpDecodeError):
    """A string where a list was expected, or the other way round"""

    def __init__(self, expected: str, actual: str, offset: Optional[int] = None):
        super().__init__(f"expected {expected}, found {actual}", offset)
        self.expected = expected
        self.actual = actual


class FieldCountMismatch(RlpDecodeError):
    """Record list has the wrong number of children"""

    def __init__(self, type_name: str, expected: int, actual: int, offset: Optional[int] = None):
        super().__init__(f"{type_name} expects {expected} fields, got {actual}", offset)
        self.type_name = type_name
        self.expected = expected
        self.actual = actual


class FixedSizeMismatch(RlpDecodeError):
    """Fixed-width field with the wrong byte length"""

    def __init__(self, field: str, expected: int, actual: int, offset: Optional[int] = None):
        super().__init__(f"{field} must be {expected} bytes, got {actual}", offset)
        self.field = field
        self.expected = expected
        self.actual = actual


class DomainValidationError(BlockImportError):
    """Structurally valid record that breaks a semantic bound"""

    def __init__(self, field: str, reason: str, offset: Optional[int] = None):
        super().__init__(f"{field}: {reason}", offset)
        self.field = field
        self.reason = reason

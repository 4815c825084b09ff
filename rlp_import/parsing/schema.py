"""Positional mapping of RLP lists onto typed records"""

from dataclasses import dataclass, field
from typing import Any, List, Optional, Tuple

from .errors import (
    BlockImportError, DomainValidationError, FieldCountMismatch, FixedSizeMismatch, IntegerOverflow,
    NonCanonicalInteger, UnexpectedItemKind
)
from .rlp_utils import RlpItem

@dataclass(frozen=True)
class FixedBytes:
    width: int

@dataclass(frozen=True)
class OptionalFixedBytes:
    """Fixed-width bytes where an empty string means absent"""
    width: int

@dataclass(frozen=True)
class UnsignedInt:
    max_bits: int

@dataclass(frozen=True)
class OpaqueBytes:
    pass

@dataclass(frozen=True)
class Nested:
    schema: "RecordSchema"

@dataclass(frozen=True)
class NestedList:
    schema: "RecordSchema"

@dataclass(frozen=True)
class RecordSchema:
    """
    Ordered description of one record type

    Args:
        name: Type name used in error messages
        record_type: Class built from the mapped values (keyword arguments)
        fields: Mandatory (name, kind) pairs in wire order
        trailing_fields: Known optional fields that may follow the mandatory ones
        trailing: Whether children past the mandatory set are accepted at all
    """
    name: str
    record_type: type
    fields: Tuple[Tuple[str, Any], ...]
    trailing_fields: Tuple[Tuple[str, Any], ...] = field(default=())
    trailing: bool = False

    @property
    def arity(self) -> int:
        return len(self.fields)

class SchemaMapper:
    """Maps decoded items onto records described by a RecordSchema"""

    def __init__(self, trailing_policy: str = 'strict', validate_domain: bool = True):
        """
        Initialize schema mapper

        Args:
            trailing_policy: 'strict' rejects unknown trailing children, 'tolerant' ignores them
            validate_domain: Run record.validate() after mapping
        """
        if trailing_policy not in ('strict', 'tolerant'):
            raise ValueError(f"Unknown trailing policy: {trailing_policy}")
        self.trailing_policy = trailing_policy
        self.validate_domain = validate_domain

    def map_record(self, item: RlpItem, schema: RecordSchema):
        """Build one record from a list item; errors carry the record/field path"""
        try:
            return self._map_record(item, schema)
        except BlockImportError as e:
            raise e.add_context(schema.name)

    def _map_record(self, item: RlpItem, schema: RecordSchema):
        if not item.is_list:
            raise UnexpectedItemKind("list", item.kind, item.offset)

        children = item.children
        count = len(children)
        if count < schema.arity:
            raise FieldCountMismatch(schema.name, schema.arity, count, item.offset)

        trailing_fields = schema.trailing_fields if schema.trailing else ()
        if count > schema.arity:
            if not schema.trailing:
                raise FieldCountMismatch(schema.name, schema.arity, count, item.offset)
            known = schema.arity + len(trailing_fields)
            if count > known and self.trailing_policy == 'strict':
                raise FieldCountMismatch(schema.name, known, count, item.offset)

        values = {}
        offsets = {}
        for (name, kind), child in zip(schema.fields + trailing_fields, children):
            offsets[name] = child.offset
            try:
                values[name] = self.map_field(child, kind, name)
            except BlockImportError as e:
                raise e.add_context(name)

        record = schema.record_type(**values)

        if self.validate_domain and hasattr(record, 'validate'):
            try:
                record.validate()
            except DomainValidationError as e:
                if e.offset is None:
                    e.offset = offsets.get(e.field, item.offset)
                raise e.add_context(e.field)

        return record

    def map_field(self, item: RlpItem, kind, name: str):
        """Decode one child item according to its field kind"""
        if isinstance(kind, Nested):
            return self._map_record(item, kind.schema)

        if isinstance(kind, NestedList):
            if not item.is_list:
                raise UnexpectedItemKind("list", item.kind, item.offset)
            records = []
            for index, child in enumerate(item.children):
                try:
                    records.append(self._map_record(child, kind.schema))
                except BlockImportError as e:
                    raise e.add_context(f"[{index}]")
            return records

        if item.is_list:
            raise UnexpectedItemKind("string", "list", item.offset)
        payload = item.payload

        if isinstance(kind, FixedBytes):
            if len(payload) != kind.width:
                raise FixedSizeMismatch(name, kind.width, len(payload), item.offset)
            return bytes(payload)

        if isinstance(kind, OptionalFixedBytes):
            if len(payload) == 0:
                return None
            if len(payload) != kind.width:
                raise FixedSizeMismatch(name, kind.width, len(payload), item.offset)
            return bytes(payload)

        if isinstance(kind, UnsignedInt):
            return decode_uint(payload, kind.max_bits, name, item.offset)

        if isinstance(kind, OpaqueBytes):
            return bytes(payload)

        raise TypeError(f"Unknown field kind for {name}: {kind!r}")


def decode_uint(payload, max_bits: int, name: str = "integer", offset: Optional[int] = None) -> int:
    """Canonical big-endian unsigned integer; empty payload is zero"""
    if len(payload) > max_bits // 8:
        raise IntegerOverflow(name, max_bits, len(payload), offset)
    if len(payload) > 0 and payload[0] == 0:
        raise NonCanonicalInteger(f"{name} has a leading zero byte", offset)
    return int.from_bytes(bytes(payload), "big")


def record_to_rlp(record, schema: RecordSchema) -> List[Any]:
    """
    Inverse of SchemaMapper.map_record: nested bytes/int lists ready for encode_item

    Trailing fields are emitted in order up to the last one that is set.
    """
    values = [_value_to_rlp(getattr(record, name), kind) for name, kind in schema.fields]

    trailing = []
    for name, kind in schema.trailing_fields:
        value = getattr(record, name, None)
        if value is None:
            break
        trailing.append(_value_to_rlp(value, kind))
    return values + trailing


def _value_to_rlp(value, kind):
    if isinstance(kind, Nested):
        return record_to_rlp(value, kind.schema)
    if isinstance(kind, NestedList):
        return [record_to_rlp(child, kind.schema) for child in value]
    if isinstance(kind, OptionalFixedBytes) and value is None:
        return b""
    return value

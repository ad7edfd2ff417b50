"""
Borsh rendering of Portal structures (SVM destinations).

Layouts follow the Portal program IDL: raw 32-byte keys, little-endian u64
integers, u32 element counts for vectors and u32 length prefixes for bytes.
"""
import logging
from typing import Any, Dict

from borsh_construct import U8, U16, U32, U64, U128, Bytes, CStruct, Vec
from construct import ConstructError

from ..address import AddressNormalizer
from ..exceptions import DecodingError, EncodingError
from ..types import ChainType
from .schema import REWARD, ROUTE, FieldKind, StructSchema, check_uint

logger = logging.getLogger(__name__)

_UINTS = {8: U8, 16: U16, 32: U32, 64: U64, 128: U128}


def borsh_layout(schema: StructSchema) -> CStruct:
    """Build the borsh_construct layout for a structure."""
    parts = []
    for field in schema.fields:
        if not field.svm:
            continue
        if field.kind in (FieldKind.ADDRESS, FieldKind.BYTES32):
            subcon = U8[32]
        elif field.kind is FieldKind.UINT:
            subcon = _UINTS[field.svm_bits]
        elif field.kind is FieldKind.BYTES:
            subcon = Bytes
        else:
            subcon = Vec(borsh_layout(field.item))
        parts.append(field.name / subcon)
    return CStruct(*parts)


LAYOUTS = {schema.name: borsh_layout(schema) for schema in (ROUTE, REWARD)}


def _to_borsh_values(schema: StructSchema, value: Any) -> Dict[str, Any]:
    values = {}
    for field in schema.fields:
        if not field.svm:
            continue
        item = getattr(value, field.name)
        if field.kind is FieldKind.ADDRESS:
            values[field.name] = list(AddressNormalizer.to_native_bytes(item, ChainType.SVM))
        elif field.kind is FieldKind.BYTES32:
            values[field.name] = list(item)
        elif field.kind is FieldKind.UINT:
            values[field.name] = check_uint(field, item, field.svm_bits)
        elif field.kind is FieldKind.BYTES:
            values[field.name] = bytes(item)
        else:
            values[field.name] = [_to_borsh_values(field.item, element) for element in item]
    return values


def _from_borsh_values(schema: StructSchema, parsed: Any) -> Dict[str, Any]:
    result = {}
    for field in schema.fields:
        if not field.svm:
            continue
        item = parsed[field.name]
        if field.kind is FieldKind.ADDRESS:
            result[field.name] = "0x" + bytes(item).hex()
        elif field.kind in (FieldKind.BYTES32, FieldKind.BYTES):
            result[field.name] = bytes(item)
        elif field.kind is FieldKind.UINT:
            result[field.name] = int(item)
        else:
            result[field.name] = [_from_borsh_values(field.item, element) for element in item]
    return result


def encode_borsh(schema: StructSchema, value: Any) -> bytes:
    """
    Encode a Route or Reward with the SVM Borsh layout.

    Raises:
        EncodingOverflowError: If an integer exceeds 64 bits
    """
    values = _to_borsh_values(schema, value)
    try:
        return LAYOUTS[schema.name].build(values)
    except ConstructError as e:
        raise EncodingError(f"Failed to Borsh-encode {schema.name}: {e}") from e


def decode_borsh(schema: StructSchema, data: bytes) -> Dict[str, Any]:
    """
    Decode Borsh bytes into a dict of snake_case fields.

    Raises:
        DecodingError: If data is truncated, malformed or has trailing bytes
    """
    layout = LAYOUTS[schema.name]
    try:
        parsed = layout.parse(data)
        consumed = len(layout.build(parsed))
    except ConstructError as e:
        raise DecodingError(f"Failed to Borsh-decode {schema.name}: {e}") from e
    if consumed != len(data):
        raise DecodingError(
            f"Failed to Borsh-decode {schema.name}: {len(data) - consumed} trailing bytes"
        )
    logger.debug(f"Borsh-decoded {schema.name} from {len(data)} bytes")
    return _from_borsh_values(schema, parsed)

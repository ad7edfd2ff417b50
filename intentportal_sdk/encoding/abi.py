"""
Solidity ABI rendering of Portal structures (EVM and TVM destinations).

Structures are encoded as ``abi.encode(struct)``: a single dynamic tuple with
32-byte head words and offset/length-prefixed tails.
"""
import logging
from typing import Any, Dict

from eth_abi import decode, encode
from eth_abi.exceptions import DecodingError as AbiDecodingError
from eth_abi.exceptions import EncodingError as AbiEncodingError

from ..address import AddressNormalizer
from ..exceptions import DecodingError, EncodingError
from ..types import ChainType
from .schema import FieldKind, SchemaField, StructSchema, check_uint

logger = logging.getLogger(__name__)


def abi_type(schema: StructSchema) -> str:
    """ABI tuple type string, e.g. ``(address,uint256)``."""
    return "(" + ",".join(_field_type(field) for field in schema.fields) + ")"


def _field_type(field: SchemaField) -> str:
    if field.kind is FieldKind.LIST:
        return abi_type(field.item) + "[]"
    if field.kind is FieldKind.UINT:
        return f"uint{field.abi_bits}"
    return field.kind.value


def _to_abi_values(schema: StructSchema, value: Any) -> tuple:
    values = []
    for field in schema.fields:
        item = getattr(value, field.name)
        if field.kind is FieldKind.ADDRESS:
            values.append(AddressNormalizer.denormalize_to_evm(item))
        elif field.kind is FieldKind.UINT:
            values.append(check_uint(field, item, field.abi_bits))
        elif field.kind is FieldKind.LIST:
            values.append([_to_abi_values(field.item, element) for element in item])
        else:
            values.append(bytes(item))
    return tuple(values)


def _from_abi_values(schema: StructSchema, values: tuple) -> Dict[str, Any]:
    result = {}
    for field, item in zip(schema.fields, values):
        if field.kind is FieldKind.ADDRESS:
            result[field.name] = AddressNormalizer.normalize(item, ChainType.EVM)
        elif field.kind is FieldKind.UINT:
            result[field.name] = int(item)
        elif field.kind is FieldKind.LIST:
            result[field.name] = [_from_abi_values(field.item, element) for element in item]
        else:
            result[field.name] = bytes(item)
    return result


def encode_abi(schema: StructSchema, value: Any) -> bytes:
    """
    Encode a Route or Reward as an ABI tuple.

    Raises:
        EncodingOverflowError: If an integer exceeds its ABI width
        AddressFormatError: If an address is not a 20-byte Universal Address
    """
    values = _to_abi_values(schema, value)
    try:
        return encode([abi_type(schema)], [values])
    except AbiEncodingError as e:
        raise EncodingError(f"Failed to ABI-encode {schema.name}: {e}") from e


def decode_abi(schema: StructSchema, data: bytes) -> Dict[str, Any]:
    """
    Decode ABI bytes into a dict of snake_case fields.

    Raises:
        DecodingError: If data is truncated, malformed or has trailing bytes
    """
    types = [abi_type(schema)]
    try:
        (values,) = decode(types, data)
        consumed = len(encode(types, [values]))
    except (AbiDecodingError, AbiEncodingError) as e:
        raise DecodingError(f"Failed to ABI-decode {schema.name}: {e}") from e
    if consumed != len(data):
        raise DecodingError(
            f"Failed to ABI-decode {schema.name}: {len(data) - consumed} trailing bytes"
        )
    logger.debug(f"ABI-decoded {schema.name} from {len(data)} bytes")
    return _from_abi_values(schema, values)

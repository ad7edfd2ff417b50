"""
Shared field schema for Portal Route and Reward structures.

Both wire formats (Solidity ABI tuples for EVM/TVM, Borsh structs for SVM)
are rendered from these definitions, so field order and widths are declared
in exactly one place.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from ..exceptions import EncodingOverflowError


class FieldKind(str, Enum):
    BYTES32 = "bytes32"
    UINT = "uint"
    ADDRESS = "address"
    BYTES = "bytes"
    LIST = "list"


@dataclass(frozen=True)
class SchemaField:
    """
    One field of a Portal structure.

    Attributes:
        name: snake_case model attribute, also the SVM field name
        kind: Logical type
        abi_bits: Integer width in the ABI encoding
        svm_bits: Integer width in the SVM encoding
        item: Element schema for LIST fields
        svm: Whether the field exists in the SVM layout
    """
    name: str
    kind: FieldKind
    abi_bits: int = 256
    svm_bits: int = 64
    item: Optional["StructSchema"] = None
    svm: bool = True


@dataclass(frozen=True)
class StructSchema:
    name: str
    fields: Tuple[SchemaField, ...]


TOKEN_AMOUNT = StructSchema("TokenAmount", (
    SchemaField("token", FieldKind.ADDRESS),
    SchemaField("amount", FieldKind.UINT),
))

CALL = StructSchema("Call", (
    SchemaField("target", FieldKind.ADDRESS),
    SchemaField("data", FieldKind.BYTES),
    SchemaField("value", FieldKind.UINT, svm=False),
))

ROUTE = StructSchema("Route", (
    SchemaField("salt", FieldKind.BYTES32),
    SchemaField("deadline", FieldKind.UINT, abi_bits=64),
    SchemaField("portal", FieldKind.ADDRESS),
    SchemaField("native_amount", FieldKind.UINT),
    SchemaField("tokens", FieldKind.LIST, item=TOKEN_AMOUNT),
    SchemaField("calls", FieldKind.LIST, item=CALL),
))

REWARD = StructSchema("Reward", (
    SchemaField("deadline", FieldKind.UINT, abi_bits=64),
    SchemaField("creator", FieldKind.ADDRESS),
    SchemaField("prover", FieldKind.ADDRESS),
    SchemaField("native_amount", FieldKind.UINT),
    SchemaField("tokens", FieldKind.LIST, item=TOKEN_AMOUNT),
))


def check_uint(field: SchemaField, value: int, bits: int) -> int:
    """
    Ensure value fits an unsigned integer of the given width.

    Raises:
        EncodingOverflowError: If value is negative or too large
    """
    if value < 0 or value >= 1 << bits:
        raise EncodingOverflowError(field.name, value, bits)
    return value

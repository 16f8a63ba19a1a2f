from __future__ import annotations

from typing import List, Literal, Optional, TypeAlias

from pydantic import BaseModel

from recordwire.fields import NestedField, ScalarField
from recordwire.registry import Schema

WireCaseName: TypeAlias = Literal["camel", "snake", "identity"]


class MarshalConfigDTO(BaseModel):
    wire_case: WireCaseName = "camel"
    strict_enums: bool = True


class FieldDTO(BaseModel):
    key: str
    kind: str
    wire_key: str
    include_on_write: bool = True
    has_default: bool = False
    enum_type: Optional[str] = None
    enum_values: List[str] = []
    nested_type: Optional[str] = None
    strategy: Optional[str] = None


class SchemaDTO(BaseModel):
    record_type: str
    fields: List[FieldDTO]


def field_to_dto(descriptor: ScalarField | NestedField) -> FieldDTO:
    enum_type = descriptor.enum_type if isinstance(descriptor, ScalarField) else None
    nested_type = descriptor.nested_type if isinstance(descriptor, NestedField) else None
    return FieldDTO(
        key=str(descriptor.key),
        kind=descriptor.kind_name,
        wire_key=descriptor.effective_wire_key,
        include_on_write=descriptor.include_on_write,
        has_default=descriptor.has_default,
        enum_type=enum_type.__name__ if enum_type is not None else None,
        enum_values=[str(member.value) for member in enum_type] if enum_type else [],
        nested_type=nested_type.__qualname__ if nested_type is not None else None,
        strategy=(
            descriptor.strategy.value if isinstance(descriptor, NestedField) else None
        ),
    )


def schema_to_dto(schema: Schema) -> SchemaDTO:
    return SchemaDTO(
        record_type=f"{schema.record_type.__module__}:{schema.record_type.__qualname__}",
        fields=[field_to_dto(descriptor) for descriptor in schema.descriptors],
    )

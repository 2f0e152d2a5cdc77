"""Resource schemas: which fields a record shape has and which are required."""

from dataclasses import dataclass
from enum import Enum


class FieldKind(str, Enum):
    """Scalar kinds a record field can hold."""

    STRING = "string"
    NUMBER = "number"
    INTEGER = "integer"


@dataclass(frozen=True)
class FieldSpec:
    """One field of a record shape.

    Attributes:
        name: Field name on the wire
        kind: Scalar kind the value is coerced to
        required: Whether Create must receive it
    """

    name: str
    kind: FieldKind
    required: bool = False


@dataclass(frozen=True)
class ResourceSchema:
    """Field set of one resource collection.

    Attributes:
        collection: Plural path segment (``products``)
        label: Singular display name used in messages (``Product``)
        fields: Ordered field specs; order is the JSON output order
    """

    collection: str
    label: str
    fields: tuple[FieldSpec, ...]

    @property
    def field_names(self) -> tuple[str, ...]:
        return tuple(f.name for f in self.fields)

    @property
    def required_fields(self) -> tuple[str, ...]:
        return tuple(f.name for f in self.fields if f.required)


PRODUCT_SCHEMA = ResourceSchema(
    collection="products",
    label="Product",
    fields=(
        FieldSpec("name", FieldKind.STRING, required=True),
        FieldSpec("category", FieldKind.STRING),
        FieldSpec("description", FieldKind.STRING),
        FieldSpec("price", FieldKind.NUMBER, required=True),
        FieldSpec("stock", FieldKind.INTEGER),
    ),
)

USER_SCHEMA = ResourceSchema(
    collection="users",
    label="User",
    fields=(
        FieldSpec("name", FieldKind.STRING, required=True),
        FieldSpec("age", FieldKind.INTEGER, required=True),
    ),
)

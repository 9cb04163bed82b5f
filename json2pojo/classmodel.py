"""
The abstract class model produced by schema inference.

A ClassRegistry holds ClassDefinitions in creation order. Each
ClassDefinition holds FieldDefinitions keyed by formatted field name, and
each FieldDefinition carries a TypeReference. Renderers consume this model;
it knows nothing about any target language.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Iterator, List, Optional


class TypeKind(Enum):
    """The closed set of semantic field types."""
    BOOLEAN = 'boolean'
    INTEGER = 'integer'
    FLOATING_POINT = 'float'
    STRING = 'string'
    LIST = 'list'
    CLASS = 'class'
    DEFERRED = 'deferred'
    OPAQUE = 'opaque'


@dataclass(frozen=True)
class TypeReference:
    """
    A semantic field type.

    `element` is set only for LIST, `class_name` only for CLASS.
    """
    kind: TypeKind
    element: Optional['TypeReference'] = None
    class_name: Optional[str] = None

    def is_deferred(self) -> bool:
        """True if this type, or the innermost element of a list, is still deferred."""
        return self.innermost().kind == TypeKind.DEFERRED

    def is_list(self) -> bool:
        return self.kind == TypeKind.LIST

    def innermost(self) -> 'TypeReference':
        """Returns the element type at the bottom of any nesting of lists."""
        current = self
        while current.kind == TypeKind.LIST and current.element is not None:
            current = current.element
        return current

    def with_innermost(self, replacement: 'TypeReference') -> 'TypeReference':
        """Returns a copy of this type with the innermost element swapped out."""
        if self.kind == TypeKind.LIST and self.element is not None:
            return list_of(self.element.with_innermost(replacement))
        return replacement

    def describe(self) -> str:
        """Short human-readable form, e.g. 'List<Item>'."""
        if self.kind == TypeKind.LIST and self.element is not None:
            return f"List<{self.element.describe()}>"
        if self.kind == TypeKind.CLASS:
            return str(self.class_name)
        return self.kind.value

    def to_dict(self) -> Dict[str, Any]:
        """Converts the type into a JSON-serializable dictionary."""
        result: Dict[str, Any] = {'kind': self.kind.value}
        if self.kind == TypeKind.LIST and self.element is not None:
            result['items'] = self.element.to_dict()
        elif self.kind == TypeKind.CLASS:
            result['name'] = self.class_name
        return result


BOOLEAN = TypeReference(TypeKind.BOOLEAN)
INTEGER = TypeReference(TypeKind.INTEGER)
FLOATING_POINT = TypeReference(TypeKind.FLOATING_POINT)
STRING = TypeReference(TypeKind.STRING)
DEFERRED = TypeReference(TypeKind.DEFERRED)
OPAQUE = TypeReference(TypeKind.OPAQUE)


def list_of(element: TypeReference) -> TypeReference:
    """Constructs a list type with the given element type."""
    return TypeReference(TypeKind.LIST, element=element)


def class_ref(name: str) -> TypeReference:
    """Constructs a reference to a class in the registry."""
    return TypeReference(TypeKind.CLASS, class_name=name)


class FieldDefinition:
    """A field of a class, as inferred from one JSON property."""

    def __init__(self, name: str, property_name: str, type_ref: TypeReference,
                 string_is_number: bool = False) -> None:
        self.name = name
        self.property_name = property_name
        self.type = type_ref
        self.string_is_number = string_is_number

    def __repr__(self) -> str:
        return f"FieldDefinition({self.name!r}, {self.property_name!r}, {self.type.describe()})"

    def to_dict(self) -> Dict[str, Any]:
        return {
            'name': self.name,
            'property_name': self.property_name,
            'type': self.type.to_dict(),
            'string_is_number': self.string_is_number,
        }


class ClassDefinition:
    """A class inferred from one or more JSON objects sharing a derived name."""

    def __init__(self, name: str) -> None:
        self.name = name
        self.fields: Dict[str, FieldDefinition] = {}

    def add_field(self, field: FieldDefinition) -> bool:
        """
        Adds a field unless one with the same formatted name already exists.

        Returns:
            bool: True if the field was added, False if an earlier field won.
        """
        if field.name in self.fields:
            return False
        self.fields[field.name] = field
        return True

    def sorted_fields(self) -> List[FieldDefinition]:
        """Returns the fields ordered by formatted name, case-sensitive."""
        return [self.fields[name] for name in sorted(self.fields)]

    def __repr__(self) -> str:
        return f"ClassDefinition({self.name!r}, {len(self.fields)} fields)"

    def to_dict(self) -> Dict[str, Any]:
        return {
            'name': self.name,
            'fields': [field.to_dict() for field in self.sorted_fields()],
        }


class ClassRegistry:
    """Class definitions of one generation run, keyed by class name in creation order."""

    def __init__(self) -> None:
        self.classes: Dict[str, ClassDefinition] = {}

    def get_or_create(self, name: str) -> ClassDefinition:
        if name not in self.classes:
            self.classes[name] = ClassDefinition(name)
        return self.classes[name]

    def get(self, name: str) -> Optional[ClassDefinition]:
        return self.classes.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self.classes

    def __iter__(self) -> Iterator[ClassDefinition]:
        return iter(self.classes.values())

    def __len__(self) -> int:
        return len(self.classes)

    def to_dict(self) -> Dict[str, Any]:
        """Converts the registry into a JSON-serializable dictionary."""
        return {'classes': [class_def.to_dict() for class_def in self]}

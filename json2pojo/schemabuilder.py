"""Builds a class registry from a parsed JSON document.

The builder walks the document depth-first. Child classes are created before
the parent field referring to them is classified, so every class reference
produced by the type resolver during the walk names an existing class.
Fields whose sample value was null or an empty array get a deferred type that
is resolved after the walk from the completed registry.
"""

import logging
from typing import Any

from json2pojo.classmodel import (OPAQUE, ClassDefinition, ClassRegistry, FieldDefinition,
                                  TypeKind, TypeReference, class_ref)
from json2pojo.common import format_class_name, format_field_name, singularize
from json2pojo.errors import InputError, ResolutionError
from json2pojo.typeresolver import classify

logger = logging.getLogger(__name__)


class SchemaBuilder:
    """Infers class definitions from a JSON document."""

    def __init__(self, use_field_prefix: bool = False) -> None:
        self.use_field_prefix = use_field_prefix
        self.registry = ClassRegistry()

    def build(self, root_value: Any, root_name: str) -> ClassRegistry:
        """
        Infers the class registry for a JSON document.

        Args:
            root_value: The parsed JSON document.
            root_name (str): The name of the root class.

        Returns:
            ClassRegistry: The resolved registry, root class first.

        Raises:
            InputError: The root value does not describe a class, or a property
                name cannot be turned into a field name.
            ResolutionError: A type reference survived deferred resolution.
        """
        self.registry = ClassRegistry()
        class_name = format_class_name(root_name)
        if not class_name:
            raise InputError(f"Cannot derive a class name from root name '{root_name}'")
        if isinstance(root_value, dict):
            self.parse_object(root_value, class_name)
        elif isinstance(root_value, list):
            self.parse_array(root_value, class_name)
        if class_name not in self.registry:
            raise InputError("Unrecognized root value; expected a JSON object or an array of objects",
                             context=type(root_value).__name__)

        self.resolve_deferred()
        self.validate()
        logger.info("Inferred %d classes for root %s", len(self.registry), class_name)
        return self.registry

    def parse_object(self, node: dict, class_name: str) -> None:
        """Creates or extends a class from a JSON object and all objects nested in it."""
        class_def = self.registry.get(class_name)
        if class_def is None:
            class_def = self.registry.get_or_create(class_name)
            logger.debug("Created class %s", class_name)

        for property_name, child in node.items():
            if isinstance(child, dict):
                self.parse_object(child, self.child_class_name(class_def, property_name, False))
            elif isinstance(child, list):
                self.parse_array(child, self.child_class_name(class_def, property_name, True))
            self.add_field(class_def, property_name, child)

    def child_class_name(self, class_def: ClassDefinition, property_name: str, is_array: bool) -> str:
        """Derives the class name for an object or array value; arrays use the singular form."""
        class_name = format_class_name(singularize(property_name) if is_array else property_name)
        if not class_name:
            raise InputError(f"Cannot derive a class name from property '{property_name}'",
                             context=class_def.name)
        return class_name

    def parse_array(self, node: list, class_name: str) -> None:
        """
        Recurses into the object and array elements of a JSON array.

        Arrays do not introduce a naming level: every object element, at any
        array nesting depth, extends the same class. Scalar elements need no
        recursion.
        """
        for element in node:
            if isinstance(element, dict):
                self.parse_object(element, class_name)
            elif isinstance(element, list):
                self.parse_array(element, class_name)

    def add_field(self, class_def: ClassDefinition, property_name: str, value: Any) -> None:
        """Classifies a property value and merges the field into the class; first seen wins."""
        field_name = format_field_name(property_name, self.use_field_prefix)
        if not field_name or (self.use_field_prefix and not field_name[1:]):
            raise InputError(f"Cannot derive a field name from property '{property_name}'",
                             context=class_def.name)
        classification = classify(value, property_name)
        if classification is None:
            logger.warning("Skipping property %s of %s: unrecognized value kind %s",
                           property_name, class_def.name, type(value).__name__)
            return
        type_ref, string_is_number = classification
        field = FieldDefinition(field_name, property_name, type_ref, string_is_number)
        if class_def.add_field(field):
            logger.debug("Added %s/%s to %s", property_name, type_ref.describe(), class_def.name)

    def resolve_deferred(self) -> None:
        """
        Binds every deferred field type to a registered class derived from the
        property name, falling back to an opaque type.

        A scalar field looks up the class named after the property; a list
        field, at any nesting depth, looks up the singularized name.
        """
        for class_def in self.registry:
            for field in class_def.fields.values():
                if not field.type.is_deferred():
                    continue
                if field.type.is_list():
                    candidate = format_class_name(singularize(field.property_name))
                else:
                    candidate = format_class_name(field.property_name)
                resolved: TypeReference = class_ref(candidate) if candidate in self.registry else OPAQUE
                field.type = field.type.with_innermost(resolved)
                logger.debug("Resolved deferred field %s.%s to %s",
                             class_def.name, field.name, field.type.describe())

    def validate(self) -> None:
        """Checks that no deferred type remains and every class reference is registered."""
        for class_def in self.registry:
            for field in class_def.fields.values():
                innermost = field.type.innermost()
                if innermost.kind == TypeKind.DEFERRED or (
                        innermost.kind == TypeKind.CLASS and innermost.class_name not in self.registry):
                    raise ResolutionError(class_def.name, field.name, field.type.describe())


def build_class_registry(root_value: Any, root_name: str, use_field_prefix: bool = False) -> ClassRegistry:
    """Convenience wrapper running a fresh SchemaBuilder over a parsed document."""
    return SchemaBuilder(use_field_prefix=use_field_prefix).build(root_value, root_name)

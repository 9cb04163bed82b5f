# pylint: disable=line-too-long

""" Generates Java classes from an inferred class model """

import json
import logging
import os
import re
from typing import Callable, Dict, List, Optional

from json2pojo.classmodel import ClassDefinition, ClassRegistry, FieldDefinition, TypeKind, TypeReference
from json2pojo.common import camel, format_class_name, render_template, sanitize_property_name

logger = logging.getLogger(__name__)

GENERATED_IMPORT = 'javax.annotation.Generated'
LIST_IMPORT = 'java.util.List'
SERIALIZED_NAME_IMPORT = 'com.google.gson.annotations.SerializedName'
FINAL_OBJECT_GETTERS = ['getClass']


def is_java_reserved_word(word: str) -> bool:
    """Checks if a word is a Java reserved word"""
    reserved_words = [
        'abstract', 'assert', 'boolean', 'break', 'byte', 'case', 'catch', 'char', 'class', 'const',
        'continue', 'default', 'do', 'double', 'else', 'enum', 'extends', 'final', 'finally', 'float',
        'for', 'goto', 'if', 'implements', 'import', 'instanceof', 'int', 'interface', 'long', 'native',
        'new', 'package', 'private', 'protected', 'public', 'return', 'short', 'static', 'strictfp',
        'super', 'switch', 'synchronized', 'this', 'throw', 'throws', 'transient', 'try', 'void', 'volatile',
        'while', 'true', 'false', 'null', 'record',
    ]
    return word in reserved_words


def safe_identifier(name: str, fallback: str = 'value') -> str:
    """Makes an identifier usable in Java source.

    Handles:
    - Empty names (use the fallback)
    - Numeric prefixes (prepend _)
    - Reserved words (prepend _)
    """
    if not name:
        return fallback
    if re.match(r'^[0-9]', name) or is_java_reserved_word(name):
        return '_' + name
    return name


class PojoToJava:
    """Converts an inferred class model to Java classes with accessors and optional builders"""

    def __init__(self, package_name: str = '') -> None:
        self.package_name = package_name
        self.output_dir = os.getcwd()
        self.generate_builders = False
        self.use_double_value_getters = False
        self.serialized_name_annotation = True
        self.generated_files: List[str] = []

    def map_type_to_java(self, type_ref: TypeReference) -> str:
        """Maps a semantic type to a Java type"""
        mapping = {
            TypeKind.BOOLEAN: 'Boolean',
            TypeKind.INTEGER: 'Long',
            TypeKind.FLOATING_POINT: 'Double',
            TypeKind.STRING: 'String',
            TypeKind.OPAQUE: 'Object',
        }
        if type_ref.kind == TypeKind.LIST and type_ref.element is not None:
            return f"List<{self.map_type_to_java(type_ref.element)}>"
        if type_ref.kind == TypeKind.CLASS and type_ref.class_name:
            return self.java_class_name(type_ref.class_name)
        if type_ref.kind in mapping:
            return mapping[type_ref.kind]
        raise ValueError(f"Cannot map unresolved type {type_ref.describe()} to Java")

    def java_class_name(self, class_name: str) -> str:
        """Makes a class name usable as a Java type and file name"""
        return safe_identifier(class_name, fallback='Anonymous')

    def getter_name(self, accessor: str) -> str:
        """Names the getter, avoiding the final methods of java.lang.Object"""
        getter = 'get' + accessor
        return 'get_' + accessor if getter in FINAL_OBJECT_GETTERS else getter

    def field_context(self, field: FieldDefinition) -> Dict[str, object]:
        """Collects everything the class template needs to emit one field"""
        java_name = safe_identifier(field.name)
        accessor = format_class_name(field.property_name)
        return {
            'name': java_name,
            'property_name': field.property_name,
            'property_literal': json.dumps(field.property_name),
            'java_type': self.map_type_to_java(field.type),
            'accessor': accessor,
            'getter': self.getter_name(accessor),
            'param': safe_identifier(sanitize_property_name(field.property_name), fallback=java_name),
            'serialized_name': self.serialized_name_annotation and java_name != field.property_name,
            'double_getter': self.use_double_value_getters and field.string_is_number and field.type.kind == TypeKind.STRING,
        }

    def get_imports(self, fields: List[Dict[str, object]]) -> List[str]:
        """Returns the imports a class needs, in source order"""
        imports = []
        if any(field['serialized_name'] for field in fields):
            imports.append(SERIALIZED_NAME_IMPORT)
        if any(str(field['java_type']).startswith('List<') for field in fields):
            imports.append(LIST_IMPORT)
        imports.append(GENERATED_IMPORT)
        return imports

    def generate_class(self, class_def: ClassDefinition) -> str:
        """Writes the Java source file for one class and returns its path"""
        class_name = self.java_class_name(class_def.name)
        fields = [self.field_context(field) for field in class_def.sorted_fields()]
        context = {
            'package_name': self.package_name,
            'class_name': class_name,
            'fields': fields,
            'imports': self.get_imports(fields),
            'generate_builders': self.generate_builders,
            'instance_name': safe_identifier(camel(class_name), fallback='instance'),
        }
        package_dir = os.path.join(self.output_dir, *[p for p in self.package_name.split('.') if p])
        file_name = os.path.join(package_dir, f"{class_name}.java")
        render_template('pojotojava/pojo_class.java.jinja', file_name, **context)
        logger.info("Generated class: %s", class_name)
        return file_name

    def convert_registry(self, registry: ClassRegistry, output_dir: str,
                         progress: Optional[Callable[[float], None]] = None) -> List[str]:
        """Generates one Java file per class in the registry

        Args:
            registry (ClassRegistry): The resolved class model
            output_dir (str): Root directory for the generated sources
            progress: Called with the completed fraction after each class

        Returns:
            List[str]: Paths of the generated files
        """
        if not os.path.exists(output_dir):
            os.makedirs(output_dir, exist_ok=True)
        self.output_dir = output_dir
        self.generated_files = []
        total = len(registry)
        for i, class_def in enumerate(registry, start=1):
            self.generated_files.append(self.generate_class(class_def))
            if progress:
                progress(i / total)
        return self.generated_files


def convert_class_model_to_java(registry: ClassRegistry, java_dir: str, package_name: str = '',
                                generate_builders: bool = False, use_double_value_getters: bool = False,
                                serialized_name_annotation: bool = True,
                                progress: Optional[Callable[[float], None]] = None) -> List[str]:
    """Converts an inferred class model to Java classes

    Args:
        registry (ClassRegistry): The resolved class model
        java_dir (str): Output directory
        package_name (str): Java package of the generated classes
        generate_builders (bool): Omit setters and generate a nested Builder per class
        use_double_value_getters (bool): Add a double getter for numeric-looking string fields
        serialized_name_annotation (bool): Annotate renamed fields with @SerializedName
        progress: Called with the completed fraction after each class
    """
    pojotojava = PojoToJava(package_name)
    pojotojava.generate_builders = generate_builders
    pojotojava.use_double_value_getters = use_double_value_getters
    pojotojava.serialized_name_annotation = serialized_name_annotation
    return pojotojava.convert_registry(registry, java_dir, progress)

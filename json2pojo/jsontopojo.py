"""Infers a class model from example JSON and renders it.

This module provides:
- j2m: Infer the language-neutral class model and write it as JSON
- j2java: Infer the class model and generate Java classes from it
"""

import json
import logging
import os
from typing import Callable, Optional

from json2pojo.classmodel import ClassRegistry
from json2pojo.common import is_valid_class_name
from json2pojo.errors import InputError, Json2PojoError, UnexpectedError
from json2pojo.pojotojava import convert_class_model_to_java
from json2pojo.schemabuilder import SchemaBuilder

logger = logging.getLogger(__name__)

DEFAULT_ROOT_NAME = 'Example'


def infer_class_model(json_text: str, root_name: str = DEFAULT_ROOT_NAME,
                      use_field_prefix: bool = False) -> ClassRegistry:
    """Infers the class model for a JSON text.

    Args:
        json_text: The example JSON document
        root_name: Name of the root class; must match [A-Za-z][A-Za-z0-9]*
        use_field_prefix: Prefix field names with 'm' (e.g. 'count' -> 'mCount')

    Returns:
        The resolved class registry

    Raises:
        InputError: The root name or the JSON text is invalid
        ResolutionError: A type reference could not be resolved
        UnexpectedError: Any other failure while walking the document
    """
    if not is_valid_class_name(root_name):
        raise InputError(f"Invalid root class name '{root_name}'; expected [A-Za-z][A-Za-z0-9]*")

    try:
        root_value = json.loads(json_text)
    except json.JSONDecodeError as e:
        raise InputError(f"Invalid JSON at line {e.lineno}, column {e.colno}: {e.msg}", cause=e) from e
    except RecursionError as e:
        raise UnexpectedError("JSON document is nested too deeply", cause=e) from e

    builder = SchemaBuilder(use_field_prefix=use_field_prefix)
    try:
        return builder.build(root_value, root_name)
    except Json2PojoError:
        raise
    except Exception as e:
        raise UnexpectedError(f"Class model inference failed: {e}", context=root_name, cause=e) from e


def _read_json_text(json_file_path: str) -> str:
    with open(json_file_path, 'r', encoding='utf-8') as f:
        return f.read()


def convert_json_to_class_model(
    json_file_path: str,
    model_file_path: Optional[str] = None,
    root_name: str = DEFAULT_ROOT_NAME,
    use_field_prefix: bool = False
) -> str:
    """Infers the class model from a JSON file and writes it as JSON.

    Args:
        json_file_path: Path of the example JSON document
        model_file_path: Output path for the class model; if empty, nothing is written
        root_name: Name of the root class
        use_field_prefix: Prefix field names with 'm'

    Returns:
        The class model as a JSON string
    """
    registry = infer_class_model(_read_json_text(json_file_path), root_name, use_field_prefix)
    model_json = json.dumps(registry.to_dict(), indent=2)

    if model_file_path:
        output_dir = os.path.dirname(model_file_path)
        if output_dir and not os.path.exists(output_dir):
            os.makedirs(output_dir)
        logger.info("Writing class model to %s", model_file_path)
        with open(model_file_path, 'w', encoding='utf-8') as f:
            f.write(model_json)
    return model_json


def convert_json_to_java(
    json_file_path: str,
    java_dir: str,
    root_name: str = DEFAULT_ROOT_NAME,
    package_name: str = '',
    generate_builders: bool = False,
    use_field_prefix: bool = False,
    use_double_value_getters: bool = False,
    serialized_name_annotation: bool = True,
    progress: Optional[Callable[[float], None]] = None
) -> None:
    """Infers classes from a JSON file and generates Java sources for them.

    Args:
        json_file_path: Path of the example JSON document
        java_dir: Output directory; sources go into the package subdirectory
        root_name: Name of the root class
        package_name: Java package; defaults to the lowercased root name
        generate_builders: Omit setters and generate a nested Builder per class
        use_field_prefix: Prefix field names with 'm'
        use_double_value_getters: Add a double getter for numeric-looking string fields
        serialized_name_annotation: Annotate fields whose name differs from the JSON property
        progress: Called with the completed fraction after each generated class
    """
    registry = infer_class_model(_read_json_text(json_file_path), root_name, use_field_prefix)
    if not package_name:
        package_name = root_name.lower()
    files = convert_class_model_to_java(registry, java_dir, package_name, generate_builders,
                                        use_double_value_getters, serialized_name_annotation, progress)
    logger.info("Wrote %d Java classes to %s", len(files), java_dir)

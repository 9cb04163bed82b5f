""" Classifies single JSON values into semantic field types """

import logging
import re
from typing import Any, Optional, Tuple

from json2pojo.classmodel import (BOOLEAN, DEFERRED, FLOATING_POINT, INTEGER, STRING,
                                  TypeReference, class_ref, list_of)
from json2pojo.common import format_class_name, singularize

logger = logging.getLogger(__name__)

Classification = Tuple[TypeReference, bool]

# Text accepted by Java's Double.valueOf, which the generated value getters call.
JAVA_DOUBLE_PATTERN = re.compile(r'''
    [\x00-\x20]*
    [+-]?
    (?:
        NaN
      | Infinity
      | (?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?[fFdD]?
      | 0[xX](?:[0-9a-fA-F]+\.?|[0-9a-fA-F]*\.[0-9a-fA-F]+)[pP][+-]?[0-9]+[fFdD]?
    )
    [\x00-\x20]*
''', re.VERBOSE)


def looks_numeric(text: str) -> bool:
    """Checks whether a string value parses as a Java double."""
    return JAVA_DOUBLE_PATTERN.fullmatch(text) is not None


def classify(value: Any, property_name: str) -> Optional[Classification]:
    """
    Determines the type of a JSON value found under the given property.

    Integers and floats are told apart by the parsed literal: the JSON parser
    yields a float for any literal with a fraction or an exponent. Arrays are
    typed by their first element only.

    Args:
        value: A value produced by the JSON parser.
        property_name (str): The raw JSON property name holding the value.

    Returns:
        A (type, string_is_number) tuple, or None if the value is of an
        unrecognized kind and the field must be skipped.
    """
    if isinstance(value, bool):
        return BOOLEAN, False
    if isinstance(value, int):
        return INTEGER, False
    if isinstance(value, float):
        return FLOATING_POINT, False
    if isinstance(value, str):
        is_number = looks_numeric(value)
        if is_number:
            logger.debug("Saw numeric text: %s", value)
        return STRING, is_number
    if value is None:
        return DEFERRED, False
    if isinstance(value, dict):
        return class_ref(format_class_name(property_name)), False
    if isinstance(value, list):
        element_type = classify_array_element(value, property_name)
        if element_type is None:
            return None
        return list_of(element_type), False
    return None


def classify_array_element(array: list, property_name: str) -> Optional[TypeReference]:
    """Determines the element type of an array from its first element."""
    if not array:
        return DEFERRED
    first = array[0]
    if isinstance(first, dict):
        return class_ref(format_class_name(singularize(property_name)))
    if isinstance(first, list):
        nested = classify(first, property_name)
        return nested[0] if nested else None
    if isinstance(first, str):
        return STRING
    if isinstance(first, bool):
        return BOOLEAN
    if isinstance(first, int):
        return INTEGER
    if isinstance(first, float):
        return FLOATING_POINT
    if first is None:
        return DEFERRED
    return None

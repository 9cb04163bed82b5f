"""
Common utility functions for json2pojo.
"""

# pylint: disable=line-too-long

import os
import re

import inflection
import jinja2


IDENTIFIER_START_EXTRAS = '_$'
FIELD_PREFIX = 'm'
CLASS_NAME_PATTERN = re.compile(r'^[A-Za-z][A-Za-z0-9]*$')


def is_valid_class_name(name: str) -> bool:
    """Checks whether a requested root class name is acceptable."""
    return bool(name) and CLASS_NAME_PATTERN.match(name) is not None


def sanitize_property_name(property_name: str) -> str:
    """
    Turn a JSON property name into an identifier by dropping characters that
    are not letters or digits and upper-casing the first letter that follows
    a dropped character.

    The first character is kept only if it may start an identifier. Digits do
    not consume a pending upper-case, so 'a_1b' becomes 'a1B'.

    Args:
        property_name (str): The raw JSON property name.

    Returns:
        str: The sanitized identifier. May be empty if nothing survives.
    """
    if not property_name:
        return ''
    formatted = []
    uppercase_next = False
    first = property_name[0]
    if first.isalpha() or first in IDENTIFIER_START_EXTRAS:
        formatted.append(first)
    for c in property_name[1:]:
        if c.isalpha():
            if uppercase_next:
                formatted.append(c.upper())
                uppercase_next = False
            else:
                formatted.append(c)
        elif c.isdigit():
            formatted.append(c)
        else:
            uppercase_next = True
    return ''.join(formatted)


def capitalize(string: str) -> str:
    """Upper-cases the first character and leaves the rest untouched."""
    if not string:
        return string
    return string[0].upper() + string[1:]


def format_class_name(property_name: str) -> str:
    """Formats a property name as a class name, e.g. 'user-id' -> 'UserId'."""
    return capitalize(sanitize_property_name(property_name))


def format_field_name(property_name: str, use_field_prefix: bool = False) -> str:
    """
    Formats a property name as a field name.

    Args:
        property_name (str): The raw JSON property name.
        use_field_prefix (bool): Prefix the field with 'm', e.g. 'count' -> 'mCount'.

    Returns:
        str: The formatted field name.
    """
    field_name = sanitize_property_name(property_name)
    if use_field_prefix:
        field_name = FIELD_PREFIX + capitalize(field_name)
    return field_name


def singularize(word: str) -> str:
    """Singularizes an English noun, e.g. 'categories' -> 'category'. Words that would vanish are kept."""
    return inflection.singularize(word) or word


def camel(string):
    """
    Convert a string to camelCase from snake_case, camelCase, or PascalCase.

    Args:
        string (str): The string to convert.

    Returns:
        str: The string in camelCase.
    """
    if not string or len(string) == 0:
        return string
    words = []
    if '_' in string:
        # snake_case
        words = re.split(r'_', string)
    elif string[0].isupper():
        # PascalCase
        words = re.findall(r'[A-Z][a-z0-9_]*\.?', string)
    else:
        # camelCase
        words = re.findall(r'[a-z0-9]+\.?|[A-Z][a-z0-9_]*\.?', string)
    if not words:
        return string
    result = words[0].lower() + ''.join(word.capitalize()
                                        for word in words[1:])
    return result


def process_template(file_path: str, **kvargs) -> str:
    """
    Process a file as a Jinja2 template with the given object as input.

    Args:
        file_path (str): The path to the template, relative to the package.

    Returns:
        str: The processed template as a string.
    """
    file_dir = os.path.dirname(__file__)
    template_loader = jinja2.FileSystemLoader(searchpath=file_dir)
    template_env = jinja2.Environment(loader=template_loader, keep_trailing_newline=True,
                                      trim_blocks=True, lstrip_blocks=True)
    template_env.filters['camel'] = camel

    template = template_env.get_template(file_path)
    return template.render(**kvargs)


def render_template(template: str, output: str, **kvargs):
    """
    Render a template and write it to a file

    Args:
        template (str): The template to render.
        output (str): The output file path.
        **kvargs: The keyword arguments to pass to the template.

    Returns:
        None
    """
    out = process_template(template, **kvargs)
    os.makedirs(os.path.dirname(output), exist_ok=True)
    with open(output, 'w', encoding='utf-8') as f:
        f.write(out)

"""
Exceptions raised by json2pojo.

Every failure during class-model inference surfaces as exactly one
Json2PojoError subclass. No partial class model is returned alongside it.
"""

from typing import Optional


class Json2PojoError(Exception):
    """
    Base exception for failed class-model inference.

    Attributes:
        message: Human-readable error description
        context: Optional context about where the error occurred
        cause: Optional underlying exception that caused this error
    """

    def __init__(self, message: str, context: Optional[str] = None,
                 cause: Optional[Exception] = None) -> None:
        self.message = message
        self.context = context
        self.cause = cause
        full_message = message
        if context:
            full_message = f"{message} (context: {context})"
        super().__init__(full_message)


class InputError(Json2PojoError):
    """
    Raised when the input cannot be processed: the JSON text is malformed,
    the root class name is not an identifier, the root value is not an
    object, or a property name cannot be turned into an identifier.
    """


class ResolutionError(Json2PojoError):
    """Raised when a type reference is still unresolved after the resolution pass."""

    def __init__(self, class_name: str, field_name: str, type_description: str) -> None:
        self.class_name = class_name
        self.field_name = field_name
        super().__init__(f"Unresolved type {type_description} for field '{field_name}'",
                         context=class_name)


class UnexpectedError(Json2PojoError):
    """Raised for any other failure during the document walk."""

from collections.abc import Iterable
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from asyncapi_bindings.validation import BindingIssue


class BindingsException(Exception):  # noqa: N818
    """Basic asyncapi-bindings exception class."""


class UnknownBindingError(BindingsException, KeyError):
    """Raised when a key is not declared by the binding model it is used with."""

    def __init__(self, key: str, owner: str) -> None:
        self.key = key
        self.owner = owner
        super().__init__(key)

    def __str__(self) -> str:
        return f"Unknown key `{self.key}` for {self.owner}"


class BindingTypeError(BindingsException, TypeError):
    """Raised when a value is not the binding variant expected at its place."""


class BindingDecodeError(BindingsException, ValueError):
    """Raised when a serialized bindings object can not be decoded."""


class BindingValidationError(BindingsException, ValueError):
    """Raised by the opt-in validation pass when documented constraints are broken."""

    def __init__(self, issues: Iterable["BindingIssue"]) -> None:
        self.issues = list(issues)
        super().__init__(self.issues)

    def __str__(self) -> str:
        return "\n".join(str(issue) for issue in self.issues)

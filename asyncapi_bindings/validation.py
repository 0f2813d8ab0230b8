"""Opt-in checks of the constraints the bindings specification documents.

Binding models accept any value of the declared types. This pass reports
values breaking the documented constraints without changing them.
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from asyncapi_bindings._internal.logger import logger
from asyncapi_bindings.exceptions import BindingTypeError, BindingValidationError
from asyncapi_bindings.schema import Binding, BindingsMapping
from asyncapi_bindings.schema.bindings import WebSocketsChannelBinding

WS_METHODS = frozenset(("GET", "POST"))


@dataclass(frozen=True)
class BindingIssue:
    path: str
    message: str

    def __str__(self) -> str:
        return f"{self.path}: {self.message}"


def _check_schema_object(value: Any, path: str) -> list[BindingIssue]:
    if value is None or "$ref" in value:
        # references are resolved by the document, not here
        return []

    issues = []
    if value.get("type") != "object":
        issues.append(BindingIssue(path, "schema MUST be of type `object`"))
    if "properties" not in value:
        issues.append(BindingIssue(path, "schema MUST have a `properties` key"))
    return issues


def _check_ws_channel(binding: WebSocketsChannelBinding, path: str) -> list[BindingIssue]:
    issues = []

    if binding.method is not None and binding.method not in WS_METHODS:
        issues.append(
            BindingIssue(
                f"{path}.method",
                f"must be one of {', '.join(sorted(WS_METHODS))}, got {binding.method!r}",
            )
        )

    issues.extend(_check_schema_object(binding.query, f"{path}.query"))
    issues.extend(_check_schema_object(binding.headers, f"{path}.headers"))
    return issues


CHECKERS: dict[type[Binding], Callable[[Any, str], list[BindingIssue]]] = {
    WebSocketsChannelBinding: _check_ws_channel,
}


def collect_issues(target: BindingsMapping | Binding) -> list[BindingIssue]:
    """Collect documented constraint violations of a binding or bindings mapping."""
    if isinstance(target, BindingsMapping):
        bindings = [
            (f"{target.attachment_point.value}.{protocol}", binding)
            for protocol, binding in target.items()
            if isinstance(binding, Binding)
        ]

    elif isinstance(target, Binding):
        bindings = [(f"{target.attachment_point.value}.{target.protocol}", target)]

    else:
        msg = f"Can't validate `{type(target).__name__}`, expected bindings"
        raise BindingTypeError(msg)

    issues = []
    for path, binding in bindings:
        if checker := CHECKERS.get(type(binding)):
            issues.extend(checker(binding, path))

    return issues


def validate_bindings(target: BindingsMapping | Binding) -> None:
    """Raise `BindingValidationError` listing every issue found."""
    if issues := collect_issues(target):
        logger.debug("Found %d binding issue(s)", len(issues))
        raise BindingValidationError(issues)

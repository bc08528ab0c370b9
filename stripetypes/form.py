"""Turning request parameter records into JSON-ready mappings and form bodies."""

from __future__ import annotations

import dataclasses
import enum
from collections.abc import Iterator, Mapping
from typing import Any
from urllib.parse import quote

__all__ = ["FormParams", "encode_form"]


def _to_wire(value: Any) -> Any:
    """Convert a parameter value into plain JSON-ready data."""
    if isinstance(value, FormParams):
        return value.to_dict()
    if isinstance(value, enum.Enum):
        return value.value
    if isinstance(value, Mapping):
        return {str(key): _to_wire(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_to_wire(item) for item in value]
    to_json = getattr(value, "to_json", None)
    if callable(to_json):
        return to_json()
    to_dict = getattr(value, "to_dict", None)
    if callable(to_dict):
        return to_dict()
    return value


def _scalar(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _flatten(key: str, value: Any) -> Iterator[tuple[str, str]]:
    if value is None:
        return
    if isinstance(value, Mapping):
        for sub_key, item in value.items():
            yield from _flatten(f"{key}[{sub_key}]", item)
    elif isinstance(value, (list, tuple)):
        for index, item in enumerate(value):
            yield from _flatten(f"{key}[{index}]", item)
    else:
        yield key, _scalar(value)


def encode_form(data: Mapping[str, Any]) -> str:
    """Encode a mapping as a form body, nesting keys with brackets.

    Unset (``None``) values and empty lists produce nothing; list items are
    keyed by their index and booleans are written as ``true``/``false``.
    """
    if not isinstance(data, Mapping):
        raise TypeError(f"form data must be a mapping, not {type(data).__name__}")
    pairs = (
        pair
        for key, value in data.items()
        for pair in _flatten(str(key), _to_wire(value))
    )
    return "&".join(
        f"{quote(key, safe='[]')}={quote(value, safe='')}" for key, value in pairs
    )


class FormParams:
    """Base for dataclass parameter records sent in requests.

    Fields that are ``None`` are left out. A field's ``metadata`` may carry
    ``"wire"`` to rename it on the wire and ``"omit_empty"`` to leave it out
    when empty.
    """

    def to_dict(self) -> dict[str, Any]:
        """The parameters as a JSON-ready mapping."""
        if not dataclasses.is_dataclass(self):
            raise TypeError(f"{type(self).__name__} is not a dataclass")
        out: dict[str, Any] = {}
        for spec in dataclasses.fields(self):
            value = getattr(self, spec.name)
            if value is None:
                continue
            if spec.metadata.get("omit_empty") and not value:
                continue
            out[spec.metadata.get("wire", spec.name)] = _to_wire(value)
        return out

    def to_form(self) -> str:
        """The parameters encoded as a form body."""
        return encode_form(self.to_dict())
# h1client — HackerOne API client library
# Copyright (C) 2026 h1client Contributors
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program. If not, see <https://www.gnu.org/licenses/>.

"""
h1client - JSON:API Envelope Decoding

HackerOne wraps resources as

    {"data": {"id": ..., "type": ..., "attributes": {...},
              "relationships": {"<name>": {"data": [...] | {...}}}}}

but some endpoints (and nested objects) return the same fields flat.
The decoder accepts both shapes and produces one frozen model instance:

  1. fields found at the top level of the resource
  2. overlaid by fields found under "attributes"
  3. relationship fields filled only from relationships.<name>.data

Model classes are dataclasses whose fields all default to None.
Use attribute() / relationship() to declare wire names that differ
from the Python field name.
"""

import dataclasses
import json
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Optional, TypeVar, Union, get_args, get_origin, get_type_hints

from .errors import DecodeError


T = TypeVar("T")

_NoneType = type(None)


# ─────────────────────────────────────────────────────────────────────
#  Field declarations
# ─────────────────────────────────────────────────────────────────────

def attribute(wire_name: str):
    """Declare an attribute whose JSON key differs from the field name."""
    return field(default=None, metadata={"wire_name": wire_name})


def relationship(name: Optional[str] = None):
    """
    Declare a field populated from relationships.<name>.data.

    The name defaults to the field name.
    """
    return field(default=None, metadata={"relationship": name or ""})


@dataclass(frozen=True)
class _FieldInfo:
    name: str
    wire_name: str
    annotation: Any
    is_relationship: bool


_field_cache: dict[type, list[_FieldInfo]] = {}


def _field_infos(cls: type) -> list[_FieldInfo]:
    infos = _field_cache.get(cls)
    if infos is not None:
        return infos

    hints = get_type_hints(cls)
    infos = []
    for f in dataclasses.fields(cls):
        if "relationship" in f.metadata:
            infos.append(_FieldInfo(
                name=f.name,
                wire_name=f.metadata["relationship"] or f.name,
                annotation=hints[f.name],
                is_relationship=True,
            ))
        else:
            infos.append(_FieldInfo(
                name=f.name,
                wire_name=f.metadata.get("wire_name", f.name),
                annotation=hints[f.name],
                is_relationship=False,
            ))
    _field_cache[cls] = infos
    return infos


# ─────────────────────────────────────────────────────────────────────
#  Parsing
# ─────────────────────────────────────────────────────────────────────

def load(raw: Union[bytes, str]) -> Any:
    """Parse a JSON body. Raises DecodeError on malformed input."""
    try:
        return json.loads(raw)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise DecodeError(f"Malformed JSON: {e}") from e


@dataclass(frozen=True)
class Document:
    """A parsed top-level response document."""
    data: Any = None
    links: dict = field(default_factory=dict)
    meta: dict = field(default_factory=dict)


def parse_document(raw: Union[bytes, str]) -> Document:
    """
    Parse a response body into a Document.

    A body without a top-level "data" key is treated as the data itself.
    """
    payload = load(raw)
    if isinstance(payload, dict) and "data" in payload:
        links = payload.get("links") or {}
        meta = payload.get("meta") or {}
        if not isinstance(links, dict) or not isinstance(meta, dict):
            raise DecodeError("Document 'links' and 'meta' must be objects")
        return Document(data=payload["data"], links=links, meta=meta)
    return Document(data=payload)


# ─────────────────────────────────────────────────────────────────────
#  Decoding
# ─────────────────────────────────────────────────────────────────────

def decode(cls: type[T], raw: Union[bytes, str]) -> T:
    """Decode a single resource (document, envelope or flat object)."""
    return decode_resource(cls, parse_document(raw).data)


def decode_list(cls: type[T], raw: Union[bytes, str]) -> list[T]:
    """Decode a list of resources ({"data": [...]} or a bare array)."""
    return decode_resources(cls, parse_document(raw).data)


def decode_resources(cls: type[T], items: Any) -> list[T]:
    if not isinstance(items, list):
        raise DecodeError(
            f"Expected a list of {cls.__name__}, got {type(items).__name__}"
        )
    return [decode_resource(cls, item) for item in items]


def decode_resource(cls: type[T], obj: Any) -> T:
    """Decode one parsed resource object into a model instance."""
    if not isinstance(obj, dict):
        raise DecodeError(
            f"Expected an object for {cls.__name__}, got {type(obj).__name__}"
        )

    expected_type = getattr(cls, "RESOURCE_TYPE", None)
    actual_type = obj.get("type")
    if expected_type and actual_type is not None and actual_type != expected_type:
        raise DecodeError(
            f"Expected resource type '{expected_type}', got '{actual_type}'"
        )

    attributes = obj.get("attributes")
    if attributes is None:
        attributes = {}
    elif not isinstance(attributes, dict):
        raise DecodeError(f"{cls.__name__}.attributes must be an object")

    relationships = obj.get("relationships")
    if relationships is None:
        relationships = {}
    elif not isinstance(relationships, dict):
        raise DecodeError(f"{cls.__name__}.relationships must be an object")

    values: dict[str, Any] = {}
    for info in _field_infos(cls):
        path = f"{cls.__name__}.{info.name}"
        if info.is_relationship:
            values[info.name] = _decode_relationship(
                relationships.get(info.wire_name), info.annotation, path,
            )
            continue

        # null counts as absent, so it never masks a top-level value
        raw_value = obj.get(info.wire_name)
        if attributes.get(info.wire_name) is not None:
            raw_value = attributes[info.wire_name]
        values[info.name] = _convert(raw_value, info.annotation, path)

    return cls(**values)


def _decode_relationship(rel: Any, annotation: Any, path: str) -> Any:
    if rel is None:
        return None
    if not isinstance(rel, dict):
        raise DecodeError(f"{path}: relationship must be an object")

    data = rel.get("data")
    if data is None:
        return None

    target = _unwrap_optional(annotation)
    if get_origin(target) is list:
        if not isinstance(data, list):
            raise DecodeError(f"{path}: expected a list in relationship data")
    elif isinstance(data, list):
        raise DecodeError(f"{path}: expected a single object in relationship data")
    return _convert(data, annotation, path)


def _unwrap_optional(annotation: Any) -> Any:
    if get_origin(annotation) is Union:
        args = [a for a in get_args(annotation) if a is not _NoneType]
        if len(args) == 1:
            return args[0]
    return annotation


def _convert(value: Any, annotation: Any, path: str) -> Any:
    if value is None:
        return None

    target = _unwrap_optional(annotation)
    origin = get_origin(target)

    if origin is list:
        if not isinstance(value, list):
            raise DecodeError(f"{path}: expected a list, got {type(value).__name__}")
        (item_type,) = get_args(target) or (Any,)
        return [_convert(item, item_type, f"{path}[{i}]") for i, item in enumerate(value)]

    if origin is dict or target is dict or target is Any:
        return value

    if dataclasses.is_dataclass(target):
        return decode_resource(target, value)

    if target is datetime:
        return _parse_timestamp(value, path)

    if target is bool:
        if isinstance(value, bool):
            return value
    elif target is int:
        if isinstance(value, int) and not isinstance(value, bool):
            return value
    elif target is float:
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return float(value)
    elif target is str:
        if isinstance(value, str):
            return value
    else:
        raise DecodeError(f"{path}: unsupported field type {target!r}")

    raise DecodeError(
        f"{path}: expected {target.__name__}, got {type(value).__name__}"
    )


def _parse_timestamp(value: Any, path: str) -> datetime:
    if not isinstance(value, str):
        raise DecodeError(f"{path}: expected an ISO-8601 timestamp string")
    text = value[:-1] + "+00:00" if value.endswith("Z") else value
    try:
        return datetime.fromisoformat(text)
    except ValueError as e:
        raise DecodeError(f"{path}: invalid timestamp '{value}'") from e


# ─────────────────────────────────────────────────────────────────────
#  Encoding (request bodies)
# ─────────────────────────────────────────────────────────────────────

def encode_resource(resource_type: str, attributes: dict, **extra: Any) -> dict:
    """
    Build a JSON:API request body.

    None-valued attributes are dropped. Extra keyword arguments are
    placed beside "data" at the top level.
    """
    body = {
        "data": {
            "type": resource_type,
            "attributes": {k: v for k, v in attributes.items() if v is not None},
        },
    }
    body.update(extra)
    return body

"""
Input payload sources.

This module provides the "node with named fields" abstraction consumed by
``ConfigurationRegistry.apply_external`` and helpers that build one from a
mapping or from YAML/JSON text.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Mapping, Union

import yaml

from studioconf.core.exceptions import PayloadError


class FieldSource(ABC):
    """
    Abstract untyped input exposing named fields.
    """

    @abstractmethod
    def has(self, name: str) -> bool:
        """Whether the payload carries a field called ``name``."""
        pass

    @abstractmethod
    def get(self, name: str) -> Any:
        """Raw value of field ``name``."""
        pass


class MappingFieldSource(FieldSource):
    """
    Field source backed by a mapping, e.g. a parsed JSON request body.
    """

    def __init__(self, data: Mapping[str, Any]):
        self._data = data

    def has(self, name: str) -> bool:
        return name in self._data

    def get(self, name: str) -> Any:
        return self._data[name]

    def __repr__(self):
        return f"MappingFieldSource(fields={list(self._data)!r})"


def as_field_source(payload: Any) -> FieldSource:
    """
    Adapt ``payload`` to a FieldSource.

    Accepts a FieldSource, a mapping, or any object with ``has`` and ``get``
    methods.

    Raises:
        PayloadError: If the payload exposes no named fields
    """
    if isinstance(payload, FieldSource):
        return payload
    if isinstance(payload, Mapping):
        return MappingFieldSource(payload)
    if callable(getattr(payload, 'has', None)) and callable(getattr(payload, 'get', None)):
        return payload
    raise PayloadError(f"expected a mapping of named fields, got {type(payload).__name__}")


def load_payload(text: str) -> MappingFieldSource:
    """
    Parse a YAML or JSON document into a field source.

    Raises:
        PayloadError: If the text does not parse or is not a mapping
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise PayloadError(f"payload is not valid YAML/JSON: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise PayloadError(f"payload must be a mapping, got {type(data).__name__}")
    return MappingFieldSource(data)


def load_payload_file(path: Union[str, Path]) -> MappingFieldSource:
    """Read and parse a YAML or JSON payload file."""
    with open(path, 'r') as f:
        return load_payload(f.read())

"""
Serialization boundary between handlers and the wire.

Handlers return plain records; a Serializer turns them into JSON bytes.
Two strategies are provided:

- ReflectionSerializer inspects values at response time and handles any type.
- PrecompiledSerializer builds a TypeAdapter per registered type up front and
  refuses anything it was not told about.
"""

import json
from typing import Any, Dict, Iterable, List

from pydantic import TypeAdapter
from pydantic_core import to_jsonable_python

from userbench.exceptions import SerializationError
from userbench.models import Address, BenchmarkResult, Company, Preferences, User


class Serializer:
    """Base serializer. Subclasses override ``dumps``."""

    name: str = "base"

    def dumps(self, value: Any, annotation: Any = None) -> bytes:
        raise NotImplementedError


class ReflectionSerializer(Serializer):
    name = "reflection"

    def dumps(self, value: Any, annotation: Any = None) -> bytes:
        data = to_jsonable_python(value, by_alias=True)
        return json.dumps(data, separators=(",", ":"), ensure_ascii=False).encode("utf-8")


class PrecompiledSerializer(Serializer):
    """
    Serializer with a closed set of types, resolved once at construction.

    Usage:
        serializer = PrecompiledSerializer([List[User], BenchmarkResult])
        body = serializer.dumps(users, List[User])
    """

    name = "precompiled"

    def __init__(self, types: Iterable[Any]) -> None:
        self._adapters: Dict[Any, TypeAdapter] = {tp: TypeAdapter(tp) for tp in types}

    @property
    def types(self) -> List[Any]:
        return list(self._adapters)

    def dumps(self, value: Any, annotation: Any = None) -> bytes:
        if annotation is None:
            annotation = type(value)
        try:
            adapter = self._adapters[annotation]
        except (KeyError, TypeError):
            raise SerializationError(f"No serializer registered for {annotation!r}") from None
        return adapter.dump_json(value, by_alias=True)


# Everything the minimal variant can put on the wire.
REGISTERED_TYPES = (
    List[User],
    User,
    Address,
    Company,
    Preferences,
    BenchmarkResult,
    Dict[str, str],
    List[str],
)


def default_precompiled() -> PrecompiledSerializer:
    return PrecompiledSerializer(REGISTERED_TYPES)

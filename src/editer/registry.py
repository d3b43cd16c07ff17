"""
--------------------------------------------------------------------------------
<editer project>
editer/registry.py

Maps container types to the EditableSequence adapter that drives them.

Lookup order for a container:
  1. EditableSequence instances are used as-is
  2. the first class in type(container).__mro__ with a registered adapter
  3. the first registered ABC/Protocol the container is an instance of
     (in registration order)

Module Author(s): Eric J. South
Dunlop Lab
--------------------------------------------------------------------------------
"""

from __future__ import annotations

from typing import Any, Dict, Type

from ._logging import get_logger
from .errors import AdapterError
from .sequence import EditableSequence

_LOG = get_logger(__name__)

_ADAPTER_REGISTRY: Dict[type, Type[EditableSequence]] = {}


def register_adapter(container_type: type, adapter_cls: Type[EditableSequence]) -> None:
    if container_type in _ADAPTER_REGISTRY:
        _LOG.warning(
            f"Adapter for '{container_type.__name__}' already registered; overriding."
        )
    _ADAPTER_REGISTRY[container_type] = adapter_cls


def unregister_adapter(container_type: type) -> None:
    _ADAPTER_REGISTRY.pop(container_type, None)


def get_adapter_cls(container: Any) -> Type[EditableSequence]:
    for klass in type(container).__mro__:
        if klass in _ADAPTER_REGISTRY:
            return _ADAPTER_REGISTRY[klass]
    for klass, adapter_cls in _ADAPTER_REGISTRY.items():
        if isinstance(container, klass):
            return adapter_cls
    raise AdapterError(
        f"No adapter registered for '{type(container).__name__}'. "
        "Register one with register_adapter() or pass an EditableSequence."
    )


def adapt(container: Any) -> EditableSequence:
    if isinstance(container, EditableSequence):
        return container
    return get_adapter_cls(container)(container)


def list_adapters() -> Dict[type, Type[EditableSequence]]:
    return dict(_ADAPTER_REGISTRY)

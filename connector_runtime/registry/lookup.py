"""
Registry Lookup — resolves resource definitions within a described unit.

Behavioral Contract:
- Pure reads over the supplied definitions; no side effects
- Iteration follows the unit's declaration order, so the first match wins
- An empty or missing collection is "no data", never an error
- A missing interface name is always an InvalidArgumentError
"""

import logging
from typing import Iterable, List, Optional, Set, TypeVar

from connector_runtime.errors import InvalidArgumentError, ResourceNotFoundError
from connector_runtime.models.properties import ConfiguredResource

logger = logging.getLogger(__name__)

R = TypeVar("R", bound=ConfiguredResource)


def _matches(entity: ConfiguredResource, interface_name: str, class_name: Optional[str]) -> bool:
    return entity.interface_name == interface_name and (
        class_name is None or class_name == entity.class_name
    )


def find_entity(
    entities: Optional[Iterable[R]],
    interface_name: Optional[str],
    class_name: Optional[str] = None,
) -> Optional[R]:
    """
    Find the first definition implementing `interface_name`.

    With `class_name` omitted any implementation class matches. Returns None
    when there are no definitions at all; raises ResourceNotFoundError when
    definitions exist but none matches.
    """
    if interface_name is None:
        raise InvalidArgumentError("Invalid arguments: interface name is required")

    candidates = list(entities or [])
    if not candidates:
        return None

    for entity in candidates:
        if _matches(entity, interface_name, class_name):
            return entity

    error = ResourceNotFoundError(interface_name, class_name)
    logger.debug("%s", error)
    raise error


def list_interface_names(entities: Optional[Iterable[ConfiguredResource]]) -> Optional[List[str]]:
    """One interface name per definition, in order. None when there is no data."""
    candidates = list(entities or [])
    if not candidates:
        return None
    return [e.interface_name for e in candidates]


def list_class_names(
    entities: Optional[Iterable[ConfiguredResource]],
    interface_name: str,
) -> Optional[Set[str]]:
    """Distinct implementation classes registered for an interface."""
    candidates = list(entities or [])
    if not candidates:
        return None
    return {
        e.class_name for e in candidates
        if e.interface_name == interface_name and e.class_name is not None
    }


def has_entity(
    entities: Optional[Iterable[ConfiguredResource]],
    interface_name: Optional[str],
    class_name: Optional[str],
) -> bool:
    """True iff a definition matches both interface and class exactly."""
    if interface_name is None or class_name is None:
        raise InvalidArgumentError("Invalid arguments: interface and class name are required")

    return any(
        e.interface_name == interface_name and e.class_name == class_name
        for e in (entities or [])
    )


def list_confidential_property_names(
    entities: Optional[Iterable[ConfiguredResource]],
    *key_fields: Optional[str],
) -> List[str]:
    """
    Names of the confidential properties of one definition.

    `key_fields` is (interface_name[, class_name]).
    """
    if not key_fields or key_fields[0] is None:
        raise InvalidArgumentError("interface name must be specified")

    interface_name = key_fields[0]
    class_name = key_fields[1] if len(key_fields) > 1 else None

    entity = find_entity(entities, interface_name, class_name)
    if entity is None:
        return []
    return entity.confidential_property_names()

"""
Property Merger — combines declared values with introspected bean defaults.

Precedence per key: declared value, then introspected default, then "".
The key universe is the union of both inputs; nothing else is added.
"""

from typing import Mapping, Optional

from connector_runtime.models.properties import ConfiguredResource, PropertyBag
from connector_runtime.properties.introspection import PropertyIntrospector


def merge_properties(
    declared: Mapping[str, Optional[str]],
    introspected: Mapping[str, Optional[str]],
) -> PropertyBag:
    """Merge two property bags. The result is ordered by key."""
    merged: PropertyBag = {}
    for name in sorted(set(declared) | set(introspected)):
        value = declared.get(name)
        if value is None:
            value = introspected.get(name)
        merged[name] = value if value is not None else ""
    return merged


def resolve_properties(
    entity: ConfiguredResource,
    introspector: PropertyIntrospector,
    rar_name: Optional[str] = None,
) -> Optional[PropertyBag]:
    """
    Resolve the effective properties of a definition.

    Returns None (not an empty bag) when the definition has no
    implementation class, since there is no bean to introspect.
    """
    if not entity.class_name:
        return None

    introspected = introspector.introspect(
        entity.class_name, entity.config_properties, rar_name
    )
    return merge_properties(entity.declared_properties(), introspected)

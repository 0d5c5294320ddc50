"""
Bean introspection — default property values of an implementation class.

A "bean" here is any class constructible without arguments. Its defaults
are the values of its public settable properties and public instance
attributes right after construction.
"""

import importlib
import inspect
import logging
from typing import Callable, Dict, List, Optional, Protocol

from connector_runtime.errors import IntrospectionError
from connector_runtime.models.properties import ConfigProperty, PropertyBag

logger = logging.getLogger(__name__)

_SCALARS = (str, int, float, bool)


class PropertyIntrospector(Protocol):
    def introspect(
        self,
        class_name: str,
        known_properties: List[ConfigProperty],
        rar_name: Optional[str] = None,
    ) -> PropertyBag:
        ...


def import_class(class_name: str) -> type:
    """Load a class from its dotted path, e.g. "pkg.module.ClassName"."""
    module_name, _, attr = class_name.rpartition(".")
    if not module_name:
        raise IntrospectionError(f"Not a fully qualified class name: {class_name}")
    try:
        module = importlib.import_module(module_name)
        return getattr(module, attr)
    except (ImportError, AttributeError) as e:
        raise IntrospectionError(f"Unable to load class [{class_name}]: {e}") from e


def _render(value) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


class BeanIntrospector:
    """Reads default property values by instantiating the bean class."""

    def __init__(self, class_loader: Optional[Callable[[str], type]] = None):
        self._load_class = class_loader or import_class

    def introspect(
        self,
        class_name: str,
        known_properties: List[ConfigProperty],
        rar_name: Optional[str] = None,
    ) -> PropertyBag:
        bean_class = self._load_class(class_name)
        try:
            bean = bean_class()
        except Exception as e:
            raise IntrospectionError(
                f"Unable to instantiate [{class_name}] of [{rar_name}]: {e}"
            ) from e

        defaults = self._read_defaults(bean, class_name)

        # Declared names win over attribute spelling ("UserName" vs "username")
        by_lower = {name.lower(): name for name in defaults}
        result: PropertyBag = {}
        for prop in known_properties:
            attr = by_lower.pop(prop.name.lower(), None)
            if attr is not None:
                result[prop.name] = defaults[attr]
        for attr in by_lower.values():
            result[attr] = defaults[attr]

        logger.debug(
            "Introspected %d properties of %s (rar=%s)", len(result), class_name, rar_name
        )
        return result

    @staticmethod
    def _read_defaults(bean, class_name: str) -> Dict[str, str]:
        defaults: Dict[str, str] = {}
        for name, member in inspect.getmembers(type(bean)):
            if name.startswith("_") or not isinstance(member, property):
                continue
            if member.fget is None or member.fset is None:
                continue
            try:
                value = getattr(bean, name)
            except Exception as e:
                raise IntrospectionError(
                    f"Unable to read property [{name}] of [{class_name}]: {e}"
                ) from e
            if value is None or isinstance(value, _SCALARS):
                defaults[name] = _render(value)

        for name, value in getattr(bean, "__dict__", {}).items():
            if name.startswith("_"):
                continue
            if value is None or isinstance(value, _SCALARS):
                defaults[name] = _render(value)
        return defaults

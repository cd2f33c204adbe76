"""Route table import resolution — resolves ``"module:attribute"`` strings.

Shared by ``pathwise routes`` and ``pathwise generate`` to locate a
route table from a user-supplied import string.
"""

import importlib
from collections.abc import Mapping

from pathwise.routing.table import RouteTable


def resolve_table(import_string: str) -> RouteTable:
    """Resolve an import string to a ``RouteTable``.

    Accepts ``"module:attribute"`` format. When the attribute portion is
    omitted, defaults to ``"routes"`` (e.g. ``"myapp"`` resolves to
    ``myapp.routes``).

    The resolved object may be a ``RouteTable``, a plain registry mapping
    (wrapped in a ``RouteTable``), or a zero-argument factory returning
    either.

    Raises:
        ModuleNotFoundError: If the module cannot be imported.
        AttributeError: If the attribute does not exist on the module.
        TypeError: If the resolved object is not a table or registry.
    """
    module_path, _, attr_name = import_string.partition(":")
    if not attr_name:
        attr_name = "routes"

    module = importlib.import_module(module_path)
    obj = getattr(module, attr_name)

    if callable(obj) and not isinstance(obj, Mapping):
        try:
            obj = obj()
        except Exception as exc:
            msg = f"Factory function {import_string!r} raised an error: {exc}"
            raise TypeError(msg) from exc

    if isinstance(obj, RouteTable):
        return obj
    if isinstance(obj, Mapping):
        return RouteTable(obj)

    msg = f"{import_string!r} resolved to {type(obj).__name__}, not a RouteTable or mapping"
    raise TypeError(msg)

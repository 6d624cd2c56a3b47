"""Filters for listing search criteria."""

import importlib
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from invest_finder.filters.criteria import (  # noqa: F401
        AFFORDABILITY_TOLERANCE,
        CriteriaFilter,
        is_affordable,
        matches,
    )

__all__ = [
    "AFFORDABILITY_TOLERANCE",
    "CriteriaFilter",
    "is_affordable",
    "matches",
]

_LAZY_IMPORTS: dict[str, tuple[str, str]] = {
    "AFFORDABILITY_TOLERANCE": (".criteria", "AFFORDABILITY_TOLERANCE"),
    "CriteriaFilter": (".criteria", "CriteriaFilter"),
    "is_affordable": (".criteria", "is_affordable"),
    "matches": (".criteria", "matches"),
}


def __getattr__(name: str) -> object:
    if name in _LAZY_IMPORTS:
        module_path, attr = _LAZY_IMPORTS[name]
        mod = importlib.import_module(module_path, __name__)
        val = getattr(mod, attr)
        globals()[name] = val  # Cache so __getattr__ is only called once
        return val
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


def __dir__() -> list[str]:
    return __all__

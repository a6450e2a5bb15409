from __future__ import annotations

from collections.abc import Iterable
from typing import Any


def flatten(objects: Iterable[Any]) -> list[Any]:
    """Flatten nested lists and tuples into one list, keeping order."""
    flat: list[Any] = []
    for obj in objects:
        if isinstance(obj, (list, tuple)):
            flat.extend(flatten(obj))
        else:
            flat.append(obj)
    return flat

"""Shallow merge used to assemble locale trees."""

from typing import Any, Dict, Mapping, Optional


def shallow_merge(
    base: Optional[Mapping[str, Any]], incoming: Mapping[str, Any]
) -> Dict[str, Any]:
    """Merge incoming into base, replacing top-level keys only.

    Nested branches are not reconciled: a key present in incoming replaces
    the whole subtree stored under the same key in base. Key order follows
    base first, then the new keys of incoming.

    Args:
        base: Existing tree, or None.
        incoming: Fragment whose top-level keys win.

    Returns:
        A new dict; neither argument is modified.
    """
    merged: Dict[str, Any] = dict(base or {})
    merged.update(incoming)
    return merged

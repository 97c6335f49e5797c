"""Dotted path navigation over nested mappings."""

from dataclasses import dataclass, field
from typing import Any, List, Mapping, Optional

from localization.models import TranslationPath


@dataclass
class NavigationResult:
    """Outcome of navigating a path into a tree.

    Attributes:
        path: The attempted path, joined with the separator.
        segments: The attempted path split into segments.
        target_node: Mapping holding the final segment, when reachable.
        target_key: Final segment of the path.
        error: Description of the failure, None on success.
    """

    path: str
    segments: List[str] = field(default_factory=list)
    target_node: Optional[Mapping[str, Any]] = None
    target_key: Optional[str] = None
    error: Optional[str] = None

    @property
    def found(self) -> bool:
        return (
            self.error is None
            and self.target_node is not None
            and self.target_key in self.target_node
        )

    @property
    def value(self) -> Any:
        """Value stored at the path, or None when it is not present."""
        if not self.found:
            return None
        return self.target_node[self.target_key]


def split_path(path: TranslationPath, separator: str = ".") -> List[str]:
    if isinstance(path, str):
        return path.split(separator)
    return [str(segment) for segment in path]


def navigate_object(
    tree: Mapping[str, Any], path: TranslationPath, separator: str = "."
) -> NavigationResult:
    """Walk a path into a nested mapping.

    Every segment but the last must resolve to a mapping. The last segment
    only has to name a key of its parent for the result to be found.

    Args:
        tree: Nested mapping to navigate.
        path: Dotted string or sequence of segments.
        separator: Segment separator for string paths.

    Returns:
        NavigationResult describing the target or the failure.
    """
    segments = split_path(path, separator)
    result = NavigationResult(path=separator.join(segments), segments=segments)

    if not segments or segments == [""]:
        result.error = "empty path"
        return result

    node: Any = tree
    for depth, segment in enumerate(segments[:-1]):
        if not isinstance(node, Mapping) or segment not in node:
            result.error = (
                f"path {separator.join(segments[: depth + 1])} does not exist"
            )
            return result
        node = node[segment]

    if not isinstance(node, Mapping):
        result.error = f"path {separator.join(segments[:-1])} is not a mapping"
        return result

    result.target_node = node
    result.target_key = segments[-1]
    if segments[-1] not in node:
        result.error = f"path {result.path} does not exist"
    return result

"""
tree.py — Generic traversal helpers for JSON-like statement trees

Purpose:
- One walk/transform implementation shared by every framework view and the
  mapping adapter, with path and depth tracking.
- Defensive lookups: a missing or non-mapping step yields the default,
  never an exception.
- Copy helpers built on transform so callers never mutate the caller's object.

Usage:
    from acra_statements.utils.tree import get_in, walk

    total = get_in(document, "statementOfFinancialPosition.Assets")
    for node in walk(document):
        print(node.dotted_path, node.value)
"""

from __future__ import annotations

import copy
import re
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, Iterator, List, Mapping, Optional, Sequence, Tuple, Union

PathKey = Union[str, int]


@dataclass(frozen=True)
class TreeNode:
    """
    A visited position in a tree.

    Attributes:
        path: Keys (and list indexes) from the root to this node
        key: Last path element, None for the root
        value: Value stored at this position
        depth: Number of steps from the root (root = 0)
    """
    path: Tuple[PathKey, ...]
    key: Optional[PathKey]
    value: Any
    depth: int

    @property
    def dotted_path(self) -> str:
        return ".".join(str(part) for part in self.path)

    @property
    def is_leaf(self) -> bool:
        return not isinstance(self.value, (Mapping, list, tuple))


def _children(value: Any) -> Iterable[Tuple[PathKey, Any]]:
    if isinstance(value, Mapping):
        return value.items()
    if isinstance(value, (list, tuple)):
        return enumerate(value)
    return ()


def walk(tree: Any, include_containers: bool = False) -> Iterator[TreeNode]:
    """
    Visit a tree depth-first in key order.

    Args:
        tree: Nested dicts/lists
        include_containers: Also yield dict/list nodes (pre-order), not only leaves

    Yields:
        TreeNode for every leaf (and container, if requested)
    """
    stack: List[TreeNode] = [TreeNode(path=(), key=None, value=tree, depth=0)]
    while stack:
        node = stack.pop()
        if node.is_leaf:
            yield node
            continue
        if include_containers and node.path:
            yield node
        children = [
            TreeNode(path=node.path + (key,), key=key, value=child, depth=node.depth + 1)
            for key, child in _children(node.value)
        ]
        stack.extend(reversed(children))


def transform(tree: Any, fn: Callable[[TreeNode], Any], _path: Tuple[PathKey, ...] = ()) -> Any:
    """
    Rebuild a tree, replacing every leaf with fn(node).

    Containers are rebuilt (dict -> dict, list/tuple -> list); the input is
    left untouched.
    """
    if isinstance(tree, Mapping):
        return {key: transform(value, fn, _path + (key,)) for key, value in tree.items()}
    if isinstance(tree, (list, tuple)):
        return [transform(value, fn, _path + (index,)) for index, value in enumerate(tree)]
    return fn(TreeNode(path=_path, key=_path[-1] if _path else None, value=tree, depth=len(_path)))


def deep_copy(tree: Any) -> Any:
    """
    Private copy of a tree: containers are rebuilt through transform, leaves
    are deep-copied.
    """
    return transform(tree, lambda node: copy.deepcopy(node.value))


def _split_path(path: Union[str, Sequence[PathKey]]) -> Sequence[PathKey]:
    if isinstance(path, str):
        return [part for part in path.split(".") if part]
    return path


def get_in(tree: Any, path: Union[str, Sequence[PathKey]], default: Any = None) -> Any:
    """
    Safely read a nested value.

    Args:
        tree: Nested dicts/lists (may be None)
        path: Dotted string ("a.b.c") or sequence of keys
        default: Returned when any step is missing or not traversable

    Returns:
        The value at path, or default. A stored None is returned as default.
    """
    current = tree
    for key in _split_path(path):
        if isinstance(current, Mapping):
            if key not in current:
                return default
            current = current[key]
        elif isinstance(current, (list, tuple)) and isinstance(key, int) and -len(current) <= key < len(current):
            current = current[key]
        else:
            return default
    return default if current is None else current


def pick(mapping: Any, keys: Iterable[str]) -> Dict[str, Any]:
    """Select keys from a mapping in the given order; missing keys become None."""
    source = mapping if isinstance(mapping, Mapping) else {}
    return {key: source.get(key) for key in keys}


def fill_template(template: Any, source: Any) -> Dict[str, Any]:
    """
    Overlay source values on a null-filled template.

    Args:
        template: Iterable of keys, or mapping of key -> nested template
            (None marks a leaf)
        source: Mapping to read values from (anything else counts as empty)

    Returns:
        New dict with every template key (missing values None, nested
        templates filled recursively) in template order, followed by any
        extra keys found in source.
    """
    values = source if isinstance(source, Mapping) else {}
    entries = template.items() if isinstance(template, Mapping) else ((key, None) for key in template)

    filled: Dict[str, Any] = {}
    for key, sub_template in entries:
        if sub_template is None:
            filled[key] = deep_copy(values.get(key))
        else:
            filled[key] = fill_template(sub_template, values.get(key))
    for key, value in values.items():
        if key not in filled:
            filled[key] = deep_copy(value)
    return filled


def deep_merge(base: Any, overlay: Any) -> Any:
    """
    Merge two trees into a new one. Mappings merge key by key; any other
    overlay value replaces the base value. None in the overlay never replaces.
    """
    if isinstance(base, Mapping) and isinstance(overlay, Mapping):
        merged = {key: deep_copy(value) for key, value in base.items()}
        for key, value in overlay.items():
            merged[key] = deep_merge(merged.get(key), value)
        return merged
    if overlay is None:
        return deep_copy(base)
    return deep_copy(overlay)


_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])")


def camel_to_snake(name: str) -> str:
    """
    Convert camelCase or PascalCase to snake_case.

    Examples:
        camel_to_snake("tradeAndOtherReceivables") -> "trade_and_other_receivables"
        camel_to_snake("NameOfCompany") -> "name_of_company"
        camel_to_snake("TypeOfXBRLFiling") -> "type_of_xbrl_filing"
    """
    return _CAMEL_BOUNDARY.sub("_", name).lower()

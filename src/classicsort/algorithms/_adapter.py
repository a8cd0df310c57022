"""
Uniform benchmark adapter shared by every algorithm module.

The algorithms themselves sort a caller-owned list in place and return None.
The benchmark harness and the correctness tests, on the other hand, call

    sort(a: list, *, config: dict | None = None) -> list

and expect the input to be left untouched. `sort_copy` bridges the two.

None of the algorithms take tuning options, so `config` must be None or an
empty dict.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Optional, Sequence

__all__ = ["check_config", "sort_copy"]


def check_config(name: str, config: Optional[Dict[str, Any]]) -> None:
    if config is None:
        return
    if not isinstance(config, dict):
        raise ValueError(f"{name}: config must be a dict or None; got {type(config).__name__}")
    if config:
        raise ValueError(f"{name}: takes no config options; got {sorted(config)}")


def sort_copy(
    name: str,
    inplace_fn: Callable[[List[Any]], None],
    a: Sequence[Any],
    config: Optional[Dict[str, Any]],
) -> List[Any]:
    """Copy `a`, sort the copy with `inplace_fn`, and return it."""
    check_config(name, config)
    out = list(a)
    inplace_fn(out)
    return out

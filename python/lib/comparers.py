#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
comparers.py
------------

Small helpers for ``cmp``‑style comparators, i.e. callables
``comparer(a, b) -> int`` returning a negative number, zero or a positive
number when ``a`` is less than, equal to or greater than ``b``.

>>> from comparers import natural_order, reverse_order
>>> natural_order(1, 2)
-1
>>> reverse_order()(1, 2)
1
"""

from __future__ import annotations

from typing import Any, Callable, TypeVar

T = TypeVar("T")
K = TypeVar("K")

Comparer = Callable[[Any, Any], int]


def natural_order(a: Any, b: Any) -> int:
    """Ascending order. Only ``<`` is required of the operands."""
    if a < b:
        return -1
    if b < a:
        return 1
    return 0


def reverse_order(comparer: Comparer = natural_order) -> Comparer:
    """
    Return a comparator that orders the opposite way to *comparer*.

    Handing this to a min‑priority queue turns it into a max‑priority queue.
    """

    def reversed_comparer(a: Any, b: Any) -> int:
        return comparer(b, a)

    return reversed_comparer


def from_key(key: Callable[[T], K], comparer: Comparer = natural_order) -> Comparer:
    """Compare two values by ``key(value)``, like ``sorted(..., key=…)``."""

    def key_comparer(a: T, b: T) -> int:
        return comparer(key(a), key(b))

    return key_comparer


def less(comparer: Comparer, a: Any, b: Any) -> bool:
    return comparer(a, b) < 0

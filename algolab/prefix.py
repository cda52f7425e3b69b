"""Prefix function (failure function) of a sequence."""

from __future__ import annotations

from itertools import islice
from typing import Sequence

__all__ = ["prefix_function"]


def prefix_function(text: Sequence) -> list[int]:
    """Return, for every position, the length of the longest proper border.

    Entry ``i`` is the length of the longest proper prefix of ``text[:i + 1]``
    that is also its suffix. An empty input gives an empty list.
    """
    result = [0] * len(text)
    k = 0
    for i, item in islice(enumerate(text), 1, None):
        while k and text[k] != item:
            k = result[k - 1]
        if text[k] == item:
            k += 1
        result[i] = k
    return result
"""Random integer sequences over an inclusive range."""

from __future__ import annotations

import math
import random


def uniform_int(lower: int, upper: int, rng: random.Random | None = None) -> int:
    """Uniform integer in ``[lower, upper]`` from one ``random()`` draw."""

    source = rng or random
    return lower + math.floor(source.random() * (upper - lower + 1))


def generate(
    lower: int,
    upper: int,
    count: int,
    unique: bool = False,
    rng: random.Random | None = None,
) -> list[int]:
    """Draw ``count`` integers in ``[lower, upper]``.

    With ``unique`` the values are distinct (rejection sampling, draw order
    kept). Callers validate the range first; a ``count`` of zero or less
    returns an empty list.
    """

    if count <= 0:
        return []

    if not unique:
        return [uniform_int(lower, upper, rng) for _ in range(count)]

    if upper - lower + 1 < count:
        raise ValueError("range too small for a unique draw")

    seen: set[int] = set()
    out: list[int] = []
    while len(out) < count:
        value = uniform_int(lower, upper, rng)
        if value in seen:
            continue
        seen.add(value)
        out.append(value)
    return out

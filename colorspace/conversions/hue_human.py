"""
Perceptual ("human") hue scale.

Raw colorimetric hue does not change at a uniform perceived rate: a step near
yellow or cyan looks far larger than the same step through red or violet. The
table below weights the hue wheel by relative human sensitivity and maps raw hue
onto a scale where equal steps look roughly equal.
"""
from __future__ import annotations
import threading
from typing import Tuple

import numpy as np
from numpy import ndarray as NDArray

from .limiter import clamp01

# Relative sensitivity to a unit hue change, sampled every 10nm from 400nm
# (magenta end) to 660nm (red end).
HUE_SENSITIVITY: Tuple[float, ...] = (
    9.0, 5.5, 2.0, 2.0, 4.0, 4.0, 3.0, 1.2, 0.9, 1.1,
    2.0, 3.0, 3.6, 3.8, 3.9, 1.0, 0.8, 0.8, 1.0, 1.7,
    1.9, 2.4, 3.1, 4.3, 6.0, 8.0, 11.0,
)

_table: Tuple[NDArray, NDArray] | None = None
_table_lock = threading.Lock()


def _build_hue_human_table(sensitivity: Tuple[float, ...] = HUE_SENSITIVITY) -> Tuple[NDArray, NDArray]:
    step = 1.0 / (len(sensitivity) + 1)
    raw = []
    human = []
    distance = 0.0
    # Walk from the red end so raw hue 0 is red
    for index, weight in enumerate(reversed(sensitivity)):
        raw.append(index * step)
        human.append(distance)
        distance += 1.0 / weight
    raw_arr = np.array(raw + [1.0], dtype=np.float64)
    human_arr = np.array([h / distance for h in human] + [1.0], dtype=np.float64)
    raw_arr.flags.writeable = False
    human_arr.flags.writeable = False
    return raw_arr, human_arr


def hue_human_table() -> Tuple[NDArray, NDArray]:
    """
    Return the ``(raw_hue, human_hue)`` breakpoint arrays.

    Built on first use and shared for the life of the process. Both arrays are
    read-only and strictly increasing from 0.0 to 1.0.
    """
    global _table
    if _table is None:
        with _table_lock:
            if _table is None:
                _table = _build_hue_human_table()
    return _table


def hue_to_human(hue: float) -> float:
    """Map a raw hue in ``[0, 1]`` to the perceptual hue scale."""
    if hue == 0.0:
        return 0.0
    raw, human = hue_human_table()
    return float(np.interp(clamp01(hue), raw, human))


def human_to_hue(human_hue: float) -> float:
    """Map a perceptual hue in ``[0, 1]`` back to raw hue."""
    if human_hue == 0.0:
        return 0.0
    raw, human = hue_human_table()
    return float(np.interp(clamp01(human_hue), human, raw))


def np_hue_to_human(hue: NDArray) -> NDArray:
    """Vectorized: map raw hues in ``[0, 1]`` to the perceptual hue scale."""
    raw, human = hue_human_table()
    return np.interp(np.clip(np.asarray(hue, dtype=float), 0.0, 1.0), raw, human)


def np_human_to_hue(human_hue: NDArray) -> NDArray:
    """Vectorized: map perceptual hues in ``[0, 1]`` back to raw hue."""
    raw, human = hue_human_table()
    return np.interp(np.clip(np.asarray(human_hue, dtype=float), 0.0, 1.0), human, raw)


def human_hue_distance(hue_a: float, hue_b: float) -> float:
    """
    Perceptual distance between two raw hues on the circular hue scale.

    Returns a value in ``[0, 1]``; 1.0 means the hues are opposite.
    """
    distance = 2 * abs(hue_to_human(hue_a) - hue_to_human(hue_b))
    if distance > 1:
        distance = 2 - distance
    return distance

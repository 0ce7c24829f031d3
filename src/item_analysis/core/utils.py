"""
Core utility functions shared across item analysis modules.
"""

import numpy as np
from numpy.random import Generator

from item_analysis.core.constants import ITEM_ID_PREFIX, STUDENT_ID_PREFIX


def get_rng(seed: int | None = None) -> Generator:
    """
    Create a numpy random Generator with optional seed.

    Args:
        seed: Random seed for reproducibility. If None, uses entropy.

    Returns:
        A numpy random Generator instance.
    """
    return np.random.default_rng(seed)


def default_student_ids(n_students: int) -> tuple[str, ...]:
    """Generate 1-based student labels: Student_1, Student_2, ..."""
    return tuple(f"{STUDENT_ID_PREFIX}{i + 1}" for i in range(n_students))


def default_item_ids(n_items: int) -> tuple[str, ...]:
    """Generate 1-based item labels: Item_1, Item_2, ..."""
    return tuple(f"{ITEM_ID_PREFIX}{j + 1}" for j in range(n_items))

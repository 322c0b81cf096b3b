"""
Query helpers shared by the seeders.
"""
import random
from typing import Iterable, List

from sqlalchemy import select
from sqlalchemy.orm import Session


def in_set(column, values: Iterable):
    """
    Build a ``column IN (...)`` filter with one bound parameter per value.

    Duplicates are dropped; an empty set yields a filter matching nothing.
    """
    return column.in_(sorted(set(values)))


def random_ids(db: Session, model, count: int, rng: random.Random) -> List[int]:
    """
    Return up to ``count`` distinct ids of ``model`` in random order.

    The ids are read in id order and sampled with ``rng``, so the sample only
    depends on the table contents and the generator's state.
    """
    if count <= 0:
        return []
    ids = list(db.scalars(select(model.id).order_by(model.id)))
    return rng.sample(ids, min(count, len(ids)))


def cycle_ids(ids: List[int], count: int) -> List[int]:
    """
    Repeat ``ids`` in order until ``count`` entries are reached.

    Returns an empty list when there is nothing to repeat.
    """
    if not ids:
        return []
    return [ids[i % len(ids)] for i in range(count)]

import logging
import random

from sqlalchemy.orm import Session

from .exceptions import SeedingError
from ..models import Category
from ..utils import fake_data
from ..utils.progress import progress_bar

logger = logging.getLogger(__name__)


def _insert_category(db: Session, rng: random.Random, parent_id=None) -> int:
    category = Category(
        name=fake_data.category_name(rng),
        description=fake_data.category_description(rng),
        parent_id=parent_id,
    )
    db.add(category)
    try:
        db.commit()
    except Exception:
        db.rollback()
        raise
    db.refresh(category)
    return category.id


def generate_categories(db: Session, count: int, max_depth: int, rng: random.Random) -> int:
    """
    Create a balanced category tree of at most ``count`` nodes.

    About a third of the categories (at least one) form the top tier. Each
    following tier spreads the remaining count evenly over the nodes of the
    tier above, until the count is used up or ``max_depth`` tiers exist.

    Returns the number of categories created, which is below ``count`` only
    when ``max_depth`` is reached first.
    """
    if max_depth < 1:
        raise SeedingError(f"Cannot generate categories: max depth must be at least 1, got {max_depth}")

    top_level_count = max(1, count // 3)

    with progress_bar(top_level_count, "Top-level categories") as bar:
        top_level_ids = []
        for _ in range(top_level_count):
            top_level_ids.append(_insert_category(db, rng))
            bar.update(1)

    created = top_level_count
    remaining = count - top_level_count

    if remaining > 0:
        categories_by_depth = {1: top_level_ids}
        current_depth = 1

        with progress_bar(remaining, "Subcategories") as bar:
            while remaining > 0 and current_depth < max_depth:
                parent_ids = categories_by_depth[current_depth]
                if not parent_ids:
                    break

                per_parent = max(1, remaining // len(parent_ids))
                next_tier = []
                for parent_id in parent_ids:
                    for _ in range(per_parent):
                        if remaining <= 0:
                            break
                        next_tier.append(_insert_category(db, rng, parent_id))
                        remaining -= 1
                        created += 1
                        bar.update(1)

                logger.debug("Created %d categories at depth %d", len(next_tier), current_depth + 1)
                categories_by_depth[current_depth + 1] = next_tier
                current_depth += 1

    if remaining > 0:
        logger.warning(
            "Maximum category depth %d reached, %d categories not created", max_depth, remaining
        )

    logger.info("Generated %d categories", created)
    return created

import logging
import random

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from .exceptions import SeedingError
from ..models import Product, Review, User
from ..utils import fake_data
from ..utils.db_errors import is_unique_violation
from ..utils.progress import progress_bar
from ..utils.query_helpers import cycle_ids, random_ids

logger = logging.getLogger(__name__)

PRODUCT_USER_CONSTRAINT = "reviews_product_id_user_id_key"


def generate_reviews(db: Session, count: int, rng: random.Random) -> int:
    """
    Create up to ``count`` reviews.

    Users and products are sampled independently and paired by position. A
    pair that already has a review is skipped, not retried, so the number of
    reviews created can be lower than ``count``.
    """
    if count <= 0:
        return 0

    user_ids = cycle_ids(random_ids(db, User, count, rng), count)
    product_ids = cycle_ids(random_ids(db, Product, count, rng), count)
    if not user_ids or not product_ids:
        raise SeedingError("Cannot generate reviews: users and products are required")

    created = 0
    skipped = 0

    with progress_bar(count, "Reviews") as bar:
        for product_id, user_id in zip(product_ids, user_ids):
            db.add(Review(
                product_id=product_id,
                user_id=user_id,
                rating=fake_data.rating(rng),
                title=fake_data.review_title(rng),
                content=fake_data.review_content(rng),
            ))
            try:
                db.commit()
            except IntegrityError as e:
                db.rollback()
                if is_unique_violation(e, PRODUCT_USER_CONSTRAINT):
                    # User already reviewed this product
                    skipped += 1
                    bar.update(1)
                    continue
                raise
            created += 1
            bar.update(1)

    if skipped:
        logger.info("Skipped %d duplicate reviews", skipped)
    logger.info("Generated %d reviews", created)
    return created

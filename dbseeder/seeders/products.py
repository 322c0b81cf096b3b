import logging
import random

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from .exceptions import SeedingError
from ..models import Category, Product, ProductImage
from ..utils import fake_data
from ..utils.db_errors import is_unique_violation
from ..utils.progress import progress_bar
from ..utils.query_helpers import cycle_ids, random_ids

logger = logging.getLogger(__name__)

SKU_CONSTRAINT = "products_sku_key"

MIN_PRICE = 9.99
MAX_PRICE = 999.99


def _insert_product(db: Session, product: Product, rng: random.Random) -> int:
    # SKUs are short enough to collide on large runs, draw again until unique
    while True:
        product.sku = fake_data.sku(rng)
        db.add(product)
        try:
            db.commit()
        except IntegrityError as e:
            db.rollback()
            if is_unique_violation(e, SKU_CONSTRAINT):
                logger.debug("Duplicate SKU %s, drawing another", product.sku)
                continue
            raise
        db.refresh(product)
        return product.id


def generate_products(db: Session, count: int, images_per_product: int, rng: random.Random) -> int:
    """
    Create ``count`` products, each followed by ``images_per_product`` images.

    Products are spread over a random sample of categories, repeated when
    there are fewer categories than products. The first image of a product
    is its primary one.
    """
    if count <= 0:
        return 0

    category_ids = cycle_ids(random_ids(db, Category, count, rng), count)
    if not category_ids:
        raise SeedingError("Cannot generate products: no categories exist")

    with progress_bar(count, "Products") as bar:
        for category_id in category_ids:
            # 80% chance of having weight
            weight = fake_data.weight(rng, 0.1, 20.0) if rng.random() < 0.8 else None
            # 70% chance of having dimensions
            dimensions = fake_data.dimensions(rng) if rng.random() < 0.7 else None

            product = Product(
                name=fake_data.product_name(rng),
                description=fake_data.product_description(rng),
                price=fake_data.price(rng, MIN_PRICE, MAX_PRICE),
                stock_quantity=rng.randint(1, 1000),
                category_id=category_id,
                weight=weight,
                dimensions=dimensions,
            )
            product_id = _insert_product(db, product, rng)

            for j in range(images_per_product):
                db.add(ProductImage(
                    product_id=product_id,
                    image_url=fake_data.image_url(rng, product_id),
                    is_primary=j == 0,  # First image is primary
                ))
                try:
                    db.commit()
                except Exception:
                    db.rollback()
                    raise

            bar.update(1)

    logger.info("Generated %d products with %d images", count, count * images_per_product)
    return count

import logging
import random
from decimal import Decimal
from typing import Dict, List

from sqlalchemy import select
from sqlalchemy.orm import Session

from .exceptions import SeedingError
from ..models import Address, Order, OrderItem, OrderStatus, Product, User
from ..utils import fake_data
from ..utils.progress import progress_bar
from ..utils.query_helpers import cycle_ids, in_set, random_ids

logger = logging.getLogger(__name__)

PRODUCT_POOL_SIZE = 100
MAX_QUANTITY = 5


def random_address_by_user(db: Session, user_ids: List[int], rng: random.Random) -> Dict[int, int]:
    """Pick one random address id for each user id that has an address."""
    if not user_ids:
        return {}

    rows = db.execute(
        select(Address.id, Address.user_id)
        .where(in_set(Address.user_id, user_ids))
        .order_by(Address.id)
    ).all()
    rng.shuffle(rows)

    result = {}
    for address_id, user_id in rows:
        result.setdefault(user_id, address_id)
    return result


def product_prices(db: Session, product_ids: List[int]) -> Dict[int, Decimal]:
    rows = db.execute(
        select(Product.id, Product.price).where(in_set(Product.id, product_ids))
    ).all()
    return {product_id: price for product_id, price in rows}


def _commit(db: Session):
    try:
        db.commit()
    except Exception:
        db.rollback()
        raise


def generate_orders(
    db: Session,
    count: int,
    max_items_per_order: int,
    rng: random.Random,
    product_pool_size: int = PRODUCT_POOL_SIZE,
) -> int:
    """
    Create up to ``count`` orders with 1 to ``max_items_per_order`` items each.

    Orders go to a random sample of users, repeated when there are fewer users
    than orders. Items reference products from a pool of at most
    ``product_pool_size`` random products and copy their current price. An
    order's total is the sum of its item subtotals. Orders for users without
    an address are skipped, so fewer than ``count`` orders may be created.
    """
    if count <= 0:
        return 0
    if max_items_per_order < 1:
        raise SeedingError(
            f"Cannot generate orders: max items per order must be at least 1, got {max_items_per_order}"
        )

    user_ids = cycle_ids(random_ids(db, User, count, rng), count)
    if not user_ids:
        raise SeedingError("Cannot generate orders: no users exist")

    product_ids = random_ids(db, Product, product_pool_size, rng)
    if not product_ids:
        raise SeedingError("Cannot generate orders: no products exist")

    prices = product_prices(db, product_ids)
    user_addresses = random_address_by_user(db, user_ids, rng)

    created = 0
    with progress_bar(count, "Orders") as bar:
        for user_id in user_ids:
            address_id = user_addresses.get(user_id)
            if address_id is None:
                logger.warning("No address found for user %d, skipping order", user_id)
                bar.update(1)
                continue

            status = fake_data.order_status(rng)
            payment_method = fake_data.payment_method(rng)
            shipping_method = fake_data.shipping_method(rng)

            # 70% chance of having a tracking number once the order left pending
            tracking_number = None
            if status != OrderStatus.PENDING and rng.random() < 0.7:
                tracking_number = fake_data.tracking_number(rng)

            # 30% chance of having notes
            notes = fake_data.DELIVERY_NOTE if rng.random() < 0.3 else None

            items = []
            for _ in range(rng.randint(1, max_items_per_order)):
                product_id = rng.choice(product_ids)
                items.append((product_id, rng.randint(1, MAX_QUANTITY), prices[product_id]))

            total_amount = sum((quantity * price for _, quantity, price in items), Decimal("0"))

            # Shipping and billing use the same address
            order = Order(
                user_id=user_id,
                status=status.value,
                total_amount=total_amount,
                shipping_address_id=address_id,
                billing_address_id=address_id,
                payment_method=payment_method.value,
                shipping_method=shipping_method.value,
                tracking_number=tracking_number,
                notes=notes,
            )
            db.add(order)
            _commit(db)
            db.refresh(order)

            for product_id, quantity, price in items:
                db.add(OrderItem(
                    order_id=order.id,
                    product_id=product_id,
                    quantity=quantity,
                    price_per_unit=price,
                ))
                _commit(db)

            created += 1
            bar.update(1)
            logger.debug("Created order %d with %d items, total %s", order.id, len(items), total_amount)

    logger.info("Generated %d orders", created)
    return created

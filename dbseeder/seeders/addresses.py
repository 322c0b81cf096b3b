import logging
import random

from sqlalchemy.orm import Session

from ..models import Address, User
from ..utils import fake_data
from ..utils.progress import progress_bar
from ..utils.query_helpers import random_ids

logger = logging.getLogger(__name__)


def generate_addresses(db: Session, users_count: int, addresses_per_user: int, rng: random.Random) -> int:
    """
    Create ``addresses_per_user`` addresses for up to ``users_count`` random users.

    User ids are not repeated: with fewer users than requested, only the
    existing ones get addresses. The first address of each user is its default.
    """
    user_ids = random_ids(db, User, users_count, rng)
    if len(user_ids) < users_count:
        logger.warning("Only %d users available for %d requested", len(user_ids), users_count)

    total = len(user_ids) * addresses_per_user
    created = 0

    with progress_bar(total, "Addresses") as bar:
        for user_id in user_ids:
            for j in range(addresses_per_user):
                address_line2 = fake_data.apartment(rng) if fake_data.boolean(rng) else None
                address = Address(
                    user_id=user_id,
                    address_line1=fake_data.street_address(rng),
                    address_line2=address_line2,
                    city=fake_data.city(rng),
                    state=fake_data.state(rng),
                    postal_code=fake_data.zip_code(rng),
                    country=fake_data.country_code(rng),
                    is_default=j == 0,  # First address is default
                )
                db.add(address)
                try:
                    db.commit()
                except Exception:
                    db.rollback()
                    raise
                created += 1
                bar.update(1)

    logger.info("Generated %d addresses for %d users", created, len(user_ids))
    return created

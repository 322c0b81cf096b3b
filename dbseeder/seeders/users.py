import logging
import random

from passlib.context import CryptContext
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from ..config import settings
from ..models import User
from ..utils.db_errors import is_unique_violation
from ..utils.fake_data import make_faker
from ..utils.progress import progress_bar

logger = logging.getLogger(__name__)

pwd_context = CryptContext(
    schemes=["pbkdf2_sha256"],
    deprecated="auto",
    pbkdf2_sha256__default_rounds=settings.PASSWORD_HASH_ROUNDS,
)

EMAIL_CONSTRAINT = "users_email_key"


def get_password_hash(password):
    return pwd_context.hash(password)


def generate_users(db: Session, count: int, rng: random.Random) -> int:
    """Create ``count`` users, re-drawing the email whenever it is already taken."""
    fake = make_faker(rng)
    created = 0

    with progress_bar(count, "Users") as bar:
        while created < count:
            user = User(
                email=fake.email(),
                password_hash=get_password_hash(fake.password()),
                first_name=fake.first_name(),
                last_name=fake.last_name(),
                phone=fake.phone_number()[:20],
            )
            db.add(user)
            try:
                db.commit()
            except IntegrityError as e:
                db.rollback()
                if is_unique_violation(e, EMAIL_CONSTRAINT):
                    logger.debug("Duplicate email %s, drawing another", user.email)
                    continue
                raise
            db.refresh(user)
            created += 1
            bar.update(1)
            logger.debug("Created user: %s", user.email)

    logger.info("Generated %d users", created)
    return created

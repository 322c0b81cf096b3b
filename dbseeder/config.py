from pydantic_settings import BaseSettings
from typing import Optional
import os

class Settings(BaseSettings):
    # Database settings
    DATABASE_URL: Optional[str] = os.getenv("DATABASE_URL")
    DB_HOST: str = os.getenv("DB_HOST", "localhost")
    DB_PORT: int = int(os.getenv("DB_PORT", "5433"))
    DB_USER: str = os.getenv("DB_USER", "shared_user")
    DB_PASSWORD: str = os.getenv("DB_PASSWORD", "shared_password")
    DB_NAME: str = os.getenv("DB_NAME", "shared_db")
    DB_SSLMODE: str = os.getenv("DB_SSLMODE", "disable")

    # Connection retry settings
    DB_CONNECT_RETRIES: int = 3
    DB_RETRY_DELAY: float = 1.0  # seconds, doubled after every failed attempt

    # Default seed counts
    SEED_USERS: int = 100
    SEED_ADDRESSES_PER_USER: int = 2
    SEED_CATEGORIES: int = 30
    SEED_CATEGORY_DEPTH: int = 3
    SEED_PRODUCTS: int = 1000
    SEED_IMAGES_PER_PRODUCT: int = 3
    SEED_ORDERS: int = 500
    SEED_MAX_ITEMS_PER_ORDER: int = 5
    SEED_REVIEWS: int = 300

    # Password hashing for generated users. Kept low, the hashes are fixtures.
    PASSWORD_HASH_ROUNDS: int = 1000

    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    class Config:
        env_file = ".env"
        case_sensitive = True

settings = Settings()

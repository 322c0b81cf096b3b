"""
Generators that fill the e-commerce tables with synthetic rows.
"""
from .exceptions import SeedingError
from .users import generate_users
from .addresses import generate_addresses
from .categories import generate_categories
from .products import generate_products
from .orders import generate_orders
from .reviews import generate_reviews

__all__ = [
    "SeedingError",
    "generate_users",
    "generate_addresses",
    "generate_categories",
    "generate_products",
    "generate_orders",
    "generate_reviews",
]

"""
Random field values for generated rows.

Every function draws from the ``random.Random`` instance it is given, so a run
seeded with a fixed value produces the same data.
"""
import random
import string
from decimal import Decimal, ROUND_HALF_UP
from typing import Sequence, TypeVar

from faker import Faker

from ..models import OrderStatus, PaymentMethod, ShippingMethod

T = TypeVar("T")

CENTS = Decimal("0.01")

CITIES = [
    "New York", "Los Angeles", "Chicago", "Houston", "Phoenix",
    "Philadelphia", "San Antonio", "San Diego", "Dallas", "San Jose",
    "Austin", "Jacksonville", "Fort Worth", "Columbus", "San Francisco",
    "Charlotte", "Indianapolis", "Seattle", "Denver", "Washington",
    "Boston", "El Paso", "Nashville", "Detroit", "Portland",
    "Memphis", "Oklahoma City", "Las Vegas", "Louisville", "Baltimore",
]

STATES = [
    "Alabama", "Alaska", "Arizona", "Arkansas", "California",
    "Colorado", "Connecticut", "Delaware", "Florida", "Georgia",
    "Hawaii", "Idaho", "Illinois", "Indiana", "Iowa",
    "Kansas", "Kentucky", "Louisiana", "Maine", "Maryland",
    "Massachusetts", "Michigan", "Minnesota", "Mississippi", "Missouri",
    "Montana", "Nebraska", "Nevada", "New Hampshire", "New Jersey",
    "New Mexico", "New York", "North Carolina", "North Dakota", "Ohio",
    "Oklahoma", "Oregon", "Pennsylvania", "Rhode Island", "South Carolina",
    "South Dakota", "Tennessee", "Texas", "Utah", "Vermont",
    "Virginia", "Washington", "West Virginia", "Wisconsin", "Wyoming",
]

COUNTRY_CODES = [
    "US", "CA", "MX", "UK", "FR", "DE", "IT", "ES", "JP", "CN",
    "AU", "NZ", "BR", "AR", "CL", "RU", "IN", "ZA", "NG", "EG",
]

PRODUCT_ADJECTIVES = [
    "Premium", "Deluxe", "Luxury", "Basic", "Essential", "Professional",
    "Advanced", "Smart", "Ultra", "Super", "Mega", "Compact", "Portable",
    "Wireless", "Digital", "Analog", "Classic", "Modern", "Vintage", "Retro",
]

PRODUCT_NOUNS = [
    "Laptop", "Smartphone", "Tablet", "Headphones", "Speaker", "Camera",
    "Watch", "TV", "Monitor", "Keyboard", "Mouse", "Printer", "Scanner",
    "Router", "Charger", "Cable", "Adapter", "Case", "Stand", "Holder",
]

PRODUCT_DESCRIPTIONS = [
    "This high-quality product is designed to meet all your needs.",
    "Experience the ultimate performance with this innovative product.",
    "A reliable solution for everyday use with exceptional durability.",
    "Combining style and functionality in a compact design.",
    "The perfect balance of quality, performance, and value.",
    "Engineered for maximum efficiency and user satisfaction.",
    "A versatile product suitable for various applications.",
    "Featuring cutting-edge technology for superior results.",
    "Designed with user comfort and convenience in mind.",
    "A must-have addition to your collection of premium products.",
]

REVIEW_TITLES = [
    "Great product!", "Highly recommended", "Excellent value",
    "Not what I expected", "Could be better", "Amazing quality",
    "Disappointed", "Perfect for my needs", "Good but overpriced",
    "Exceeded expectations", "Just okay", "Very satisfied",
]

REVIEW_CONTENTS = [
    "I've been using this product for a few weeks now and I'm very satisfied with its performance and quality.",
    "This product exceeded my expectations in every way. The build quality is excellent and it works perfectly.",
    "While the product is good overall, I think it's a bit overpriced for what you get.",
    "I was disappointed with this purchase. The quality is not what I expected and it doesn't work as advertised.",
    "This is exactly what I was looking for. It's well-made, easy to use, and does the job perfectly.",
    "The product is okay, but there are better options available at this price point.",
    "I've tried many similar products, but this one is by far the best. Highly recommended!",
    "Great value for money. It's not perfect, but it gets the job done and is very affordable.",
    "I bought this as a gift and the recipient loved it. Great quality and nice packaging.",
    "The product arrived damaged, but customer service was excellent and sent a replacement right away.",
]

CATEGORY_NAMES = [
    "Electronics", "Clothing", "Home & Kitchen", "Books", "Sports & Outdoors",
    "Beauty & Personal Care", "Toys & Games", "Automotive", "Health & Wellness",
    "Jewelry", "Office Supplies", "Pet Supplies", "Food & Grocery", "Garden & Outdoor",
    "Baby Products", "Tools & Home Improvement", "Musical Instruments", "Arts & Crafts",
]

CATEGORY_DESCRIPTIONS = [
    "Find everything you need for your home and daily life.",
    "Quality products at affordable prices.",
    "The latest trends and innovations in this category.",
    "Essential items for every household.",
    "Premium selection of top-rated products.",
    "Discover new and exciting products in this category.",
    "Handpicked items to meet your specific needs.",
    "A wide range of products for every budget.",
    "Specialized products for enthusiasts and professionals.",
    "Everything you need in one convenient category.",
]

IMAGE_BASE_URLS = [
    "https://example.com/images/products/",
    "https://store.example.org/product-images/",
    "https://cdn.example.net/shop/items/",
    "https://images.example.io/catalog/",
]

IMAGE_EXTENSIONS = [".jpg", ".png", ".webp"]

DELIVERY_NOTE = "Please deliver to the front door."


def make_faker(rng: random.Random) -> Faker:
    """
    Create a Faker instance seeded from the given generator.

    Args:
        rng: The run's random generator

    Returns:
        A Faker whose output is reproducible for a fixed ``rng`` seed
    """
    fake = Faker()
    fake.seed_instance(rng.getrandbits(64))
    return fake


def pick(rng: random.Random, choices: Sequence[T]) -> T:
    return choices[rng.randrange(len(choices))]


def to_cents(value: float) -> Decimal:
    """Round a float to a two-decimal Decimal."""
    return Decimal(str(value)).quantize(CENTS, rounding=ROUND_HALF_UP)


def boolean(rng: random.Random) -> bool:
    return rng.randrange(2) == 1


def city(rng: random.Random) -> str:
    return pick(rng, CITIES)


def state(rng: random.Random) -> str:
    return pick(rng, STATES)


def zip_code(rng: random.Random) -> str:
    return f"{rng.randrange(100000):05d}"


def country_code(rng: random.Random) -> str:
    return pick(rng, COUNTRY_CODES)


def street_address(rng: random.Random) -> str:
    return f"{rng.randint(1, 1000)} {city(rng)} St"


def apartment(rng: random.Random) -> str:
    return f"Apt {rng.randint(1, 100)}"


def product_name(rng: random.Random) -> str:
    return f"{pick(rng, PRODUCT_ADJECTIVES)} {pick(rng, PRODUCT_NOUNS)}"


def product_description(rng: random.Random) -> str:
    return pick(rng, PRODUCT_DESCRIPTIONS)


def sku(rng: random.Random) -> str:
    """
    Generate a random SKU code.

    Three uppercase letters followed by five digits, e.g. ``KQZ04817``.
    """
    letters = "".join(rng.choice(string.ascii_uppercase) for _ in range(3))
    digits = "".join(rng.choice(string.digits) for _ in range(5))
    return letters + digits


def price(rng: random.Random, min_price: float, max_price: float) -> Decimal:
    return to_cents(rng.uniform(min_price, max_price))


def weight(rng: random.Random, min_weight: float, max_weight: float) -> Decimal:
    return to_cents(rng.uniform(min_weight, max_weight))


def dimensions(rng: random.Random) -> str:
    width = 1 + rng.random() * 50
    height = 1 + rng.random() * 50
    depth = 1 + rng.random() * 50
    return f"{width:.1f} x {height:.1f} x {depth:.1f} cm"


def image_url(rng: random.Random, product_id: int) -> str:
    """
    Build a product image URL.

    Args:
        rng: The run's random generator
        product_id: Id of the product the image belongs to

    Returns:
        A URL like ``https://cdn.example.net/shop/items/42-3.webp``
    """
    base_url = pick(rng, IMAGE_BASE_URLS)
    extension = pick(rng, IMAGE_EXTENSIONS)
    return f"{base_url}{product_id}-{rng.randint(1, 5)}{extension}"


def order_status(rng: random.Random) -> OrderStatus:
    return pick(rng, list(OrderStatus))


def payment_method(rng: random.Random) -> PaymentMethod:
    return pick(rng, list(PaymentMethod))


def shipping_method(rng: random.Random) -> ShippingMethod:
    return pick(rng, list(ShippingMethod))


def tracking_number(rng: random.Random) -> str:
    return "TRK" + "".join(rng.choice(string.digits) for _ in range(10))


def rating(rng: random.Random) -> int:
    return rng.randint(1, 5)


def review_title(rng: random.Random) -> str:
    return pick(rng, REVIEW_TITLES)


def review_content(rng: random.Random) -> str:
    return pick(rng, REVIEW_CONTENTS)


def category_name(rng: random.Random) -> str:
    return pick(rng, CATEGORY_NAMES)


def category_description(rng: random.Random) -> str:
    return pick(rng, CATEGORY_DESCRIPTIONS)

import random
import re
from decimal import Decimal

from dbseeder.models import OrderStatus, PaymentMethod, ShippingMethod
from dbseeder.utils import fake_data


def test_same_seed_gives_same_values():
    first = random.Random(7)
    second = random.Random(7)

    assert [fake_data.product_name(first) for _ in range(20)] == [
        fake_data.product_name(second) for _ in range(20)
    ]


def test_faker_is_seeded_from_generator():
    emails_a = [fake_data.make_faker(random.Random(3)).email() for _ in range(2)]
    emails_b = [fake_data.make_faker(random.Random(3)).email() for _ in range(2)]

    assert emails_a == emails_b


def test_sku_format(rng):
    for _ in range(50):
        assert re.fullmatch(r"[A-Z]{3}[0-9]{5}", fake_data.sku(rng))


def test_price_is_in_range_with_cents(rng):
    for _ in range(200):
        price = fake_data.price(rng, 9.99, 999.99)
        assert isinstance(price, Decimal)
        assert Decimal("9.99") <= price <= Decimal("999.99")
        assert price == price.quantize(Decimal("0.01"))


def test_address_parts(rng):
    assert re.fullmatch(r"[0-9]{5}", fake_data.zip_code(rng))
    assert fake_data.city(rng) in fake_data.CITIES
    assert fake_data.state(rng) in fake_data.STATES
    assert fake_data.country_code(rng) in fake_data.COUNTRY_CODES
    assert re.fullmatch(r"\d{1,4} .+ St", fake_data.street_address(rng))
    assert re.fullmatch(r"Apt \d{1,3}", fake_data.apartment(rng))


def test_dimensions_format(rng):
    assert re.fullmatch(r"\d+\.\d x \d+\.\d x \d+\.\d cm", fake_data.dimensions(rng))


def test_image_url_contains_product_id(rng):
    url = fake_data.image_url(rng, 42)

    assert any(url.startswith(base) for base in fake_data.IMAGE_BASE_URLS)
    assert re.search(r"/42-[1-5]\.(jpg|png|webp)$", url)


def test_order_values(rng):
    assert isinstance(fake_data.order_status(rng), OrderStatus)
    assert isinstance(fake_data.payment_method(rng), PaymentMethod)
    assert isinstance(fake_data.shipping_method(rng), ShippingMethod)
    assert re.fullmatch(r"TRK[0-9]{10}", fake_data.tracking_number(rng))


def test_rating_covers_one_to_five(rng):
    ratings = {fake_data.rating(rng) for _ in range(500)}

    assert ratings == {1, 2, 3, 4, 5}


def test_to_cents_rounds_half_up():
    assert fake_data.to_cents(2.675) == Decimal("2.68")
    assert fake_data.to_cents(10) == Decimal("10.00")

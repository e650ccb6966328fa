import random
import uuid
from decimal import Decimal

import factory
from faker import Faker

from infrastructure.auth import Identity
from storefront.domain.cart import CartLine
from storefront.domain.records import CATEGORY_NAMES, Service

fake = Faker()


class ServiceRowFactory(factory.DictFactory):
    """A ``services`` row as stored remotely."""

    id = factory.Sequence(lambda n: f"svc-{n}")
    title = factory.Sequence(lambda n: f"Service {n}")
    category = factory.Iterator(CATEGORY_NAMES)
    developer = factory.Faker("company")
    developer_id = factory.Sequence(lambda n: f"dev-{n}")
    price = factory.LazyFunction(lambda: f"{random.randint(10, 500)}.00")
    rating = factory.LazyFunction(lambda: round(random.uniform(3, 5), 1))
    developer_verified = False
    image_url = factory.Faker("image_url")
    description = factory.Faker("sentence", nb_words=10)


class ServiceFactory(factory.Factory):
    class Meta:
        model = Service

    id = factory.Sequence(lambda n: f"svc-{n}")
    title = factory.Sequence(lambda n: f"Service {n}")
    category = factory.Iterator(CATEGORY_NAMES)
    developer = factory.Faker("company")
    developer_id = factory.Sequence(lambda n: f"dev-{n}")
    price = factory.LazyFunction(lambda: Decimal(f"{random.randint(10, 500)}.00"))
    rating = 4.5


class CartLineFactory(factory.Factory):
    class Meta:
        model = CartLine

    item_id = factory.Sequence(lambda n: f"svc-{n}")
    title = factory.Sequence(lambda n: f"Service {n}")
    unit_price = Decimal("10.00")
    quantity = 1
    seller_ref = "dev-1"


class IdentityFactory(factory.Factory):
    class Meta:
        model = Identity

    user_id = factory.LazyFunction(lambda: str(uuid.uuid4()))
    email = factory.Sequence(lambda n: f"user_{n}@example.com")
    access_token = factory.LazyFunction(lambda: uuid.uuid4().hex)
    refresh_token = factory.LazyAttribute(lambda o: f"refresh-{o.access_token}")
    metadata = factory.LazyFunction(lambda: {"full_name": fake.name(), "user_type": "customer"})


class SellerIdentityFactory(IdentityFactory):
    metadata = factory.LazyFunction(lambda: {"full_name": fake.name(), "user_type": "developer"})

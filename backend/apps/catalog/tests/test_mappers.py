import types
import unittest
from decimal import Decimal

from apps.catalog.mappers import ProductMapper


class StubLikes:
    def __init__(self, count):
        self._count = count

    def count(self):
        return self._count


def make_product(**overrides):
    seller = types.SimpleNamespace(
        id=5, username="seller", email="s@example.com", phone=None
    )
    attrs = dict(
        id=1,
        title="Lamp",
        description="Brass lamp",
        category="Home & Garden",
        price=Decimal("15.00"),
        condition="Good",
        seller=seller,
        is_available=True,
        images=["https://img/1.png"],
        location={"city": "Pune"},
        tags=["brass"],
        views=3,
        likes=StubLikes(2),
        created_at=None,
        updated_at=None,
    )
    attrs.update(overrides)
    return types.SimpleNamespace(**attrs)


class ProductMapperTests(unittest.TestCase):
    def test_to_dto_uses_annotation_when_present(self):
        dto = ProductMapper.to_dto(make_product(likes_total=9))
        self.assertEqual(dto.likes_count, 9)

    def test_to_dto_falls_back_to_like_count(self):
        dto = ProductMapper.to_dto(make_product())
        self.assertEqual(dto.likes_count, 2)
        self.assertEqual(dto.seller.username, "seller")
        self.assertEqual(dto.seller.phone, "")
        self.assertEqual(dto.location, {"city": "Pune"})

    def test_to_dto_handles_null_json_fields(self):
        dto = ProductMapper.to_dto(make_product(images=None, tags=None, location=None))
        self.assertEqual(dto.images, [])
        self.assertEqual(dto.tags, [])
        self.assertEqual(dto.location, {})

from decimal import Decimal

import pytest

from apps.common.errors import EmptyCartError
from apps.orders.splitter import ResolvedLine, split_by_seller


def line(product_id, seller_id, price, quantity):
    return ResolvedLine(
        product_id=product_id,
        seller_id=seller_id,
        price=Decimal(price),
        quantity=quantity,
    )


def test_two_sellers_example():
    result = split_by_seller([line(1, "X", "10", 2), line(2, "Y", "5", 1)])
    assert [(g.seller_id, g.total) for g in result.groups] == [
        ("X", Decimal("20")),
        ("Y", Decimal("5")),
    ]
    assert result.grand_total == Decimal("25")


def test_groups_keep_first_occurrence_order():
    result = split_by_seller(
        [
            line(1, 7, "1.50", 1),
            line(2, 3, "2.00", 2),
            line(3, 7, "0.25", 4),
        ]
    )
    assert [g.seller_id for g in result.groups] == [7, 3]
    assert [l.product_id for l in result.groups[0].lines] == [1, 3]
    assert result.groups[0].total == Decimal("2.50")


def test_group_totals_sum_to_grand_total():
    lines = [line(i, i % 3, f"{i}.10", i) for i in range(1, 8)]
    result = split_by_seller(lines)
    assert sum(g.total for g in result.groups) == result.grand_total
    assert result.grand_total == sum(l.subtotal for l in lines)
    assert len(result.groups) == 3


def test_empty_input_raises():
    with pytest.raises(EmptyCartError):
        split_by_seller([])


def test_accepts_generators():
    result = split_by_seller(line(i, 1, "1", 1) for i in range(3))
    assert result.grand_total == Decimal("3")

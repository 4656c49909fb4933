"""Split resolved cart lines into one group per seller.

Pure data in, pure data out: no database or cache access, so checkout can
call it inside its transaction and tests can call it directly.
"""
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Dict, Iterable, List

from apps.common.errors import EmptyCartError


@dataclass(frozen=True)
class ResolvedLine:
    product_id: int
    seller_id: int
    price: Decimal
    quantity: int
    title: str = ""

    @property
    def subtotal(self) -> Decimal:
        return self.price * self.quantity


@dataclass
class SellerGroup:
    seller_id: int
    lines: List[ResolvedLine] = field(default_factory=list)
    total: Decimal = Decimal("0")


@dataclass
class SplitResult:
    groups: List[SellerGroup]
    grand_total: Decimal


def split_by_seller(lines: Iterable[ResolvedLine]) -> SplitResult:
    """
    Group lines by seller in first-occurrence order.

    Each group's total is the sum of its line subtotals and the grand total is
    the sum of the group totals.

    Raises:
        EmptyCartError: when there are no lines to split.
    """
    groups: Dict[int, SellerGroup] = {}
    for line in lines:
        group = groups.get(line.seller_id)
        if group is None:
            group = groups[line.seller_id] = SellerGroup(seller_id=line.seller_id)
        group.lines.append(line)
        group.total += line.subtotal
    if not groups:
        raise EmptyCartError()
    ordered = list(groups.values())
    return SplitResult(
        groups=ordered, grand_total=sum((g.total for g in ordered), Decimal("0"))
    )

"""
Filter engine for resource listings.

Each criterion is optional: None or "" means the criterion is absent and is
skipped. Present criteria are combined with AND. An entity whose field is
None never matches a present criterion. Filtering keeps the input order.
"""
from dataclasses import dataclass
from typing import Any, Callable, Iterable, List, Optional, TypeVar

T = TypeVar("T")
Predicate = Callable[[Any], bool]


def is_absent(value: Any) -> bool:
    return value is None or value == ""


def equals_ignore_case(field: str, value: Optional[str]) -> Optional[Predicate]:
    if is_absent(value):
        return None
    expected = value.lower()

    def predicate(item) -> bool:
        actual = getattr(item, field)
        return actual is not None and actual.lower() == expected

    return predicate


def contains_ignore_case(field: str, value: Optional[str]) -> Optional[Predicate]:
    if is_absent(value):
        return None
    needle = value.lower()

    def predicate(item) -> bool:
        actual = getattr(item, field)
        return actual is not None and needle in actual.lower()

    return predicate


def equals(field: str, value: Any) -> Optional[Predicate]:
    if is_absent(value):
        return None

    def predicate(item) -> bool:
        actual = getattr(item, field)
        return actual is not None and actual == value

    return predicate


def at_least(field: str, bound: Optional[float]) -> Optional[Predicate]:
    """Inclusive lower bound."""
    if bound is None:
        return None

    def predicate(item) -> bool:
        actual = getattr(item, field)
        return actual is not None and actual >= bound

    return predicate


def at_most(field: str, bound: Optional[float]) -> Optional[Predicate]:
    """Inclusive upper bound."""
    if bound is None:
        return None

    def predicate(item) -> bool:
        actual = getattr(item, field)
        return actual is not None and actual <= bound

    return predicate


def less_than(field: str, bound: Optional[float]) -> Optional[Predicate]:
    """Strict upper bound."""
    if bound is None:
        return None

    def predicate(item) -> bool:
        actual = getattr(item, field)
        return actual is not None and actual < bound

    return predicate


def apply_filters(items: Iterable[T], predicates: Iterable[Optional[Predicate]]) -> List[T]:
    """Keep the items that satisfy every present predicate."""
    active = [p for p in predicates if p is not None]
    if not active:
        return list(items)
    return [item for item in items if all(p(item) for p in active)]


@dataclass
class ProductCriteria:
    category: Optional[str] = None
    brand: Optional[str] = None
    min_price: Optional[float] = None
    max_price: Optional[float] = None
    # Substring of the product name
    search: Optional[str] = None
    # Low stock: stock strictly below this value
    stock_below: Optional[int] = None

    def predicates(self) -> List[Optional[Predicate]]:
        return [
            equals_ignore_case("category", self.category),
            equals_ignore_case("brand", self.brand),
            at_least("price", self.min_price),
            at_most("price", self.max_price),
            contains_ignore_case("name", self.search),
            less_than("stock", self.stock_below),
        ]


@dataclass
class UserCriteria:
    country: Optional[str] = None
    city: Optional[str] = None
    status: Optional[str] = None
    # Substring of the full name
    search: Optional[str] = None

    def predicates(self) -> List[Optional[Predicate]]:
        return [
            equals_ignore_case("country", self.country),
            equals_ignore_case("city", self.city),
            equals_ignore_case("status", self.status),
            contains_ignore_case("full_name", self.search),
        ]


@dataclass
class OrderCriteria:
    status: Optional[str] = None
    user_id: Optional[int] = None
    payment_method: Optional[str] = None

    def predicates(self) -> List[Optional[Predicate]]:
        return [
            equals_ignore_case("status", self.status),
            equals("user_id", self.user_id),
            equals_ignore_case("payment_method", self.payment_method),
        ]

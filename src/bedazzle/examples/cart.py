"""Shopping cart where every operation returns a newly composed cart."""

from __future__ import annotations

from typing import Any, Callable, Dict, Mapping

from ..core import Bedazzled, Recompose, bedazzle

INITIAL_CART: Dict[str, Any] = {
    "items": [],
    "subtotal": 0,
    "discounts": 0,
    "tax": 0,
    "shipping": 0,
}


def with_add_item(cart: Bedazzled, recompose: Recompose) -> Dict[str, Callable]:
    def add_item(item: Mapping) -> Bedazzled:
        items = [*cart.items, item]
        subtotal = sum(entry["price"] for entry in items)
        return recompose({**cart, "items": items, "subtotal": subtotal})

    return {"add_item": add_item}


def with_discount(cart: Bedazzled, recompose: Recompose) -> Dict[str, Callable]:
    def apply_discount(percent: float) -> Bedazzled:
        return recompose({**cart, "discounts": cart.subtotal * (percent / 100)})

    return {"apply_discount": apply_discount}


def with_tax(cart: Bedazzled, recompose: Recompose) -> Dict[str, Callable]:
    def calculate_tax(rate: float) -> Bedazzled:
        taxable = cart.subtotal - cart.discounts
        return recompose({**cart, "tax": taxable * (rate / 100)})

    return {"calculate_tax": calculate_tax}


def with_shipping(cart: Bedazzled, recompose: Recompose) -> Dict[str, Callable]:
    def set_shipping(flat_rate: float) -> Bedazzled:
        return recompose({**cart, "shipping": flat_rate})

    return {"set_shipping": set_shipping}


def with_total(cart: Bedazzled, recompose: Recompose) -> Dict[str, float]:
    # Evaluated once per composition, so it always reflects this cart's fields
    return {"total": cart.subtotal - cart.discounts + cart.tax + cart.shipping}


CART_DECORATORS = (with_add_item, with_discount, with_tax, with_shipping, with_total)


def build_cart(state: Mapping = INITIAL_CART) -> Bedazzled:
    """Compose a cart from a base state."""

    return bedazzle(state, *CART_DECORATORS)


def checkout_demo() -> Bedazzled:
    """Run the standard two-item checkout and return the final cart."""

    return (
        build_cart()
        .add_item({"name": "Shirt", "price": 30})
        .add_item({"name": "Hat", "price": 20})
        .apply_discount(10)
        .calculate_tax(8)
        .set_shipping(5)
    )


def _amount(value: float) -> str:
    return f"{round(value, 2):g}"


def print_cart(cart: Bedazzled) -> None:
    """Print the cart totals."""

    print(f"Items:     {', '.join(item.get('name', '?') for item in cart.items) or '-'}")
    print(f"Subtotal:  {_amount(cart.subtotal)}")
    print(f"Discounts: {_amount(cart.discounts)}")
    print(f"Tax:       {_amount(cart.tax)}")
    print(f"Shipping:  {_amount(cart.shipping)}")
    print(f"Total:     {_amount(cart.total)}")


def main() -> int:
    print_cart(checkout_demo())
    return 0

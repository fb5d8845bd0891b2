import pytest
from dashboard.data.models import Order, OrderItem, OrdersViewState
from dashboard.orders.presenter import (
    build_order_detail,
    compute_subtotal,
    format_amount,
    pagination_caption,
    selected_order,
    status_style,
)

def make_order(**kwargs):
    items = [OrderItem(name="Rice", price=10, quantity=2), OrderItem(name="Soup", price=5, quantity=1)]
    return Order(id="o1", items=items, **kwargs)

def test_subtotal_sums_price_times_quantity():
    order = make_order()
    assert compute_subtotal(order) == 25.0
    assert format_amount(compute_subtotal(order)) == "$25.00"

def test_subtotal_of_order_without_items_is_zero():
    assert compute_subtotal(Order(id="o1")) == 0.0

def test_missing_quantity_counts_as_one():
    order = Order(id="o1", items=[OrderItem(name="Rice", price=4)])
    assert compute_subtotal(order) == 4.0

@pytest.mark.parametrize("applied,amount,label", [
    (False, 50.0, "Not Applied"),
    (True, 0.0, "Not Applied"),
    (True, 50.0, "$50.00"),
])
def test_discount_gating(applied, amount, label):
    detail = build_order_detail(make_order(discount_applied=applied, discount_amount=amount))
    assert detail.discount_label == label

def test_total_is_not_reconciled_with_subtotal():
    detail = build_order_detail(make_order(total_amount=99.0))
    assert detail.subtotal == 25.0
    assert detail.total == 99.0

def test_unknown_status_uses_pending_style():
    assert status_style("Refunded") == status_style("Pending")
    assert status_style("Delivered") != status_style("Pending")

def test_selected_order_follows_view_state():
    orders = [Order(id="a"), Order(id="b")]
    state = OrdersViewState().select_order("a").select_order("b")
    assert selected_order(orders, state).id == "b"
    assert selected_order(orders, state.close_detail()) is None
    assert selected_order(orders, OrdersViewState().select_order("zzz")) is None

def test_pagination_caption():
    assert pagination_caption(3) == "Showing 1 to 3 of 3 orders"
    assert pagination_caption(0) == "Showing 0 to 0 of 0 orders"

from datetime import datetime, timezone

from dashboard.orders.projector import format_timestamp, project_order, project_orders, timestamp_epoch

FMT = "%m/%d/%Y, %I:%M:%S %p"

class ProtobufTimestamp:
    """Mimics google.protobuf Timestamp, whose ToDatetime() is naive UTC."""
    def __init__(self, moment):
        self.moment = moment

    def ToDatetime(self):
        return self.moment

class FakeTimestamp:
    """Mimics a timestamp object exposing a to_datetime() conversion."""
    def __init__(self, moment):
        self.moment = moment

    def to_datetime(self):
        return self.moment

def test_missing_total_defaults_to_zero():
    """A record without totalAmount projects to total_amount == 0."""
    order = project_order({"id": "o1", "status": "Pending"})
    assert order.total_amount == 0.0

def test_legacy_total_field_is_used():
    order = project_order({"id": "o1", "total": 42.5})
    assert order.total_amount == 42.5

def test_total_amount_wins_over_legacy_total():
    order = project_order({"id": "o1", "total": 10, "totalAmount": 12})
    assert order.total_amount == 12.0

def test_absent_fields_are_defaulted():
    order = project_order({"id": "o1"})
    assert order.customer_name == ""
    assert order.customer_email == ""
    assert order.store_id is None
    assert order.restaurant_id is None
    assert order.status == "Pending"
    assert order.created_at == ""
    assert order.modified_at == ""
    assert order.modified_by == ""
    assert order.discount_applied is False
    assert order.discount_amount == 0.0
    assert order.items == []

def test_malformed_fields_are_defaulted_not_rejected():
    order = project_order({
        "id": "o1",
        "customerName": {"first": "Ann"},
        "totalAmount": "not a number",
        "discountApplied": "yes",
        "discountAmount": None,
        "items": "oops",
        "storeId": "",
    })
    assert order.id == "o1"
    assert order.customer_name == ""
    assert order.total_amount == 0.0
    assert order.discount_applied is False
    assert order.items == []
    assert order.store_id is None

def test_numeric_strings_are_accepted_as_amounts():
    order = project_order({"id": "o1", "totalAmount": "75.50"})
    assert order.total_amount == 75.5

def test_items_keep_missing_values_unset():
    order = project_order({"id": "o1", "items": [{"name": "Rice"}, {"name": "Soup", "price": 5, "quantity": 2}, "junk"]})
    rice, soup, junk = order.items
    assert rice.quantity is None and rice.price is None
    assert rice.units == 1 and rice.unit_price == 0.0
    assert soup.line_total == 10.0
    assert junk.name == ""

def test_invalid_quantity_is_dropped():
    order = project_order({"id": "o1", "items": [{"name": "Rice", "price": 3, "quantity": -2}]})
    assert order.items[0].quantity is None
    assert order.items[0].line_total == 3.0

def test_batch_keeps_cardinality_and_order():
    records = [{"id": "a"}, {"id": "b", "totalAmount": "bad"}, {"id": "c"}]
    assert [o.id for o in project_orders(records)] == ["a", "b", "c"]

def test_format_timestamp_passes_strings_through():
    assert format_timestamp("2024-01-01 10:00:00", FMT) == "2024-01-01 10:00:00"
    assert format_timestamp(None, FMT) == ""

def test_format_timestamp_formats_naive_datetime():
    assert format_timestamp(datetime(2024, 3, 1, 14, 5, 9), FMT) == "03/01/2024, 02:05:09 PM"

def test_format_timestamp_converts_aware_datetime_to_local_time():
    moment = datetime(2024, 3, 1, 14, 5, 9, tzinfo=timezone.utc)
    assert format_timestamp(moment, FMT) == moment.astimezone().strftime(FMT)

def test_format_timestamp_uses_conversion_method():
    moment = datetime(2024, 1, 2, 8, 0, 0, tzinfo=timezone.utc)
    assert format_timestamp(FakeTimestamp(moment), FMT) == moment.astimezone().strftime(FMT)

def test_naive_protobuf_timestamps_are_read_as_utc():
    naive = datetime(2024, 1, 2, 8, 0, 0)
    expected = naive.replace(tzinfo=timezone.utc).astimezone().strftime(FMT)
    assert format_timestamp(ProtobufTimestamp(naive), FMT) == expected
    assert timestamp_epoch(ProtobufTimestamp(naive)) == 1704182400.0

def test_projected_created_at_uses_configured_format():
    order = project_order({"id": "o1", "createdAt": datetime(2024, 1, 2, 8, 0, 0)})
    assert order.created_at == "01/02/2024, 08:00:00 AM"

def test_negative_amounts_are_treated_as_missing():
    order = project_order({
        "id": "o1",
        "totalAmount": -20,
        "discountAmount": -5,
        "discountApplied": True,
        "items": [{"name": "Rice", "price": -3, "quantity": 2}],
    })
    assert order.total_amount == 0.0
    assert order.discount_amount == 0.0
    assert order.items[0].price is None
    assert order.items[0].line_total == 0.0

def test_created_epoch_is_captured_at_projection():
    order = project_order({"id": "o1", "createdAt": datetime(2024, 1, 1, tzinfo=timezone.utc)})
    assert order.created_epoch == 1704067200.0
    assert project_order({"id": "o2"}).created_epoch is None

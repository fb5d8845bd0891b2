import asyncio

from dashboard.data.models import Order, VenueNames
from dashboard.orders.names import attach_venue_names, distinct_ids, lookup_name, resolve_venue_names

STORES = [{"id": "s1", "name": "Kay's Kitchen"}, {"id": "s2", "name": "Green Basket"}, {"id": "s3"}]
RESTAURANTS = [{"id": "r1", "name": "Suya Spot"}]

def make_store(fake_store, **kwargs):
    return fake_store({"stores": STORES, "restaurants": RESTAURANTS}, **kwargs)

def test_distinct_ids_drops_empties_and_duplicates():
    assert distinct_ids(["a", None, "b", "a", "", "c", "b"]) == ["a", "b", "c"]

def test_each_distinct_id_is_looked_up_once(fake_store):
    """N orders over K distinct store ids issue exactly K lookups."""
    store = make_store(fake_store)
    orders = [Order(id=f"o{i}", store_id=("s1" if i % 2 else "s2")) for i in range(10)]
    asyncio.run(resolve_venue_names(store, orders))
    assert sorted(store.lookups) == [("stores", "s1"), ("stores", "s2")]

def test_missing_store_falls_back_to_label(fake_store):
    store = make_store(fake_store)
    order = Order(id="o1", store_id="gone")
    names = asyncio.run(resolve_venue_names(store, [order]))
    assert names.display_name(order) == "Store"

def test_missing_restaurant_and_nameless_store_fall_back(fake_store):
    store = make_store(fake_store)
    orders = [Order(id="o1", restaurant_id="gone"), Order(id="o2", store_id="s3")]
    names = asyncio.run(resolve_venue_names(store, orders))
    assert names.display_name(orders[0]) == "Restaurant"
    assert names.display_name(orders[1]) == "Store"

def test_failed_lookup_falls_back_without_raising(fake_store):
    store = make_store(fake_store, failing_ids={"s1"})
    orders = [Order(id="o1", store_id="s1"), Order(id="o2", store_id="s2")]
    names = asyncio.run(resolve_venue_names(store, orders))
    assert names.store_names == {"s1": "Store", "s2": "Green Basket"}

def test_mappings_cover_exactly_referenced_ids(fake_store):
    store = make_store(fake_store)
    orders = [Order(id="o1", store_id="s1"), Order(id="o2", restaurant_id="r1"), Order(id="o3")]
    names = asyncio.run(resolve_venue_names(store, orders))
    assert names.store_names == {"s1": "Kay's Kitchen"}
    assert names.restaurant_names == {"r1": "Suya Spot"}

def test_lookups_run_concurrently(fake_store):
    store = make_store(fake_store, delay=0.01)
    orders = [Order(id="o1", store_id="s1"), Order(id="o2", store_id="s2"), Order(id="o3", restaurant_id="r1")]
    asyncio.run(resolve_venue_names(store, orders))
    assert store.max_in_flight == 3

def test_lookup_name_reports_not_found(fake_store):
    store = make_store(fake_store)
    lookup = asyncio.run(lookup_name(store, "stores", "nope"))
    assert not lookup.found
    assert lookup.name_or("Store") == "Store"

def test_display_name_prefers_store_then_restaurant_then_placeholder():
    names = VenueNames(store_names={"s1": "Kay's Kitchen"}, restaurant_names={"r1": "Suya Spot"})
    assert names.display_name(Order(id="a", store_id="s1", restaurant_id="r1")) == "Kay's Kitchen"
    assert names.display_name(Order(id="b", restaurant_id="r1")) == "Suya Spot"
    assert names.display_name(Order(id="c")) == "-"

def test_attach_venue_names_returns_copies():
    names = VenueNames(store_names={"s1": "Kay's Kitchen"})
    original = Order(id="a", store_id="s1")
    attached = attach_venue_names([original], names)
    assert attached[0].venue_name == "Kay's Kitchen"
    assert original.venue_name == "-"

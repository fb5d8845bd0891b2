#!/usr/bin/env python3
"""
seed_data.py

Generates fake marketplace documents as JSON under a local folder (default: sample_data)
for the JSON document store backend.

Collections:
- stores, restaurants, orders

The orders deliberately mix shapes seen in the hosted store: exported timestamps
and pre-formatted strings, legacy "total" fields, missing customer fields and
references to venues that no longer exist.

Run:
  python -m dashboard.data.seed_data --orders 40
"""

from __future__ import annotations
import argparse
import json
import os
import random
import string
import sys
from datetime import datetime, timedelta, timezone
from typing import Dict, List

from dashboard.config import get_config

# -----------------------------
# Config & helper structures
# -----------------------------

STORE_NAMES = ["Kay's Kitchen Supplies", "Owerri Fresh Mart", "Daily Needs Store", "Green Basket"]
RESTAURANT_NAMES = ["Mama Put Express", "Jollof Junction", "Suya Spot", "The Pepper Soup House"]

MENU = {
    "Jollof Rice": 2500.0,
    "Fried Plantain": 800.0,
    "Pepper Soup": 3000.0,
    "Suya (Beef)": 1500.0,
    "Chapman": 1200.0,
    "Bottled Water": 300.0,
    "Egusi Soup": 3500.0,
    "Meat Pie": 700.0,
}

CUSTOMERS = [
    ("Alice Okafor", "ALICE@example.com"),
    ("Chidi Eze", "chidi.eze@example.com"),
    ("Ngozi Obi", "ngozi@example.com"),
    ("Tunde Bello", "tunde.bello@example.com"),
    ("", ""),
]

STATUSES = ["Delivered", "Pending", "Available for Pickup", "On Transit", "Cancelled", "Processing", "Refunded"]

ACTORS = ["admin@gobuyme.app", "ops@gobuyme.app", ""]


# -----------------------------
# Utility functions
# -----------------------------

def ensure_dir(path: str) -> None:
    if not os.path.exists(path):
        os.makedirs(path, exist_ok=True)

def rand_id(k: int = 20) -> str:
    return "".join(random.choices(string.ascii_letters + string.digits, k=k))

def exported_ts(ts: datetime) -> Dict[str, int]:
    """Timestamp in the {"_seconds", "_nanoseconds"} shape of a Firestore export."""
    return {"_seconds": int(ts.timestamp()), "_nanoseconds": 0}

def price_round(p: float) -> float:
    return round(max(p, 0.0), 2)


# -----------------------------
# Core generators
# -----------------------------

def gen_venues(names: List[str]) -> List[Dict]:
    return [{"id": rand_id(), "name": name, "status": "Active"} for name in names]

def gen_items() -> List[Dict]:
    items = []
    for name in random.sample(list(MENU), k=random.randint(1, 4)):
        item = {"name": name, "price": MENU[name], "quantity": random.randint(1, 3)}
        if random.random() < 0.1:
            del item["quantity"]
        items.append(item)
    return items

def gen_orders(n: int, stores: List[Dict], restaurants: List[Dict], now: datetime) -> List[Dict]:
    orders = []
    for _ in range(n):
        created = now - timedelta(days=random.randint(0, 30), minutes=random.randint(0, 1440))
        name, email = random.choice(CUSTOMERS)
        items = gen_items() if random.random() < 0.9 else []
        subtotal = sum(i["price"] * i.get("quantity", 1) for i in items) if items else price_round(random.uniform(1000, 9000))
        order: Dict = {
            "id": rand_id(),
            "status": random.choice(STATUSES),
            "items": items,
            "modifiedBy": random.choice(ACTORS),
        }
        if name:
            order["customerName"] = name
            order["customerEmail"] = email

        # venue reference: store, restaurant, dangling, or none
        roll = random.random()
        if roll < 0.4:
            order["storeId"] = random.choice(stores)["id"]
        elif roll < 0.8:
            order["restaurantId"] = random.choice(restaurants)["id"]
        elif roll < 0.9:
            order["storeId"] = rand_id()

        if random.random() < 0.25:
            discount = price_round(subtotal * random.choice([0.05, 0.1, 0.15]))
            order["discountApplied"] = True
            order["discountAmount"] = discount
            total = subtotal - discount
        else:
            total = subtotal
        # legacy checkout documents carry "total" instead of "totalAmount"
        order["total" if random.random() < 0.2 else "totalAmount"] = price_round(total)

        if random.random() < 0.7:
            order["createdAt"] = exported_ts(created)
        else:
            order["createdAt"] = created.astimezone().strftime("%Y-%m-%d %H:%M:%S")
        modified = created + timedelta(hours=random.randint(0, 48))
        order["modifiedAt"] = exported_ts(modified)
        orders.append(order)
    return orders


def write_json(path: str, documents: List[Dict]) -> None:
    with open(path, "w", encoding="utf-8") as f:
        json.dump(documents, f, indent=2)


def main(argv=None) -> int:
    config = get_config()

    parser = argparse.ArgumentParser(description="Generate fake marketplace documents to JSON.")
    parser.add_argument("--orders", type=int, default=config.default_seed_orders, help="Number of orders to generate.")
    parser.add_argument("--output-dir", type=str, default=config.data_dir)
    parser.add_argument("--seed", type=int, default=config.default_seed_value)
    parser.add_argument("--no-overwrite", action="store_true", help="Fail if JSON files already exist.")
    args = parser.parse_args(argv)

    random.seed(args.seed)

    outdir = args.output_dir
    ensure_dir(outdir)

    files = {
        "stores": os.path.join(outdir, f"{config.stores_collection}.json"),
        "restaurants": os.path.join(outdir, f"{config.restaurants_collection}.json"),
        "orders": os.path.join(outdir, f"{config.orders_collection}.json"),
    }
    if args.no_overwrite:
        for p in files.values():
            if os.path.exists(p):
                print(f"Refusing to overwrite existing file: {p}", file=sys.stderr)
                return 2

    stores = gen_venues(STORE_NAMES)
    restaurants = gen_venues(RESTAURANT_NAMES)
    orders = gen_orders(args.orders, stores, restaurants, datetime.now(timezone.utc))

    write_json(files["stores"], stores)
    write_json(files["restaurants"], restaurants)
    write_json(files["orders"], orders)

    # simple summary
    print(f"Generated data in {outdir}")
    print(f" stores: {len(stores)} | restaurants: {len(restaurants)} | orders: {len(orders)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

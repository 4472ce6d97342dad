"""
Chaos Simulation Script

Seeds the menu and fires concurrent orders at a running server to check
that ids stay unique under load and invalid orders are rejected.
Run from project root: python scripts/simulate.py

Author: Khalil_Bannouri
Version: 1.0.0
"""

import argparse
import asyncio
import random
import sys
import time
from datetime import datetime
from typing import Any

import httpx

# Configuration
API_BASE_URL = "http://localhost:5000"
TOTAL_ORDERS = 50
INVALID_RATE = 0.2

MENU_ITEMS = [
    {"name": "Garlic Bread", "price": 5.99, "category": "Starter"},
    {"name": "Caesar Salad", "price": 8.99, "category": "Starter"},
    {"name": "Pizza Margherita", "price": 14.99, "category": "Main Course"},
    {"name": "Pasta Carbonara", "price": 13.99, "category": "Main Course"},
    {"name": "Tiramisu", "price": 7.99, "category": "Dessert"},
    {"name": "Coke", "price": 2.99, "category": "Beverage"},
    {"name": "Sparkling Water", "price": 3.49, "category": "Beverage"},
]


async def seed_menu(client: httpx.AsyncClient) -> list[int]:
    """Upsert the sample menu and return the item ids now on the server."""
    for item in MENU_ITEMS:
        response = await client.post(f"{API_BASE_URL}/menu", json=item)
        if response.status_code not in (200, 201):
            print(f"   ⚠️ {item['name']}: {response.text[:100]}")

    response = await client.get(f"{API_BASE_URL}/menu")
    response.raise_for_status()
    return [item["id"] for item in response.json()]


def generate_order_items(menu_ids: list[int], invalid: bool) -> list[int]:
    """Pick 1-4 menu ids; invalid orders get one unknown id mixed in."""
    items = [random.choice(menu_ids) for _ in range(random.randint(1, 4))]
    if invalid:
        items.insert(random.randint(0, len(items)), max(menu_ids) + random.randint(100, 999))
    return items


async def send_order(
    client: httpx.AsyncClient,
    order_num: int,
    menu_ids: list[int],
) -> dict[str, Any]:
    """Send one order and classify the outcome."""
    invalid = random.random() < INVALID_RATE
    payload = {"items": generate_order_items(menu_ids, invalid)}
    start_time = time.time()

    try:
        response = await client.post(f"{API_BASE_URL}/orders", json=payload, timeout=30.0)
        elapsed = round(time.time() - start_time, 3)
        data = response.json()

        return {
            "order_num": order_num,
            "expected_invalid": invalid,
            "success": response.status_code == 201,
            "order_id": data.get("orderId"),
            "error": data.get("error"),
            "time": elapsed,
        }
    except Exception as e:
        elapsed = round(time.time() - start_time, 3)
        return {
            "order_num": order_num,
            "expected_invalid": invalid,
            "success": False,
            "order_id": None,
            "error": str(e)[:100],
            "time": elapsed,
        }


async def run_simulation(num_orders: int = TOTAL_ORDERS) -> dict[str, Any]:
    """
    Run the chaos simulation.

    Args:
        num_orders: Number of orders to fire concurrently
    """
    print("=" * 70)
    print("🔥 CHAOS SIMULATION - HIGH CONCURRENCY TEST")
    print("=" * 70)
    print(f"📋 Total Orders: {num_orders}")
    print(f"🎯 Target: {API_BASE_URL}")
    print(f"⏰ Started: {datetime.now().strftime('%H:%M:%S')}")
    print("=" * 70)

    start_time = time.time()

    async with httpx.AsyncClient() as client:
        print("\n🍽️ Seeding menu...")
        menu_ids = await seed_menu(client)
        print(f"   ✅ {len(menu_ids)} menu items available")

        print("\n🚀 Firing orders...\n")
        tasks = [send_order(client, i + 1, menu_ids) for i in range(num_orders)]
        results = await asyncio.gather(*tasks)

    total_time = round(time.time() - start_time, 2)

    placed = [r for r in results if r["success"]]
    rejected = [r for r in results if not r["success"]]
    wrongly_placed = [r for r in placed if r["expected_invalid"]]
    wrongly_rejected = [r for r in rejected if not r["expected_invalid"]]
    order_ids = [r["order_id"] for r in placed]

    print("\n" + "=" * 70)
    print("📊 SIMULATION RESULTS")
    print("=" * 70)
    print(f"\n✅ Placed Orders: {len(placed)}/{num_orders}")
    print(f"🚫 Rejected Orders: {len(rejected)}/{num_orders}")
    print(f"⏱️  Total Time: {total_time}s")

    if placed:
        avg_time = round(sum(r["time"] for r in placed) / len(placed), 3)
        print(f"\n📈 Average Response: {avg_time}s")

    if len(set(order_ids)) != len(order_ids):
        print("\n❌ Duplicate order ids handed out!")
    else:
        print("\n✅ All order ids unique")

    for r in wrongly_placed[:5]:
        print(f"   ⚠️ Order #{r['order_num']} had an unknown item but was placed as #{r['order_id']}")
    for r in wrongly_rejected[:5]:
        print(f"   ⚠️ Order #{r['order_num']} was rejected: {r['error']}")

    print("\n" + "=" * 70)
    print("🔍 NEXT STEP: python scripts/verify.py")
    print("=" * 70)

    return {
        "total": num_orders,
        "placed": len(placed),
        "rejected": len(rejected),
        "anomalies": len(wrongly_placed) + len(wrongly_rejected),
        "total_time": total_time,
        "results": results,
    }


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Chaos Simulation Script")
    parser.add_argument("--orders", type=int, default=TOTAL_ORDERS, help="Number of orders")
    parser.add_argument("--url", default=API_BASE_URL, help="Base URL of the running server")
    args = parser.parse_args()

    API_BASE_URL = args.url.rstrip("/")

    summary = asyncio.run(run_simulation(num_orders=args.orders))
    sys.exit(1 if summary["anomalies"] else 0)

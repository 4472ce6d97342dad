"""
Order Verification Script

Verifies data integrity of a running server's menu and orders.
Run from project root: python scripts/verify.py

Author: Khalil Bannouri
Version: 1.0.0
"""

import argparse
import sys
from datetime import datetime

import httpx

API_BASE_URL = "http://localhost:5000"
VALID_STATUSES = {"Preparing", "Out for Delivery", "Delivered"}
VALID_CATEGORIES = {"Starter", "Main Course", "Dessert", "Beverage"}


def verify_orders(base_url: str) -> bool:
    """Walk the menu and every order id until the first 404."""

    print("=" * 60)
    print("🔍 ORDER VERIFICATION REPORT")
    print("=" * 60)
    print(f"⏰ Timestamp: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}")
    print(f"🎯 Server: {base_url}")
    print("=" * 60)

    ok = True

    with httpx.Client(base_url=base_url, timeout=10.0) as client:
        try:
            menu = client.get("/menu").json()
        except httpx.HTTPError as e:
            print(f"\n❌ Could not reach server: {e}")
            return False

        menu_ids = [item["id"] for item in menu]
        print(f"\n📊 MENU: {len(menu)} item(s)")

        if menu_ids != sorted(set(menu_ids)):
            print("   ⚠️ Menu ids are not unique and increasing")
            ok = False
        else:
            print("   ✅ Menu ids unique and increasing")

        bad_categories = [item for item in menu if item["category"] not in VALID_CATEGORIES]
        if bad_categories:
            print(f"   ⚠️ {len(bad_categories)} item(s) with unknown category")
            ok = False

        by_status = {status: 0 for status in VALID_STATUSES}
        order_id = 1
        while True:
            response = client.get(f"/orders/{order_id}")
            if response.status_code == 404:
                break
            order = response.json()

            if order["id"] != order_id:
                print(f"   ⚠️ Order #{order_id} returned id {order['id']}")
                ok = False
            if order["status"] not in VALID_STATUSES:
                print(f"   ⚠️ Order #{order_id} has unknown status {order['status']!r}")
                ok = False
            else:
                by_status[order["status"]] += 1
            if any(item is None for item in order["items"]):
                print(f"   ⚠️ Order #{order_id} references items missing from the menu")
                ok = False

            order_id += 1

        print(f"\n📦 ORDERS: {order_id - 1}")
        for status, count in by_status.items():
            print(f"   {status}: {count}")

    print("\n" + "=" * 60)
    print("✅ VERIFICATION COMPLETE" if ok else "❌ VERIFICATION FOUND PROBLEMS")
    print("=" * 60)

    return ok


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Order Verification Script")
    parser.add_argument("--url", default=API_BASE_URL, help="Base URL of the running server")
    args = parser.parse_args()

    sys.exit(0 if verify_orders(args.url.rstrip("/")) else 1)

#!/usr/bin/env python3
"""
Smoke script for the order relay API: posts a sample order and prints the reply.

Start the API first (in another terminal):
  cd /path/to/order-relay
  uvicorn order_relay.api.main:app --host 127.0.0.1 --port 8000

Then run this script:
  python scripts/send_test_order.py
  python scripts/send_test_order.py --base-url http://127.0.0.1:8000 --phone "+20 100 123 4567"

If you see "Connection refused", the API is not running — start uvicorn as above.
"""

from __future__ import annotations

import argparse
import json
import sys
from typing import Any, Dict

import requests


def post_json(url: str, data: Dict[str, Any], timeout: int = 30) -> requests.Response:
    return requests.post(url, json=data, timeout=timeout)


def main() -> int:
    parser = argparse.ArgumentParser(description="Send a sample storefront order to the relay API")
    parser.add_argument("--base-url", default="http://localhost:8000", help="API base URL")
    parser.add_argument("--product", default="Test Cap", help="Product name")
    parser.add_argument("--price", default="250 EGP", help="Display price")
    parser.add_argument("--name", default="Test Customer", help="Customer name")
    parser.add_argument("--phone", default="+20 100 123 4567", help="Customer phone")
    parser.add_argument("--address", default="Cairo, Egypt", help="Delivery address")
    parser.add_argument("--quantity", type=int, default=1, help="Quantity")
    parser.add_argument("--notes", default="", help="Optional notes")
    args = parser.parse_args()
    base = args.base_url.rstrip("/")

    order = {
        "productName": args.product,
        "productPrice": args.price,
        "name": args.name,
        "phone": args.phone,
        "address": args.address,
        "quantity": args.quantity,
        "notes": args.notes,
        "pageUrl": f"{base}/smoke-test",
    }

    print("=== Order relay smoke test ===\n")
    print(f"Base URL: {base}\n")

    print("1) GET /health")
    try:
        r = requests.get(f"{base}/health", timeout=10)
        print(f"   {r.status_code} {r.json()}\n")
    except requests.RequestException as e:
        print(f"   FAIL: {e}")
        if "Connection refused" in str(e) or "Failed to establish" in str(e):
            print("   → Start the API first: uvicorn order_relay.api.main:app --host 127.0.0.1 --port 8000")
        return 1

    print("2) POST /api/send-order")
    try:
        r = post_json(f"{base}/api/send-order", order)
    except requests.RequestException as e:
        print(f"   FAIL: {e}")
        return 1
    try:
        body = r.json()
    except ValueError:
        print(f"   {r.status_code} (non-JSON body) {r.text[:500]}")
        return 1
    print(f"   {r.status_code} {json.dumps(body, ensure_ascii=False, indent=2)}\n")

    if not body.get("success"):
        print(f"FAIL: code={body.get('code')}")
        return 1
    print(f"OK: message_id={body.get('message_id')}")
    return 0


if __name__ == "__main__":
    sys.exit(main())

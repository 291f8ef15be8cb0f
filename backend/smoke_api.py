#!/usr/bin/env python3
"""
Smoke check for the fleet service endpoints.
Run this after starting the Flask backend (python app.py).
"""

import os
import requests
import json

# Configuration
BASE_URL = os.getenv("SMOKE_BASE_URL", "http://localhost:3010")
TEST_FLEET_ID = os.getenv("SMOKE_FLEET_ID", "f-100")
TEST_VESSEL_ID = os.getenv("SMOKE_VESSEL_ID", "v-001")


def check_endpoint(endpoint, method="GET", params=None, expected_status=200):
    """Call an API endpoint and report whether it answered with the expected status."""
    url = f"{BASE_URL}{endpoint}"

    try:
        response = requests.request(method, url, params=params, timeout=10)
        print(f"🔍 {method} {endpoint} {params or ''}")
        print(f"   Status: {response.status_code} (expected {expected_status})")

        try:
            result = response.json()
        except json.JSONDecodeError:
            print(f"   ⚠️  Not JSON: {response.text[:100]}...")
            return None

        if response.status_code == expected_status:
            if isinstance(result, list):
                print(f"   ✅ OK - {len(result)} item(s)")
            else:
                print(f"   ✅ OK - Response keys: {list(result.keys())}")
        else:
            print(f"   ❌ Unexpected: {response.text[:200]}...")
        return result

    except requests.exceptions.ConnectionError:
        print(f"   ❌ Connection failed - Is the Flask backend running?")
        return None


def main():
    print("🚢 Fleet Service Smoke Check")
    print("=" * 50)

    print("\n📋 Basic Endpoints:")
    check_endpoint("/")
    check_endpoint("/api/health")
    check_endpoint("/api/allroutes")

    print("\n🛳️  Vessels, Fleets, Locations:")
    check_endpoint("/vessels")
    check_endpoint("/api/vessels")
    check_endpoint(f"/vessels/{TEST_VESSEL_ID}")
    check_endpoint("/fleets")
    check_endpoint("/api/fleets")
    check_endpoint(f"/api/fleets/{TEST_FLEET_ID}/vessels")
    check_endpoint(f"/api/fleets/{TEST_FLEET_ID}/vessels/full")
    check_endpoint("/vessellocations")
    check_endpoint("/api/vessellocations")

    print("\n🔎 Vessel Filter:")
    check_endpoint("/api/vessels/filter", params={"name": "maersk"})
    check_endpoint("/api/vessels/filter", params={"name": ["maersk", "msc"], "op": "or"})
    check_endpoint("/api/vessels/filter", params={"fleetJsonId": TEST_FLEET_ID})
    check_endpoint("/api/vessels/filter", params={}, expected_status=400)
    check_endpoint("/api/vessels/filter", params={"foo": "bar"}, expected_status=400)
    check_endpoint("/api/vessels/filter", params={"name": "x", "op": "xor"}, expected_status=400)
    check_endpoint("/api/vessels/filter", params={"fleetJsonId": "no-such-fleet"}, expected_status=502)
    check_endpoint("/api/vessels/filter", params={"name": "zzz-no-match"}, expected_status=404)

    print("\n" + "=" * 50)
    print("🏁 Smoke check completed!")
    print("\n💡 Tips:")
    print("   - If you see 'Connection failed', make sure the Flask backend is running")
    print("   - Set SMOKE_BASE_URL to point at another host/port")


if __name__ == "__main__":
    main()

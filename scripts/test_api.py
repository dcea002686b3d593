"""Quick smoke script for the API: post both demo samples to /users."""

import json

from fastapi.testclient import TestClient

from shared_validators.api.gateway import app
from shared_validators.demo.samples import SAMPLES

client = TestClient(app)

print("=" * 60)
print("GET /")
print("=" * 60)
response = client.get("/")
print(f"Status code: {response.status_code}")
print(json.dumps(response.json(), indent=2))

expected_status = {"valid": 200, "invalid": 400}
all_passed = response.status_code == 200

for key, (label, payload) in SAMPLES.items():
    print("\n" + "=" * 60)
    print(f"POST /users - {label}")
    print("=" * 60)

    response = client.post("/users", json=payload)
    print(f"Status code: {response.status_code}")
    print(json.dumps(response.json(), indent=2))

    if response.status_code != expected_status[key]:
        print(f"❌ FAIL: expected {expected_status[key]}")
        all_passed = False

print("\n" + "=" * 60)
if all_passed:
    print("✅ ALL CHECKS PASSED!")
else:
    print("❌ CHECKS FAILED!")
print("=" * 60)

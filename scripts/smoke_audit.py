#!/usr/bin/env python3
"""
Smoke test for a running UX Audit Service

Usage:
    python3 main.py                       # in one terminal
    python3 scripts/smoke_audit.py [URL]  # in another
"""

import json
import sys
from pathlib import Path

import requests

# Configuration
BASE_URL = "http://localhost:3000"
TEST_URL = sys.argv[1] if len(sys.argv) > 1 else "https://example.com"


def check_health() -> bool:
    """Check the health endpoint and report the Gemini key status"""
    print("🔍 Checking health...")
    response = requests.get(f"{BASE_URL}/health")
    print(f"Status: {response.status_code}")
    print(f"Response: {response.json()}\n")
    return response.status_code == 200 and response.json().get("gemini_api") == "configured"


def check_missing_url() -> bool:
    """An empty body must be rejected with 400"""
    print("🔍 Checking request validation...")
    response = requests.post(f"{BASE_URL}/api/audit", json={})
    print(f"Status: {response.status_code} {response.json()}\n")
    return response.status_code == 400


def run_audit() -> bool:
    """Request a full audit (blocks while the page renders and Gemini answers)"""
    print(f"🔍 Auditing: {TEST_URL}")
    print("This may take 10-40 seconds...\n")

    response = requests.post(f"{BASE_URL}/api/audit", json={"url": TEST_URL})

    if response.status_code != 200:
        print(f"❌ Error: {response.status_code}")
        print(response.text)
        return False

    _display_audit(response.json())
    return True


def _display_audit(data: dict):
    print(f"{'='*60}")
    print("AUDIT RESULTS")
    print(f"{'='*60}")

    for category in ("heuristics", "golden-rules", "user-flow"):
        findings = data.get(category, [])
        print(f"\n{category.upper()} ({len(findings)} findings)")
        print("-" * 60)
        for finding in findings:
            print(f"[{finding['severity']}/{finding['effort']}] {finding['title']}")
            print(f"   📋 {finding['finding']}")
            print(f"   💡 {finding['recommendation']}")

    benchmark = data.get("benchmark", {})
    print(f"\n🏁 Design score: {benchmark.get('designScore')}")
    print(f"   {benchmark.get('summary')}\n")

    output_file = Path("audit_result.json")
    output_file.write_text(json.dumps(data, indent=2))
    print(f"📄 Full results saved to: {output_file.absolute()}\n")


if __name__ == "__main__":
    try:
        if not check_health():
            print("⚠️  Service is up but GEMINI_API_KEY is not configured")
        if not check_missing_url():
            print("❌ Request validation check failed")
            sys.exit(1)
        sys.exit(0 if run_audit() else 1)
    except requests.exceptions.ConnectionError:
        print(f"\n❌ Could not connect to {BASE_URL}")
        print("Make sure the service is running: python3 main.py")
        sys.exit(1)

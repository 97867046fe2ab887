#!/usr/bin/env python3
# Copyright (c) 2025 Damien Boisvert (AlphaGameDeveloper)
#
# This software is released under the MIT License.
# https://opensource.org/licenses/MIT

"""
Health Check Script for the portfolio site

Usage:
    python healthcheck.py                    # Check localhost:8000
    python healthcheck.py http://example.com # Check custom URL

Exit codes: 0 healthy, 1 degraded, 2 unhealthy, 3 bad response, 4 connection error,
5 timeout, 6 other request error.
"""

import sys
import requests
from datetime import datetime

STATUS_EMOJI = {
    "healthy": "✅",
    "degraded": "⚠️",
    "unhealthy": "❌",
}

def run_healthcheck(base_url="http://127.0.0.1:8000"):
    """Query /api/health on a running site and print a report. Returns an exit code."""

    print(f"🏥 Running portfolio health check")
    print(f"📍 Target: {base_url}")
    print(f"⏰ Time: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}")
    print("=" * 60)

    health_url = f"{base_url.rstrip('/')}/api/health"
    try:
        response = requests.get(health_url, params={"reason": "DockerAutomatedHealthcheck"}, timeout=10)
    except requests.exceptions.ConnectionError:
        print(f"❌ Connection Error: Unable to connect to {base_url}")
        print("   Make sure the portfolio app is running")
        return 4
    except requests.exceptions.Timeout:
        print(f"❌ Timeout Error: Request to {base_url} timed out")
        return 5
    except requests.exceptions.RequestException as e:
        print(f"❌ Request Error: {e}")
        return 6

    print(f"📡 HTTP Status: {response.status_code}")
    try:
        health_data = response.json()
    except ValueError:
        print("❌ Invalid JSON response:")
        print(response.text[:500])
        return 3

    status = health_data.get("status", "unknown")
    print(f"{STATUS_EMOJI.get(status, '❓')} Overall Status: {status.upper()}")
    print(f"🔢 Version: {health_data.get('version', 'unknown')}")
    print(f"🌍 Environment: {health_data.get('environment', 'unknown')}")

    checks = health_data.get("checks", {})
    if checks:
        print("\n📋 Individual Checks:")
        print("-" * 40)
        for check_name, check_data in checks.items():
            check_status = check_data.get("status", "unknown")
            print(f"{STATUS_EMOJI.get(check_status, '❓')} {check_name}: {check_status}")
            for key, value in (check_data.get("details") or {}).items():
                print(f"   └─ {key}: {value}")
            if "message" in check_data:
                print(f"   └─ {check_data['message']}")
            print()

    print("=" * 60)
    if status == "healthy":
        print("🎉 All systems operational!")
        return 0
    if status == "degraded":
        print("⚠️  System operational with warnings")
        return 1
    print("❌ System experiencing issues")
    return 2

def main():
    """Main entry point"""
    if len(sys.argv) > 1:
        base_url = sys.argv[1]
        if not base_url.startswith(('http://', 'https://')):
            base_url = f"http://{base_url}"
    else:
        base_url = "http://127.0.0.1:8000"

    sys.exit(run_healthcheck(base_url))

if __name__ == "__main__":
    main()

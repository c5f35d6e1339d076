"""
Manual acceptance script for /api/v1/coords
Usage:
  python scripts/verify_coords_api.py --base-url http://127.0.0.1:8000 --api-key YOUR_API_KEY
"""

import argparse
import requests


def build_sample_points():
    lat = 40.035937
    lon = 116.308016
    d = 0.01
    return [
        [lon - d, lat - d],
        [lon + d, lat - d],
        [lon + d, lat + d],
        [lon - d, lat + d],
    ]


def main():
    parser = argparse.ArgumentParser()
    parser.add_argument("--base-url", default="http://127.0.0.1:8000")
    parser.add_argument("--api-key", default="dev-only-key-change-in-production")
    parser.add_argument("--from", dest="src", choices=["wgs84", "gcj02", "bd09"], default="wgs84")
    parser.add_argument("--to", dest="dst", choices=["wgs84", "gcj02", "bd09"], default="gcj02")
    args = parser.parse_args()

    base_url = args.base_url.rstrip("/") + "/api/v1/coords"
    headers = {"Authorization": f"Bearer {args.api_key}"}
    points = build_sample_points()

    resp = requests.post(
        base_url + "/convert",
        json={"lng": points[0][0], "lat": points[0][1], "from": args.src, "to": args.dst},
        headers=headers,
        timeout=20,
    )
    print("convert status:", resp.status_code)
    resp.raise_for_status()
    print("convert:", resp.json())

    resp = requests.post(
        base_url + "/convert/batch",
        json={"points": points, "from": args.src, "to": args.dst},
        headers=headers,
        timeout=20,
    )
    print("batch status:", resp.status_code)
    resp.raise_for_status()
    data = resp.json()
    print("count:", data.get("count"))
    if data.get("points"):
        print("sample:", data["points"][0])

    resp = requests.post(
        base_url + "/path-length",
        json={"points": points, "coord_type": args.src},
        headers=headers,
        timeout=20,
    )
    print("path-length status:", resp.status_code)
    resp.raise_for_status()
    print("length_m:", resp.json().get("length_m"))


if __name__ == "__main__":
    main()

"""Lightweight REST client for the fighterstats API."""

from __future__ import annotations

import argparse
import json
from pathlib import Path

import httpx


def build_mapping(text: str) -> str | None:
    if not text:
        return None
    try:
        json.loads(text)
    except json.JSONDecodeError as exc:
        raise SystemExit(f"Invalid mapping JSON: {exc}") from exc
    return text


def main() -> None:
    parser = argparse.ArgumentParser(description="Interact with the fighterstats REST API")
    parser.add_argument("base_url", help="Base URL of the API, e.g. http://localhost:8000")
    parser.add_argument("fighters", type=Path, help="Fighter statistics CSV")
    parser.add_argument("--mapping", default="", help="JSON mapping of field name to CSV column")
    parser.add_argument("--preview-only", action="store_true", help="Fetch load diagnostics without fitting")
    args = parser.parse_args()

    def make_files() -> dict[str, tuple[str, bytes, str]]:
        return {"fighters": (args.fighters.name, args.fighters.read_bytes(), "text/csv")}

    data = {}
    mapping = build_mapping(args.mapping)
    if mapping:
        data["mapping"] = mapping

    with httpx.Client(base_url=args.base_url) as client:
        resp = client.post("/preview", files=make_files(), data=data)
        resp.raise_for_status()
        print("Load report:", json.dumps(resp.json(), indent=2))

        if args.preview_only:
            return

        resp = client.post("/analyze", files=make_files(), data=data)
        if resp.status_code == 422:
            raise SystemExit(f"analysis failed: {resp.json().get('detail')}")
        resp.raise_for_status()
        payload = resp.json()
        print(f"Fitted on {payload['clean_records']} records (r2={payload['r_squared']})")
        for item in payload["importances"]:
            print(f"{item['feature']:<30} {item['coefficient']:>8.4f}")


if __name__ == "__main__":
    main()

"""
End-to-end smoke test against a running EasyWine gateway:
- Health
- Pairing from text only
- Pairing from text + category
- Pairing with a photo (optional, --image)

Default base_url: http://127.0.0.1:8076
"""
import argparse
import base64
import json
import mimetypes
import sys
from pathlib import Path
from typing import Any, Dict, Optional

import httpx


def _pp(title: str, obj: Any):
    print(f"\n===== {title} =====")
    print(json.dumps(obj, indent=2, ensure_ascii=False))


def _post(base_url: str, path: str, payload: Dict[str, Any], timeout: int = 90) -> httpx.Response:
    url = f"{base_url.rstrip('/')}{path}"
    return httpx.post(url, json=payload, timeout=timeout)


def _get(base_url: str, path: str, timeout: int = 30) -> httpx.Response:
    url = f"{base_url.rstrip('/')}{path}"
    return httpx.get(url, timeout=timeout)


def _data_url(path: Path) -> str:
    mime = mimetypes.guess_type(path.name)[0] or "image/jpeg"
    return f"data:{mime};base64," + base64.b64encode(path.read_bytes()).decode("ascii")


def test_health(base_url: str) -> bool:
    r = _get(base_url, "/health")
    _pp("Health", {"status_code": r.status_code, "response": r.json()})
    return r.status_code == 200


def test_pairing(base_url: str, title: str, payload: Dict[str, Any]) -> bool:
    r = _post(base_url, "/api/harmonize", payload)
    try:
        body = r.json()
    except ValueError:
        body = r.text
    _pp(title, {"status_code": r.status_code, "response": body})
    return r.status_code == 200 and isinstance(body, dict) and "estilo" in body


def main(argv: Optional[list] = None) -> int:
    parser = argparse.ArgumentParser(description="EasyWine gateway smoke test")
    parser.add_argument("--base-url", default="http://127.0.0.1:8076", help="API base URL")
    parser.add_argument("--user", default="Ana")
    parser.add_argument("--image", default=None, help="Optional dish photo to send")
    args = parser.parse_args(argv)

    results = {"health": test_health(args.base_url)}
    results["text"] = test_pairing(args.base_url, "Pairing (text)", {
        "ingredients": "feijoada",
        "userName": args.user,
    })
    results["category"] = test_pairing(args.base_url, "Pairing (text + category)", {
        "ingredients": "hambúrguer duplo com bacon",
        "category": "Fast Food",
        "userName": args.user,
    })
    if args.image:
        results["image"] = test_pairing(args.base_url, "Pairing (photo)", {
            "image": _data_url(Path(args.image)),
            "userName": args.user,
        })

    _pp("Summary", results)
    return 0 if all(results.values()) else 1


if __name__ == "__main__":
    sys.exit(main())

from __future__ import annotations

import sys
from pathlib import Path

# Allow running as: python scripts/signup_smoketest.py
REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT))

from fastapi.testclient import TestClient

from signup_api.main import app
from signup_api.settings import get_settings


def main() -> int:
    c = TestClient(app)
    duplicate_status = get_settings().signup_conflict_status

    body = {"name": "Ana", "email": "ana@x.com", "password": "secret"}

    r = c.post("/signup", json={"name": "Ana"})
    print("/signup(missing)", r.status_code, r.json())
    if r.status_code != 400:
        return 1

    r = c.post("/signup", json=body)
    print("/signup", r.status_code, r.json())
    if r.status_code != 201:
        return 1

    r = c.post("/signup", json=body)
    print("/signup(again)", r.status_code, r.json())
    if r.status_code != duplicate_status:
        return 1

    return 0


if __name__ == "__main__":
    raise SystemExit(main())

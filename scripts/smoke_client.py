import os
import sys
import json
import requests

BASE_URL = os.environ.get("SMOKE_URL") or os.environ.get("DEV_URL", "http://127.0.0.1:5002")
API = f"{BASE_URL.rstrip('/')}/api"

def get(path: str):
    r = requests.get(f"{API}{path}", timeout=10)
    r.raise_for_status()
    return r

def post(path: str, payload: dict):
    r = requests.post(f"{API}{path}", json=payload, timeout=60)
    r.raise_for_status()
    return r

def main():
    print(f"[smoke] Target: {API}")
    print("[smoke] /health:", get("/health").status_code)
    print("[smoke] /health/ready:", get("/health/ready").status_code)

    try:
        r = post("/precedents/search", {"topic": "Horas extras", "context": "Reclamante alega labor habitual apos a jornada contratual."})
        print("[smoke] topic search:", r.status_code, json.dumps(r.json(), indent=2, ensure_ascii=False)[:300])
        r = post("/precedents/search", {"filters": {"searchTerm": "intervalo intrajornada", "tribunal": ["TST"]}})
        print("[smoke] free-text search:", r.status_code, r.json().get("count"))
    except requests.HTTPError as he:
        if he.response is not None and he.response.status_code == 503:
            print("[smoke] search engine or corpus unavailable (503)")
        else:
            raise

if __name__ == "__main__":
    try:
        main()
    except Exception as e:
        print("[smoke] FAILED:", e)
        sys.exit(1)

"""
Pin the deterministic word of each of the next N days through the admin API.

For every date the script asks the server for its word of the day and then
stores that word with the admin set-word endpoint, so the schedule survives
later changes to the word list order.

Usage:
    python scripts/set_words_30_days.py --base-url http://localhost:5000 --days 30

The admin password is read from --password, or ADMIN_PASSWORD in the
environment / punjabi_wordle/config/config.env.
"""

import argparse
import os
import sys
import time
from datetime import date, timedelta
from pathlib import Path
from typing import Dict, List, Optional

import requests
from dotenv import load_dotenv

ENV_FILE = Path(__file__).resolve().parent.parent / "punjabi_wordle" / "config" / "config.env"


def _date_key(day: date) -> str:
    return f"{day.year:04d}-{day.month:02d}-{day.day:02d}"


def get_word_for_date(session: requests.Session, base_url: str, date_key: str) -> Optional[str]:
    try:
        response = session.get(f"{base_url}/api/word-of-day", params={"date": date_key}, timeout=10)
        response.raise_for_status()
        return response.json().get("word")
    except (requests.RequestException, ValueError) as e:
        print(f"Error getting word for {date_key}: {e}")
        return None


def set_word_for_date(session: requests.Session, base_url: str, date_key: str,
                      word: str, password: str) -> Dict:
    headers = {"Authorization": f"Bearer {password}"} if password else {}
    try:
        response = session.post(
            f"{base_url}/api/admin/set-word",
            json={"date": date_key, "word": word},
            headers=headers,
            timeout=10,
        )
        data = response.json()
        return {"success": response.ok, "data": data}
    except (requests.RequestException, ValueError) as e:
        return {"success": False, "error": str(e)}


def set_words(base_url: str, days: int, password: str, delay: float = 0.1) -> List[Dict]:
    session = requests.Session()
    today = date.today()
    results: List[Dict] = []

    print(f"Setting words for the next {days} days...\n")

    for offset in range(days):
        date_key = _date_key(today + timedelta(days=offset))

        word = get_word_for_date(session, base_url, date_key)
        if not word:
            print(f"✗ {date_key}: Failed to get word")
            results.append({"date": date_key, "success": False, "error": "Failed to get word"})
            continue

        result = set_word_for_date(session, base_url, date_key, word, password)
        if result["success"]:
            print(f"✓ {date_key}: {word}")
            results.append({"date": date_key, "word": word, "success": True})
        else:
            error = result.get("error") or result.get("data", {}).get("error") or "Failed"
            print(f"✗ {date_key}: {error}")
            results.append({"date": date_key, "word": word, "success": False, "error": error})

        time.sleep(delay)

    successful = sum(1 for r in results if r["success"])
    print("\nSummary:")
    print(f"  Successful: {successful}")
    print(f"  Failed: {len(results) - successful}")
    for r in results:
        if not r["success"]:
            print(f"    {r['date']}: {r.get('error', 'Unknown error')}")

    return results


def main(argv: Optional[List[str]] = None) -> int:
    load_dotenv(ENV_FILE)

    parser = argparse.ArgumentParser(description="Pin the word of the day for upcoming dates.")
    parser.add_argument("--base-url", default=os.getenv("BASE_URL", "http://localhost:5000"))
    parser.add_argument("--days", type=int, default=30)
    parser.add_argument("--password", default=os.getenv("ADMIN_PASSWORD", ""))
    parser.add_argument("--delay", type=float, default=0.1, help="seconds between requests")
    args = parser.parse_args(argv)

    print(f"Using password: {'***' if args.password else 'none'}")
    print(f"Base URL: {args.base_url}\n")

    results = set_words(args.base_url.rstrip("/"), args.days, args.password, args.delay)
    return 0 if all(r["success"] for r in results) else 1


if __name__ == "__main__":
    sys.exit(main())

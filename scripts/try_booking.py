#!/usr/bin/env python3
from __future__ import annotations

import argparse
from datetime import date, datetime, time

import httpx
from httpx import ConnectError


def _at(day: date, hhmm: str) -> str:
    hour, minute = (int(part) for part in hhmm.split(":"))
    return datetime.combine(day, time(hour, minute)).isoformat()


def main() -> None:
    parser = argparse.ArgumentParser(description="Book a room against a running Room Booker server")
    parser.add_argument("--url", default="http://127.0.0.1:8001")
    parser.add_argument("--user", default="Sam Wilson")
    parser.add_argument("--room", default="room-1")
    parser.add_argument("--day", default=date.today().isoformat())
    parser.add_argument("--start", default="09:00")
    parser.add_argument("--end", default="10:00")
    parser.add_argument("--title", default="Ad-hoc meeting")
    args = parser.parse_args()

    day = date.fromisoformat(args.day)
    with httpx.Client(base_url=args.url, timeout=10.0) as client:
        try:
            login = client.post("/v1/auth/login", json={"username": args.user, "password": "password"})
        except ConnectError:
            print("Connection refused. Is the FastAPI server running?")
            print("Try: uvicorn roombooker.main:app --reload --port 8001")
            return
        if login.status_code != 200:
            print(login.status_code, login.text)
            return

        resp = client.post(
            "/v1/bookings",
            json={
                "room_id": args.room,
                "title": args.title,
                "start_time": _at(day, args.start),
                "end_time": _at(day, args.end),
            },
        )
        print(resp.status_code)
        print(resp.text)

        slots = client.get(f"/v1/rooms/{args.room}/slots", params={"day": args.day, "merge": True})
        for segment in slots.json():
            label = "free" if segment["free"] else f"busy ({segment['booking_id']})"
            print(f"{segment['start'][11:16]}-{segment['end'][11:16]}  {label}")


if __name__ == "__main__":
    main()

#!/usr/bin/env python3
"""
Seed the care database with a demo account and sample records.

Creates (or reuses) a demo user and fills in medications, readings and
appointments relative to today, so the dashboard shows reminders and
trends straight away.

Usage:
    python scripts/seed_demo_data.py [--email demo@example.com] [--password demo1234]
"""
import argparse
import sys
from datetime import date, datetime, time, timedelta
from pathlib import Path

# Base directory (project root)
BASE_DIR = Path(__file__).parent.parent
for path in (BASE_DIR, BASE_DIR / "src"):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))

from server.care_api.config import Settings, get_settings
from server.care_api.database import DatabaseManager
from server.care_api.security import hash_password

DEMO_MEDICATIONS = [
    # name, dosage, frequency, doses_per_day, time, stock, refill_threshold
    ("Amlodipine", "5mg", "Daily", 1, "08:00", 24, 5),
    ("Metformin", "500mg", "Twice Daily", 2, "09:00", 7, 6),
    ("Aspirin", "75mg", "Daily", 1, "20:00", 3, 5),
]

DEMO_APPOINTMENTS = [
    # title, doctor, days from today, hour, minute
    ("Cardiology follow-up", "Dr. Mehta", 0, 16, 30),
    ("Eye check", "Dr. Iyer", 3, 11, 0),
    ("Blood work", "City Lab", -5, 9, 0),
]

DEMO_READINGS = [
    # type, systolic, diastolic, value, days ago
    ("bp", 128, 82, None, 6),
    ("bp", 135, 88, None, 4),
    ("sugar", None, None, 142.0, 3),
    ("bp", 146, 94, None, 2),
    ("sugar", None, None, 188.5, 1),
    ("bp", 122, 79, None, 0),
]


def seed(settings: Settings, email: str, password: str, name: str = "Demo User") -> dict:
    """
    Create the demo user if missing and insert the sample records.

    Args:
        settings: Settings whose db_path receives the data
        email: Demo account email
        password: Demo account password
        name: Demo account display name

    Returns:
        Dictionary with the user id and the number of rows inserted per table
    """
    db = DatabaseManager(settings)
    db.initialize()
    today = date.today()

    with db.connect() as conn:
        row = conn.execute("SELECT id FROM users WHERE email = ?", (email.lower(),)).fetchone()
        if row:
            user_id = row["id"]
        else:
            user_id = conn.execute(
                "INSERT INTO users (name, email, password) VALUES (?, ?, ?)",
                (name, email.lower(), hash_password(password)),
            ).lastrowid

        conn.executemany(
            """
            INSERT INTO medications
                (user_id, name, dosage, frequency, doses_per_day, time, stock, refill_threshold)
            VALUES (?, ?, ?, ?, ?, ?, ?, ?)
            """,
            [(user_id, *med) for med in DEMO_MEDICATIONS],
        )

        conn.executemany(
            "INSERT INTO appointments (user_id, title, doctor, date, attended) VALUES (?, ?, ?, ?, ?)",
            [
                (
                    user_id,
                    title,
                    doctor,
                    datetime.combine(today + timedelta(days=offset), time(hour, minute)).isoformat(timespec="minutes"),
                    1 if offset < 0 else 0,
                )
                for title, doctor, offset, hour, minute in DEMO_APPOINTMENTS
            ],
        )

        conn.executemany(
            """
            INSERT INTO health_metrics (user_id, type, systolic, diastolic, value, recorded_at)
            VALUES (?, ?, ?, ?, ?, ?)
            """,
            [
                (
                    user_id,
                    kind,
                    systolic,
                    diastolic,
                    value,
                    datetime.combine(today - timedelta(days=days_ago), time(8, 0)).isoformat(timespec="seconds"),
                )
                for kind, systolic, diastolic, value, days_ago in DEMO_READINGS
            ],
        )

    return {
        "user_id": user_id,
        "medications": len(DEMO_MEDICATIONS),
        "appointments": len(DEMO_APPOINTMENTS),
        "health_metrics": len(DEMO_READINGS),
    }


def main():
    """Seed the configured database."""
    parser = argparse.ArgumentParser(description="Seed demo care data")
    parser.add_argument("--email", default="demo@example.com")
    parser.add_argument("--password", default="demo1234")
    args = parser.parse_args()

    settings = get_settings()

    print("=" * 60)
    print("Care Companion Demo Data")
    print("=" * 60)
    print(f"\nDatabase: {settings.db_path}\n")

    result = seed(settings, args.email, args.password)

    print(f"  User id: {result['user_id']} ({args.email})")
    for table in ("medications", "appointments", "health_metrics"):
        print(f"  {table}: {result[table]} rows inserted")
    print()
    print("=" * 60)


if __name__ == "__main__":
    main()

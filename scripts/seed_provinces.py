#!/usr/bin/env python3
"""Seed province/state reference data and a few demo members.

Usage:
    python scripts/seed_provinces.py          # uses DATABASE_URL from env / .env
    python scripts/seed_provinces.py --no-members
"""
from __future__ import annotations

import sys

from sqlalchemy.orm import Session

# Ensure project root is on sys.path
sys.path.insert(0, ".")

from sailclub.db.base import Base
from sailclub.db.reference import seed_provinces
from sailclub.db.session import get_engine
from sailclub.members.service import MemberService, MemberValidationError
from sailclub.validation import MemberRecord


def seed_members(session: Session) -> int:
    """Insert demo members through the validator; return how many were saved."""
    service = MemberService(session)
    demo_members = [
        MemberRecord(
            first_name="john", last_name="SMITH", spouse_first_name="jane",
            spouse_last_name="smith", street="12 harbour st", city="kingston",
            province_code="on", postal_code="k7l2v7", home_phone="(613) 555-0101",
            email="jsmith@sailclub.ca", year_joined=2009,
        ),
        MemberRecord(
            first_name="marie", last_name="tremblay", street="4 rue du port",
            city="gatineau", province_code="QC", postal_code="J8X 1A1",
            home_phone="819.555.0102", year_joined=2015, use_canada_post=True,
        ),
        MemberRecord(
            first_name="bob", last_name="miller", spouse_first_name="ann",
            spouse_last_name="lee", city="buffalo", province_code="NY",
            postal_code="142021234", home_phone="716 555 0103",
            email="bob.miller@lakeshore.org", year_joined=2020, task_exempt=True,
        ),
    ]

    saved = 0
    for record in demo_members:
        try:
            service.create(record)
        except MemberValidationError as exc:
            print(f"Skipped {record.full_name}: {[f.field for f in exc.failures]}")
            continue
        saved += 1
    return saved


def main() -> None:
    engine = get_engine()
    Base.metadata.create_all(engine)

    with Session(engine) as session:
        provinces = seed_provinces(session)
        members = 0 if "--no-members" in sys.argv else seed_members(session)
        session.commit()

    print(f"Seeded {provinces} provinces/states, {members} members.")


if __name__ == "__main__":
    main()

#!/usr/bin/env python3
"""
Employee seeder script - creates demo employees for local runs
"""
import asyncio
import sys
from pathlib import Path

from sqlalchemy import func, select

# Make the app package importable when run from a checkout
sys.path.append(str(Path(__file__).parent.parent))

from app.db import SessionLocal, init_db
from app.models import EmployeeORM

DEMO_EMPLOYEES = [
    {"first_name": "Ada", "last_name": "Lovelace", "location": "London", "email": "ada.lovelace@example.com"},
    {"first_name": "Alan", "last_name": "Turing", "location": "Manchester", "email": "alan.turing@example.com"},
    {"first_name": "Grace", "last_name": "Hopper", "location": "New York", "email": "grace.hopper@example.com"},
    {"first_name": "Edsger", "last_name": "Dijkstra", "location": "Eindhoven", "email": "edsger.dijkstra@example.com"},
    {"first_name": "Barbara", "last_name": "Liskov", "location": "Boston", "email": "barbara.liskov@example.com"},
    {"first_name": "Donald", "last_name": "Knuth", "location": "Stanford", "email": "donald.knuth@example.com"},
    {"first_name": "Margaret", "last_name": "Hamilton", "location": "Cambridge", "email": "margaret.hamilton@example.com"},
    {"first_name": "Ken", "last_name": "Thompson", "location": "Murray Hill", "email": "ken.thompson@example.com"},
]


async def seed_employees():
    """Seed the database with demo employees"""
    print("🌱 Seeding employees...")

    await init_db()

    async with SessionLocal() as session:
        result = await session.execute(select(func.count(EmployeeORM.id)))
        count = result.scalar()

        if count > 0:
            print(f"⚠️  Database already has {count} employees. Skipping seed.")
            return

        session.add_all([EmployeeORM(**emp_data) for emp_data in DEMO_EMPLOYEES])
        await session.commit()

        print(f"✅ Successfully seeded {len(DEMO_EMPLOYEES)} employees")

        result = await session.execute(
            select(EmployeeORM.location, func.count(EmployeeORM.id))
            .group_by(EmployeeORM.location)
            .order_by(EmployeeORM.location)
        )

        print("\n📊 Employees by location:")
        for location, location_count in result.all():
            print(f"  {location}: {location_count}")


if __name__ == "__main__":
    asyncio.run(seed_employees())

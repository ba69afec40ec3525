#!/usr/bin/env python3
"""
Seed script: installs the sample FRA decision rules.
Run after migrations: python scripts/seed.py
"""

import asyncio
import os
import sys

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from fra_dss.database import async_session_maker, engine
from fra_dss.samples import install_sample_rules
from fra_dss.storage.repositories import SqlRuleStore


async def seed():
    async with async_session_maker() as session:
        created = await install_sample_rules(SqlRuleStore(session))
        await session.commit()
    await engine.dispose()

    if created:
        for rule in created:
            print(f"Created rule {rule.id}: {rule.name} (priority {rule.priority})")
    else:
        print("Sample rules already present.")

    print("Seed complete!")
    print("Example: curl -X POST http://localhost:8000/api/decision-rules/evaluate \\")
    print('  -H "Content-Type: application/json" \\')
    print('  -d \'{"forest_type":"protected","area_hectares":7,"claim_type":"community","witnesses_count":2}\'')


if __name__ == "__main__":
    asyncio.run(seed())

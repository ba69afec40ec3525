#!/usr/bin/env python3
"""
Generate sample_responses.json from sample_requests.json.
Runs the sample rules through an in-memory store (no DB/API needed).
Usage: python scripts/generate_sample_responses.py
"""

import asyncio
import json
import sys
from pathlib import Path

# Add project root
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from fra_dss.engine.evaluator import DecisionRulesEngine
from fra_dss.samples import install_sample_rules
from fra_dss.schemas.evaluation import EvaluateResponse
from fra_dss.storage.memory import InMemoryRuleStore


async def generate(records: list[dict]) -> list[dict]:
    store = InMemoryRuleStore()
    await install_sample_rules(store)
    engine = DecisionRulesEngine(store)

    responses = []
    for record in records:
        results, recommendations = await engine.recommend(record)
        resp = EvaluateResponse(evaluation_results=results, recommendations=recommendations)
        responses.append({"record": record, **resp.model_dump()})
    return responses


def main():
    examples_dir = Path(__file__).resolve().parent.parent / "examples"
    requests_path = examples_dir / "sample_requests.json"
    responses_path = examples_dir / "sample_responses.json"

    if not requests_path.exists():
        print(f"Error: {requests_path} not found")
        sys.exit(1)

    with open(requests_path) as f:
        records = json.load(f)

    responses = asyncio.run(generate(records))

    with open(responses_path, "w") as f:
        json.dump(responses, f, indent=2)

    print(f"Generated {len(responses)} sample responses -> {responses_path}")


if __name__ == "__main__":
    main()

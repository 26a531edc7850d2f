#!/usr/bin/env python3
"""
Capacity Lens Demo.

Demonstrates the core capabilities:
1. Synthetic planning data
2. 4-factor scoring and strategy classification
3. Same forecast, different flights, different strategies
4. Forecast-only vs strategy-driven comparison
"""

import logging

from capacity_lens.config import get_settings
from capacity_lens.data import load_dataset
from capacity_lens.data.synthetic import RouteDataGenerator
from capacity_lens.logging_setup import setup_logging
from capacity_lens.services import DecisionEngineService


def print_section(title: str):
    """Print a section header."""
    print()
    print("=" * 60)
    print(f"  {title}")
    print("=" * 60)


def main():
    settings = get_settings()
    setup_logging(settings.log_level)
    logger = logging.getLogger("demo")

    print()
    print("*" * 60)
    print("*   Capacity Lens: Route Capacity Decision Engine   *")
    print("*" * 60)

    # 1. Planning data
    print_section("1. Planning Data")

    if settings.data_dir is not None:
        dataset = load_dataset(settings.data_dir)
    else:
        logger.info("Using synthetic dataset")
        dataset = RouteDataGenerator(seed=settings.seed).generate_dataset(days=30)

    routes = dataset.routes()
    print(f"Routes: {', '.join(routes)}")
    print(f"Flights: {', '.join(dataset.flight_ids())}")
    print(f"Forecast days: {len(dataset.dates())}")

    engine = DecisionEngineService(dataset, cost_per_unit=settings.cost_per_unit)

    # 2. Decision lens
    print_section("2. 4-Factor Decision Lens")

    route = routes[0]
    flight_id = dataset.flight_ids()[0] if dataset.flight_ids() else None
    decision = engine.evaluate(route, flight_id)
    print(f"Route {route}, flight {flight_id}")
    for name, level in decision.factor_levels.items():
        score = getattr(decision.scores, name)
        print(f"  {name:18} {score * 100:5.1f}%  ({level.value})")
    print(f"Strategy: {decision.strategy.value}")

    # 3. Same forecast, different flights
    print_section("3. Same Forecast, Different Decisions")

    for fid in dataset.flight_ids():
        d = engine.evaluate(route, fid)
        print(f"  {route} on {fid:6}: {d.strategy.value}")

    # 4. Comparison
    print_section("4. Forecast-Only vs Strategy-Driven")

    for r in routes:
        comparison = engine.compare(r)
        if comparison is None:
            print(f"  {r}: no execution data")
            continue
        fo = comparison.forecast_only
        sd = comparison.strategy_driven
        print(f"  {r}")
        print(f"    Reliability   {fo.reliability:6.1f}% -> {sd.reliability:6.1f}%")
        print(f"    Utilization   {fo.avg_utilization:6.1f}% -> {sd.avg_utilization:6.1f}%")
        print(f"    Delay rate    {fo.delay_rate:6.1f}% -> {sd.delay_rate:6.1f}%")
        print(f"    Void capacity {fo.avg_void_capacity:7.1f} -> {sd.avg_void_capacity:7.1f}")

    impact = engine.impact(route)
    if impact is not None:
        print()
        print(f"Estimated savings on {route}: ${impact.estimated_cost_savings:,.0f} over {impact.days} days")

    print()
    print("=" * 60)
    print("  Demo Complete!")
    print("=" * 60)
    print()
    print("To run the API server:")
    print("  uvicorn capacity_lens.api:app --reload")
    print()
    print("API Documentation at: http://localhost:8000/docs")
    print()


if __name__ == "__main__":
    main()

"""
Tabular dataset loading.

Reads the planning extracts (forecast output, flight capacity master and
planning-vs-execution summary) and parses them into domain models grouped
for lookup by route and flight.
"""

import logging
from pathlib import Path

import pandas as pd
from pydantic import ValidationError

from capacity_lens.domain import DemandObservation, ExecutionRecord, FlightProfile

logger = logging.getLogger(__name__)

FORECAST_FILE = "forecasted_demand_output.csv"
FLIGHT_FILE = "flight_capacity_master.csv"
SUMMARY_FILE = "planning_vs_execution_summary.csv"

FORECAST_NUMERIC = ["forecasted_demand", "forecast_confidence"]
FLIGHT_NUMERIC = ["max_capacity", "fixed_cost", "variable_cost_per_unit", "delay_risk_score"]
SUMMARY_NUMERIC = [
    "forecasted_demand",
    "committed_capacity",
    "actual_net_weight",
    "void_capacity",
    "load_factor",
]


class DatasetError(Exception):
    """Raised when a planning extract is missing or unreadable."""


class RouteDataset:
    """
    In-memory planning data, indexed by route and flight.

    Usage:
        dataset = load_dataset("data/")
        demand = dataset.demand_for("DEL-FRA")
        flight = dataset.flight("FX366")
    """

    def __init__(
        self,
        demand: list[DemandObservation],
        flights: list[FlightProfile],
        execution: list[ExecutionRecord],
    ):
        self._demand: dict[str, list[DemandObservation]] = {}
        for obs in sorted(demand, key=lambda o: o.period):
            self._demand.setdefault(obs.route or "", []).append(obs)

        self._flights = {f.flight_id: f for f in flights}

        self._execution: dict[str, list[ExecutionRecord]] = {}
        for record in sorted(execution, key=lambda r: r.date):
            self._execution.setdefault(record.route, []).append(record)

    def routes(self) -> list[str]:
        """All routes with forecast or execution data."""
        return sorted(set(self._demand) | set(self._execution))

    def dates(self) -> list[str]:
        """All forecast periods, ISO formatted."""
        periods = {obs.period for series in self._demand.values() for obs in series}
        return [p.isoformat() for p in sorted(periods)]

    def flight_ids(self) -> list[str]:
        return list(self._flights)

    def has_route(self, route: str) -> bool:
        return route in self._demand or route in self._execution

    def demand_for(self, route: str) -> list[DemandObservation]:
        """Forecast series for a route, oldest first."""
        return list(self._demand.get(route, []))

    def flight(self, flight_id: str | None) -> FlightProfile | None:
        if flight_id is None:
            return None
        return self._flights.get(flight_id)

    def execution_for(self, route: str) -> list[ExecutionRecord]:
        """Execution records for a route, oldest first."""
        return list(self._execution.get(route, []))


def _read_csv(path: Path, numeric: list[str]) -> pd.DataFrame:
    if not path.exists():
        raise DatasetError(f"Missing data file: {path}")
    try:
        df = pd.read_csv(path, skip_blank_lines=True)
    except (pd.errors.ParserError, pd.errors.EmptyDataError, UnicodeDecodeError) as e:
        raise DatasetError(f"Cannot parse {path}: {e}") from e

    for column in numeric:
        if column in df.columns:
            df[column] = pd.to_numeric(df[column], errors="coerce")
    return df


def _optional(value) -> float | None:
    return None if pd.isna(value) else float(value)


def parse_demand(df: pd.DataFrame) -> list[DemandObservation]:
    """Parse forecast output rows."""
    observations = []
    for row in df.to_dict(orient="records"):
        observations.append(
            DemandObservation(
                route=row["route"],
                period=pd.to_datetime(row["time_period"]).date(),
                forecasted_demand=_optional(row.get("forecasted_demand")),
                forecast_confidence=_optional(row.get("forecast_confidence")),
            )
        )
    return observations


def parse_flights(df: pd.DataFrame) -> list[FlightProfile]:
    """Parse flight capacity master rows. Missing numbers become 0."""
    df = df.copy()
    present = [c for c in FLIGHT_NUMERIC if c in df.columns]
    df[present] = df[present].fillna(0.0)
    if "real_time_update_flag" in df.columns:
        df["real_time_update_flag"] = df["real_time_update_flag"].fillna(0).astype(str)

    return [
        FlightProfile.model_validate({**row, "flight_id": str(row["flight_id"])})
        for row in df.to_dict(orient="records")
    ]


def parse_execution(df: pd.DataFrame) -> list[ExecutionRecord]:
    """Parse planning-vs-execution summary rows. Missing numbers become 0."""
    df = df.copy()
    present = [c for c in SUMMARY_NUMERIC if c in df.columns]
    df[present] = df[present].fillna(0.0)

    records = []
    for row in df.to_dict(orient="records"):
        records.append(
            ExecutionRecord(
                date=pd.to_datetime(row["date"]).date(),
                route=row["route"],
                **{c: float(row[c]) for c in present},
            )
        )
    return records


def _parse(path: Path, numeric: list[str], parse):
    df = _read_csv(path, numeric)
    try:
        return parse(df)
    except (ValidationError, KeyError, TypeError, ValueError) as e:
        raise DatasetError(f"Invalid row in {path}: {e}") from e


def load_dataset(data_dir: str | Path) -> RouteDataset:
    """
    Load all planning extracts from a directory.

    Raises:
        DatasetError: If the directory or a required file is missing or unreadable,
            or a row has an invalid value (blank date, negative cost, ...)
    """
    data_dir = Path(data_dir)
    if not data_dir.is_dir():
        raise DatasetError(f"Data directory not found: {data_dir}")

    demand = _parse(data_dir / FORECAST_FILE, FORECAST_NUMERIC, parse_demand)
    flights = _parse(data_dir / FLIGHT_FILE, FLIGHT_NUMERIC, parse_flights)
    execution = _parse(data_dir / SUMMARY_FILE, SUMMARY_NUMERIC, parse_execution)

    logger.info(
        "Loaded dataset from %s: %d forecast rows, %d flights, %d execution rows",
        data_dir,
        len(demand),
        len(flights),
        len(execution),
    )
    return RouteDataset(demand=demand, flights=flights, execution=execution)

"""Tests for dataset loading and synthetic data."""

import pytest
from datetime import date

from capacity_lens.data import DatasetError, load_dataset
from capacity_lens.data.synthetic import RouteDataGenerator
from capacity_lens.services import DecisionEngineService, score_demand_stability

FORECAST_CSV = """route,time_period,base_demand,forecasted_demand,forecast_confidence
DEL-FRA,2026-01-02,410,420.5,0.9
DEL-FRA,2026-01-01,400,400.0,0.8
DEL-FRA,2026-01-03,,,

BOM-LHR,2026-01-01,300,310,0.7
"""

FLIGHT_CSV = """flight_id,max_capacity,fixed_cost,variable_cost_per_unit,delay_risk_score,real_time_update_flag
FX366,500,1000,1,0.2,1
FX512,600,800,3.5,,0
"""

SUMMARY_CSV = """date,route,forecasted_demand,committed_capacity,actual_net_weight,void_capacity,load_factor
2026-01-01,DEL-FRA,100,90,95,0,105.6
2026-01-02,DEL-FRA,100,90,20,70,22.2
"""


@pytest.fixture
def data_dir(tmp_path):
    """Directory with the three planning extracts."""
    (tmp_path / "forecasted_demand_output.csv").write_text(FORECAST_CSV)
    (tmp_path / "flight_capacity_master.csv").write_text(FLIGHT_CSV)
    (tmp_path / "planning_vs_execution_summary.csv").write_text(SUMMARY_CSV)
    return tmp_path


class TestLoadDataset:
    """Tests for CSV dataset loading."""

    def test_routes_and_flights(self, data_dir):
        """Test routes, dates and flights are indexed."""
        dataset = load_dataset(data_dir)

        assert dataset.routes() == ["BOM-LHR", "DEL-FRA"]
        assert dataset.dates() == ["2026-01-01", "2026-01-02", "2026-01-03"]
        assert dataset.flight_ids() == ["FX366", "FX512"]

    def test_demand_sorted_and_coerced(self, data_dir):
        """Test forecast series is chronological with blanks as None."""
        demand = load_dataset(data_dir).demand_for("DEL-FRA")

        assert [o.period for o in demand] == [date(2026, 1, 1), date(2026, 1, 2), date(2026, 1, 3)]
        assert demand[1].forecasted_demand == pytest.approx(420.5)
        assert demand[2].forecasted_demand is None
        assert demand[1].forecast_confidence == pytest.approx(0.9)
        assert demand[2].forecast_confidence is None

    def test_flight_parsing(self, data_dir):
        """Test numeric coercion and flags."""
        dataset = load_dataset(data_dir)

        fx366 = dataset.flight("FX366")
        assert fx366.max_capacity == 500
        assert fx366.real_time_update_flag is True

        fx512 = dataset.flight("FX512")
        assert fx512.delay_risk_score == 0.0
        assert fx512.real_time_update_flag is False

    def test_unknown_flight(self, data_dir):
        """Test unknown or missing flight ids."""
        dataset = load_dataset(data_dir)
        assert dataset.flight("NOPE") is None
        assert dataset.flight(None) is None

    def test_execution_records(self, data_dir):
        """Test execution summary parsing."""
        records = load_dataset(data_dir).execution_for("DEL-FRA")

        assert len(records) == 2
        assert records[0].date == date(2026, 1, 1)
        assert records[1].void_capacity == 70
        assert records[1].load_factor == pytest.approx(22.2)

    def test_missing_directory(self, tmp_path):
        """Test missing directory raises DatasetError."""
        with pytest.raises(DatasetError):
            load_dataset(tmp_path / "absent")

    def test_missing_file(self, data_dir):
        """Test missing extract raises DatasetError."""
        (data_dir / "flight_capacity_master.csv").unlink()
        with pytest.raises(DatasetError, match="flight_capacity_master"):
            load_dataset(data_dir)

    def test_negative_cost_raises_dataset_error(self, data_dir):
        """Test an invalid flight value is reported as DatasetError."""
        (data_dir / "flight_capacity_master.csv").write_text(
            FLIGHT_CSV + "FX999,400,-5,2,0.3,0\n"
        )
        with pytest.raises(DatasetError, match="flight_capacity_master"):
            load_dataset(data_dir)

    def test_blank_period_raises_dataset_error(self, data_dir):
        """Test a forecast row without a date is reported as DatasetError."""
        (data_dir / "forecasted_demand_output.csv").write_text(
            FORECAST_CSV + "DEL-FRA,,400,400,0.8\n"
        )
        with pytest.raises(DatasetError, match="forecasted_demand_output"):
            load_dataset(data_dir)

    def test_blank_execution_date_raises_dataset_error(self, data_dir):
        """Test an execution row without a date is reported as DatasetError."""
        (data_dir / "planning_vs_execution_summary.csv").write_text(
            SUMMARY_CSV + ",DEL-FRA,100,90,50,40,55.6\n"
        )
        with pytest.raises(DatasetError, match="planning_vs_execution_summary"):
            load_dataset(data_dir)

    def test_engine_over_loaded_data(self, data_dir):
        """Test the decision engine runs on loaded CSV data."""
        engine = DecisionEngineService(load_dataset(data_dir))

        decision = engine.evaluate("DEL-FRA", "FX366")
        comparison = engine.compare("DEL-FRA")

        assert decision.scores.flexibility == 0.9
        assert comparison.strategy_driven.delay_rate == pytest.approx(50.0)


class TestRouteDataGenerator:
    """Tests for synthetic route data."""

    @pytest.fixture
    def generator(self):
        return RouteDataGenerator(seed=42)

    def test_generate_demand(self, generator):
        """Test daily series for a route."""
        series = generator.generate_demand("DEL-FRA", date(2026, 1, 1), days=14)

        assert len(series) == 14
        assert series[0].period == date(2026, 1, 1)
        assert series[-1].period == date(2026, 1, 14)
        assert all(o.forecasted_demand >= 0 for o in series)

    def test_volatility_drives_stability(self):
        """Test the low-volatility route scores more stable."""
        generator = RouteDataGenerator(seed=7)
        stable = generator.generate_demand("DEL-FRA", date(2026, 1, 1), days=60)
        volatile = generator.generate_demand("BLR-DXB", date(2026, 1, 1), days=60)

        assert score_demand_stability(stable) > score_demand_stability(volatile)

    def test_execution_consistency(self, generator):
        """Test void capacity and load factor follow from commitment."""
        series = generator.generate_demand("MAA-SIN", date(2026, 1, 1), days=10)
        records = generator.generate_execution(series, commitment_ratio=0.9)

        assert len(records) == 10
        for record in records:
            assert record.committed_capacity == pytest.approx(record.forecasted_demand * 0.9, abs=0.1)
            assert record.void_capacity >= 0

    def test_generate_dataset(self, generator):
        """Test full dataset covers every route and flight."""
        dataset = generator.generate_dataset(days=5)

        assert dataset.routes() == sorted(RouteDataGenerator.ROUTE_PROFILES)
        assert set(dataset.flight_ids()) == set(RouteDataGenerator.FLIGHT_PROFILES)
        assert len(dataset.dates()) == 5
        assert all(len(dataset.execution_for(r)) == 5 for r in dataset.routes())

    def test_reproducible(self):
        """Test same seed, same data."""
        a = RouteDataGenerator(seed=1).generate_dataset(days=3)
        b = RouteDataGenerator(seed=1).generate_dataset(days=3)
        assert a.demand_for("DEL-FRA") == b.demand_for("DEL-FRA")

"""Tests for distribution statistics."""

import math
import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest

from models.applicant import Applicant
from models.center import TestCenter
from engine.allocation_engine import run_batch
from engine.distribution import get_distribution_stats, stats_to_frame


def make_center(center_id, region, capacity, load):
    return TestCenter(center_id, center_id, "Kathmandu", region, capacity, load)


class TestGetDistributionStats:
    def test_overall_and_by_region(self):
        centers = [
            make_center("A", "central", 20, 10),
            make_center("B", "central", 40, 20),
            make_center("C", "eastern", 60, 30),
        ]
        stats = get_distribution_stats(centers)

        assert stats.overall.centers == 3
        assert stats.overall.allocated == 60
        assert stats.overall.capacity == 120
        assert stats.overall.utilization_rate == pytest.approx(50.0)

        assert set(stats.by_region) == {"central", "eastern"}
        assert stats.by_region["central"].centers == 2
        assert stats.by_region["central"].allocated == 30
        assert stats.by_region["central"].capacity == 60
        assert stats.by_region["eastern"].utilization_rate == pytest.approx(50.0)

    def test_balance_score_is_population_std_dev(self):
        centers = [make_center("A", "central", 50, 10), make_center("B", "eastern", 50, 20), make_center("C", "western", 50, 30)]
        stats = get_distribution_stats(centers)
        assert stats.balance_score == pytest.approx(math.sqrt(200 / 3))

    def test_balance_score_zero_when_loads_equal(self):
        centers = [make_center("A", "central", 50, 7), make_center("B", "eastern", 10, 7)]
        assert get_distribution_stats(centers).balance_score == 0.0

    def test_balance_score_positive_when_loads_differ(self):
        centers = [make_center("A", "central", 50, 7), make_center("B", "eastern", 10, 8)]
        assert get_distribution_stats(centers).balance_score > 0.0

    def test_empty_center_list(self):
        stats = get_distribution_stats([])
        assert stats.overall.centers == 0
        assert stats.overall.utilization_rate == 0.0
        assert stats.by_region == {}
        assert stats.balance_score == 0.0

    def test_repeated_read_is_identical(self):
        applicants = [Applicant(f"APP-{i}", f"A{i}", "Kathmandu") for i in range(50)]
        centers = [make_center("A", "central", 30, 0), make_center("B", "central", 30, 0), make_center("C", "eastern", 30, 0)]
        result = run_batch(applicants, centers, seed=4)

        first = get_distribution_stats(result.centers)
        second = get_distribution_stats(result.centers)
        assert first == second
        assert first.overall.allocated == len(result.allocations)


class TestStatsToFrame:
    def test_rows_per_region_plus_overall(self):
        centers = [make_center("A", "central", 20, 5), make_center("B", "western", 20, 15)]
        df = stats_to_frame(get_distribution_stats(centers))

        assert list(df["Region"]) == ["central", "western", "overall"]
        overall = df[df["Region"] == "overall"].iloc[0]
        assert overall["Allocated"] == 20
        assert overall["Utilization %"] == 50.0

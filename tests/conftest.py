"""
conftest.py - Pytest configuration for the medal map tests

Puts the repository root on sys.path and provides small results tables.
"""
import sys
from pathlib import Path

import matplotlib
import numpy as np
import pandas as pd
import pytest

matplotlib.use("Agg")

ROOT_DIR = Path(__file__).parent.parent
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

COLUMNS = ["Team", "Year", "Sport", "Event", "Medal"]

RESULT_ROWS = [
    ("USA", 2000, "Swimming", "100m Freestyle", "Gold"),
    ("United States", 2000, "Swimming", "4x100m Relay", "Gold"),
    ("United States", 2000, "Swimming", "4x100m Relay", "Gold"),
    ("United States", 2004, "Athletics", "100m", "Silver"),
    ("United States", 2008, "Rowing", "Eights", "Bronze"),
    ("United States-1", 2000, "Sailing", "Star", "Silver"),
    ("United States", 2004, "Swimming", "200m", np.nan),
    ("Great Britain", 2012, "Rowing", "Coxless Four", "Gold"),
    ("UK", 2012, "Rowing", "Coxless Four", "Gold"),
    ("France", 2000, "Fencing", "Epee", "Bronze"),
    ("Jamaica", 2004, "Athletics", "100m", np.nan),
]


def make_results(rows):
    return pd.DataFrame(rows, columns=COLUMNS)


@pytest.fixture
def results_df():
    return make_results(RESULT_ROWS)


@pytest.fixture
def single_row_df():
    return make_results([("USA", 2000, "Swimming", "100m", "Gold")])


@pytest.fixture
def snapshot(results_df):
    from olympic_data import ResultsSnapshot
    return ResultsSnapshot.from_frame(results_df)


@pytest.fixture
def results_csv(tmp_path, results_df):
    path = tmp_path / "athlete_events.csv"
    results_df.to_csv(path, index=False)
    return path

from dataclasses import dataclass
from typing import Optional

import pandas as pd

from config import CSV_ENCODING, RESULT_COLUMNS, RESULTS_CSV
from medal_ranking import UniqueMedalIndex


def clean_columns(df):
    # Some exports carry a BOM or padding in the header row
    df.columns = df.columns.str.replace('\ufeff', '', regex=False).str.replace('ï»¿', '', regex=False).str.strip()
    return df


def read_results(path=RESULTS_CSV, encoding=CSV_ENCODING):
    """
    Load the athlete-event results table.

    Raises ValueError if any of Team/Year/Sport/Event/Medal is missing.
    Rows whose Year can't be read as a number are dropped.
    """
    df = clean_columns(pd.read_csv(path, encoding=encoding))

    missing = [c for c in RESULT_COLUMNS if c not in df.columns]
    if missing:
        raise ValueError(f"{path} is missing columns: {', '.join(missing)}")

    df['Year'] = pd.to_numeric(df['Year'], errors='coerce')
    df = df[df['Year'].notna()].copy()
    df['Year'] = df['Year'].astype(int)
    return df.reset_index(drop=True)


@dataclass(frozen=True, eq=False)
class ResultsSnapshot:
    """
    The results table as loaded once at startup, plus the unique-medal
    index built from it. Nothing downstream modifies either.
    """

    results: Optional[pd.DataFrame] = None
    index: Optional[UniqueMedalIndex] = None

    @classmethod
    def from_frame(cls, df):
        df = df.copy()
        return cls(df, UniqueMedalIndex.from_results(df))

    @property
    def is_loaded(self):
        return self.results is not None

    def __len__(self):
        return 0 if self.results is None else len(self.results)


# Nothing loaded yet: every query against it yields "no data"
NOT_LOADED = ResultsSnapshot()


def load_snapshot(path=RESULTS_CSV, encoding=CSV_ENCODING):
    print(f"Loading results: {path}")
    snapshot = ResultsSnapshot.from_frame(read_results(path, encoding=encoding))
    print(f"Loaded {len(snapshot)} rows, {len(snapshot.index)} medal-winning countries.")
    return snapshot

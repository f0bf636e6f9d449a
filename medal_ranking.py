"""
Cross-country comparison anchors.

For every canonical country, the number of distinct (Year, Sport, Event)
combinations in which it won at least one medal, whatever the colour.
The grouping is done once per table and then queried per country.
"""
import pandas as pd

from country_medals import medal_rows
from country_names import from_map_name, normalize_country_name

UNIQUE_MEDAL_KEY = ["Country", "Year", "Sport", "Event"]


def count_unique_medals(df):
    """Series Country -> unique-medal count, countries in first-seen order."""
    if df is None or df.empty:
        return pd.Series(dtype=int, name="Unique_Medals")

    medaled = medal_rows(df)
    keys = medaled.assign(Country=medaled["Team"].map(normalize_country_name))
    keys = keys.drop_duplicates(subset=UNIQUE_MEDAL_KEY)
    return keys.groupby("Country", sort=False).size().rename("Unique_Medals")


class UniqueMedalIndex:
    def __init__(self, counts):
        self.counts = counts

    @classmethod
    def from_results(cls, df):
        return cls(count_unique_medals(df))

    def __len__(self):
        return len(self.counts)

    def __contains__(self, country):
        return country in self.counts.index

    def most(self):
        """(country, count) with the highest count; first seen wins ties."""
        if self.counts.empty:
            return None
        # idxmax returns the first occurrence of the maximum
        country = self.counts.idxmax()
        return country, int(self.counts[country])

    def least(self):
        """(country, count) with the lowest count; first seen wins ties."""
        if self.counts.empty:
            return None
        country = self.counts.idxmin()
        return country, int(self.counts[country])

    def count_for(self, country):
        """Unique-medal count for a country, or None if it never won a medal."""
        country = normalize_country_name(from_map_name(country))
        if country not in self:
            return None
        return int(self.counts[country])


def find_country_with_most_unique_medals(df):
    return UniqueMedalIndex.from_results(df).most()


def find_country_with_least_unique_medals(df):
    return UniqueMedalIndex.from_results(df).least()


def calculate_unique_medals(df, country):
    return UniqueMedalIndex.from_results(df).count_for(country)

"""
Everything shown when a country is selected on the map.

build_country_report runs the per-country pipeline against a loaded
snapshot: filter -> deduplicate -> top sports / medal percentages, plus
the most/least decorated countries as comparison anchors.
"""
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from config import NO_DATA_TEXT, TOP_N
from country_medals import (
    aggregate_medals_by_sport,
    calculate_medal_percentages,
    filter_data_by_country,
    top_sports_pairs,
)
from country_names import from_map_name, normalize_country_name


@dataclass
class CountryReport:
    country: str
    canonical_name: str
    top_sports: List[Tuple[str, int]] = field(default_factory=list)
    medal_percentages: Optional[dict] = None
    unique_medals: Optional[int] = None
    most: Optional[Tuple[str, int]] = None
    least: Optional[Tuple[str, int]] = None

    @property
    def has_data(self) -> bool:
        return bool(self.top_sports) and self.medal_percentages is not None


def build_country_report(snapshot, country, top_n=TOP_N, exact=False) -> CountryReport:
    # The map labels some countries differently from the results table
    name = from_map_name(country)
    report = CountryReport(country=country, canonical_name=normalize_country_name(name))
    if not snapshot.is_loaded:
        return report

    filtered = filter_data_by_country(snapshot.results, name, exact=exact)
    if filtered.empty:
        return report

    report.top_sports = top_sports_pairs(aggregate_medals_by_sport(filtered), top_n)
    report.medal_percentages = calculate_medal_percentages(filtered)
    report.unique_medals = snapshot.index.count_for(name)
    report.most = snapshot.index.most()
    report.least = snapshot.index.least()
    return report


def format_country_report(report: CountryReport) -> str:
    lines = [report.country, "-" * len(report.country)]
    if not report.has_data:
        lines.append(NO_DATA_TEXT)
        return "\n".join(lines)

    lines.append(f"Top {len(report.top_sports)} sports with the most medals:")
    for sport, count in report.top_sports:
        lines.append(f"  {sport}: {count} medals")

    pct = report.medal_percentages
    lines.append(f"Gold {pct['gold']:.2f}% | Silver {pct['silver']:.2f}% | Bronze {pct['bronze']:.2f}%")

    if report.most and report.least:
        lines.append("Comparison with the most and least decorated country:")
        own = report.unique_medals if report.unique_medals is not None else "n/a"
        lines.append(f"  {report.most[0]} ({report.most[1]})  <-  {own}  ->  {report.least[0]} ({report.least[1]})")
    return "\n".join(lines)

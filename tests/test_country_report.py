"""
test_country_report.py - Tests for the per-country report shown on selection
"""
from country_report import build_country_report, format_country_report
from olympic_data import NOT_LOADED


def test_report_for_united_states(snapshot):
    """Test the full report for a country with medals."""
    report = build_country_report(snapshot, "United States of America")
    assert report.canonical_name == "United States"
    assert report.has_data
    assert report.top_sports == [("Swimming", 2), ("Athletics", 1), ("Rowing", 1)]
    assert report.medal_percentages == {"gold": 50.0, "silver": 33.33, "bronze": 16.67}
    assert report.unique_medals == 4
    assert report.most == ("United States", 4)
    assert report.least == ("United States-1", 1)


def test_report_top_n(snapshot):
    """Test that top_n limits the sport list."""
    report = build_country_report(snapshot, "United States", top_n=1)
    assert report.top_sports == [("Swimming", 2)]


def test_report_for_country_without_medals(snapshot):
    """Test that a country with only non-medal rows has no data."""
    report = build_country_report(snapshot, "Jamaica")
    assert not report.has_data
    assert report.top_sports == []
    assert report.medal_percentages is None


def test_report_for_unknown_country(snapshot):
    """Test that a country with zero rows has no data."""
    report = build_country_report(snapshot, "Atlantis")
    assert not report.has_data
    assert report.unique_medals is None
    assert "No data available." in format_country_report(report)


def test_report_before_data_is_loaded():
    """Test that nothing is computed against the not-loaded snapshot."""
    report = build_country_report(NOT_LOADED, "France")
    assert not report.has_data
    assert report.most is None


def test_format_report(snapshot):
    """Test the text rendering of a report."""
    text = format_country_report(build_country_report(snapshot, "United Kingdom"))
    assert text.startswith("United Kingdom\n")
    assert "Rowing: 1 medals" in text
    assert "Gold 100.00% | Silver 0.00% | Bronze 0.00%" in text
    assert "United States (4)" in text
    assert "No data available." not in text


def test_report_by_map_name():
    """Test that countries picked by their world-map name get their own rows."""
    from conftest import make_results
    from olympic_data import ResultsSnapshot
    from plot_medal_map import map_data_pairs

    snapshot = ResultsSnapshot.from_frame(make_results([
        ("Chinese Taipei", 2004, "Taekwondo", "Flyweight", "Gold"),
        ("Czech Republic", 2008, "Shooting", "Trap", "Silver"),
        ("South Korea", 2012, "Archery", "Team", "Gold"),
        ("North Korea", 2012, "Weightlifting", "Lightweight", "Gold"),
    ]))
    map_counts = dict((name, count) for name, count in map_data_pairs(snapshot.index))

    for map_name in ["Taiwan", "Czech Rep.", "Korea", "Dem. Rep. Korea"]:
        report = build_country_report(snapshot, map_name)
        assert report.has_data
        assert report.unique_medals == map_counts[map_name]
        assert sum(count for _, count in report.top_sports) == map_counts[map_name]

    korea = build_country_report(snapshot, "Korea")
    assert korea.canonical_name == "South Korea"
    assert korea.top_sports == [("Archery", 1)]

import pandas as pd

from config import MEDAL_TYPES, RESULT_COLUMNS, TOP_N
from country_names import normalize_country_name

# One medal is awarded once per (Year, Sport, Event, Medal),
# however many athletes share it
EVENT_KEY = ["Year", "Sport", "Event", "Medal"]


def empty_results():
    return pd.DataFrame(columns=RESULT_COLUMNS)


def medal_rows(df):
    """Rows whose Medal is exactly Gold, Silver or Bronze."""
    return df[df["Medal"].isin(MEDAL_TYPES)]


# =========================================================
# 1) Country filter
# =========================================================
def filter_data_by_country(df, country, exact=False):
    """
    All rows belonging to `country` (a map feature name, not yet normalized).

    Team values are normalized too and matched by substring containment,
    so "United States-1" style multi-team entries are kept. exact=True
    requires the normalized Team to equal the normalized target instead.
    """
    if df is None or df.empty:
        return empty_results()

    target = normalize_country_name(country)
    teams = df["Team"].fillna("").astype(str).map(normalize_country_name)

    if exact:
        mask = teams == target
    else:
        mask = teams.str.contains(target, regex=False)
    return df[mask].copy()


# =========================================================
# 2) Event deduplication
# =========================================================
def group_unique_events(df):
    """
    One record per (Year, Sport, Event, Medal); the first row seen wins.
    Rows without a medal are not dropped here, they group under their
    own empty Medal value.
    """
    if df is None or df.empty:
        return pd.DataFrame(columns=EVENT_KEY)
    return df.drop_duplicates(subset=EVENT_KEY, keep="first")[EVENT_KEY].reset_index(drop=True)


# =========================================================
# 3) Sport aggregation
# =========================================================
def count_events_by_sport(events):
    if events is None or events.empty:
        return pd.DataFrame({"Sport": pd.Series(dtype=object), "Medal_Count": pd.Series(dtype=int)})

    # sort=False keeps sports in first-seen order
    counts = events.groupby("Sport", sort=False, dropna=False).size()
    return counts.rename("Medal_Count").reset_index()


def aggregate_medals_by_sport(df):
    """Distinct medal events per sport for an already filtered table."""
    if df is None or df.empty:
        return count_events_by_sport(None)
    return count_events_by_sport(group_unique_events(medal_rows(df)))


def get_top_sports(sport_counts, top_n=TOP_N):
    """
    The top_n sports by Medal_Count. The sort is stable, so on equal
    counts the sport seen first stays ahead.
    """
    ranked = sport_counts.sort_values("Medal_Count", ascending=False, kind="mergesort")
    return ranked.head(top_n).reset_index(drop=True)


def top_sports_pairs(sport_counts, top_n=TOP_N):
    top = get_top_sports(sport_counts, top_n)
    return [(sport, int(count)) for sport, count in zip(top["Sport"], top["Medal_Count"])]


# =========================================================
# 4) Medal percentages
# =========================================================
def count_medals(df):
    counts = df["Medal"].value_counts()
    return {medal: int(counts.get(medal, 0)) for medal in MEDAL_TYPES}


def calculate_medal_percentages(df, unique_events=False):
    """
    Gold/silver/bronze share of a country's medals, rounded to 2 decimals.

    By default every medal row counts, so a relay gold won by four athletes
    counts four times (unlike aggregate_medals_by_sport). unique_events=True
    deduplicates first. Returns None when the country has no medals.
    """
    if df is None or df.empty:
        return None
    if unique_events:
        df = group_unique_events(df)

    medal_counts = count_medals(df)
    total_medals = sum(medal_counts.values())
    if total_medals == 0:
        return None

    return {
        medal.lower(): round(count / total_medals * 100, 2)
        for medal, count in medal_counts.items()
    }

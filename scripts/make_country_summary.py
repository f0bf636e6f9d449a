"""One summary row per medal-winning country, from the athlete-event results table."""

import sys
from pathlib import Path

import pandas as pd

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from config import RESULTS_CSV, TOP_N  # noqa: E402
from country_report import build_country_report  # noqa: E402
from olympic_data import load_snapshot  # noqa: E402

INPUT_FILE = Path(RESULTS_CSV)
OUTPUT_FILE = Path("country_medal_summary.csv")


def summarize_countries(snapshot, top_n=TOP_N):
    rows = []
    for country in snapshot.index.counts.index:
        report = build_country_report(snapshot, country, top_n=top_n, exact=True)
        pct = report.medal_percentages or {}
        rows.append(
            {
                "Country": country,
                "Unique_Medals": report.unique_medals,
                "Top_Sports": "; ".join(f"{sport} ({count})" for sport, count in report.top_sports),
                "Gold_Pct": pct.get("gold"),
                "Silver_Pct": pct.get("silver"),
                "Bronze_Pct": pct.get("bronze"),
            }
        )

    columns = ["Country", "Unique_Medals", "Top_Sports", "Gold_Pct", "Silver_Pct", "Bronze_Pct"]
    summary = pd.DataFrame(rows, columns=columns)
    return summary.sort_values("Unique_Medals", ascending=False, kind="mergesort").reset_index(drop=True)


def main() -> None:
    snapshot = load_snapshot(INPUT_FILE)
    summary = summarize_countries(snapshot)
    summary.to_csv(OUTPUT_FILE, index=False, encoding="utf-8-sig")
    print(f"written {len(summary)} rows to {OUTPUT_FILE}")


if __name__ == "__main__":
    main()

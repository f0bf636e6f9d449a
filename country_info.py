import argparse
import sys

from config import RESULTS_CSV, TOP_N
from country_report import build_country_report, format_country_report
from olympic_data import load_snapshot


def positive_int(value):
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {value}")
    return number


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Olympic medal summary for one country.")
    parser.add_argument("country", help="Country name as shown on the map, e.g. 'United Kingdom'")
    parser.add_argument("--data", default=RESULTS_CSV, help=f"Results CSV (default: {RESULTS_CSV})")
    parser.add_argument("--top", type=positive_int, default=TOP_N, help=f"Number of sports to list (default: {TOP_N})")
    parser.add_argument("--exact", action="store_true", help="Match team names exactly instead of by substring")
    parser.add_argument("--plot", metavar="PATH", help="Also save the pie chart / comparison figure here")
    parser.add_argument("--map", metavar="PATH", help="Also render the world map HTML here")
    args = parser.parse_args(argv)

    try:
        snapshot = load_snapshot(args.data)
    except (FileNotFoundError, ValueError) as e:
        print(f"Could not load results: {e}")
        return 1

    report = build_country_report(snapshot, args.country, top_n=args.top, exact=args.exact)
    print(format_country_report(report))

    if args.plot:
        from plot_country_summary import plot_country_summary
        plot_country_summary(report, args.plot)
    if args.map:
        from plot_medal_map import render_medal_map
        render_medal_map(snapshot, args.map)
    return 0


if __name__ == "__main__":
    sys.exit(main())

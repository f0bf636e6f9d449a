# =========================================================
# 0) Config
# =========================================================
RESULTS_CSV = "dataset/athlete_events_official.csv"
CSV_ENCODING = "utf-8"

# Columns the results table must carry (one row per athlete-event entry)
RESULT_COLUMNS = ["Team", "Year", "Sport", "Event", "Medal"]

MEDAL_TYPES = ["Gold", "Silver", "Bronze"]
MEDAL_COLORS = {"Gold": "#ffd700", "Silver": "#c0c0c0", "Bronze": "#cd7f32"}

# Number of sports shown per country
TOP_N = 3

NO_DATA_TEXT = "No data available."

# World map
MAP_HTML = "olympic_medal_map.html"
MAP_WIDTH = "1000px"
MAP_HEIGHT = "600px"
MAP_RANGE_COLOR = ["#50a3ba", "#eac736", "#d94e5d"]

# Country summary figure
SUMMARY_FIGSIZE = (8, 9)
SUMMARY_DPI = 150

"""Canonical country labels shared by the map and the results table."""

# Aliases are matched on the whole lower-cased name
COUNTRY_ALIASES = {
    "england": "Great Britain",
    "uk": "Great Britain",
    "united kingdom": "Great Britain",
    "usa": "United States",
    "us": "United States",
    "united states": "United States",
    "united states of america": "United States",
}

# Canonical name -> name used by the pyecharts world map.
# Countries that don't show up colored on the map need an entry here.
MAP_NAME_MAPPING = {
    "Great Britain": "United Kingdom",
    "South Korea": "Korea",
    "North Korea": "Dem. Rep. Korea",
    "Chinese Taipei": "Taiwan",
    "Czech Republic": "Czech Rep.",
    "Bosnia and Herzegovina": "Bosnia and Herz.",
    "Central African Republic": "Central African Rep.",
    "Dominican Republic": "Dominican Rep.",
    "Ivory Coast": "Côte d'Ivoire",
    "Laos": "Lao PDR",
}

# Map feature name -> canonical name, for countries picked on the map
COUNTRY_BY_MAP_NAME = {map_name: country for country, map_name in MAP_NAME_MAPPING.items()}


def normalize_country_name(country):
    """
    Map a free-text country/team name to its canonical label.
    Unknown names (and non-strings such as NaN) come back unchanged.
    """
    if not isinstance(country, str):
        return country
    return COUNTRY_ALIASES.get(country.lower(), country)


def to_map_name(country):
    return MAP_NAME_MAPPING.get(country, country)


def from_map_name(country):
    if not isinstance(country, str):
        return country
    return COUNTRY_BY_MAP_NAME.get(country, country)

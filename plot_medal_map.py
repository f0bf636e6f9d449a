from pyecharts import options as opts
from pyecharts.charts import Map

from config import MAP_HEIGHT, MAP_HTML, MAP_RANGE_COLOR, MAP_WIDTH
from country_names import to_map_name


def map_data_pairs(index):
    """[(map country name, unique-medal count), ...] for pyecharts."""
    return [[to_map_name(country), int(count)] for country, count in index.counts.items()]


def build_medal_map(snapshot):
    data_pair = map_data_pairs(snapshot.index) if snapshot.is_loaded else []
    most = snapshot.index.most() if snapshot.is_loaded else None
    max_value = most[1] if most else 1

    world_map = (
        Map(init_opts=opts.InitOpts(width=MAP_WIDTH, height=MAP_HEIGHT, bg_color="#FFFFFF", renderer="svg"))
        .add(
            series_name="Unique medals",
            data_pair=data_pair,
            maptype="world",
            is_roam=True,
            is_map_symbol_show=False,
            label_opts=opts.LabelOpts(is_show=False),
            itemstyle_opts=opts.ItemStyleOpts(
                border_width=0.5,
                border_color="rgba(0,0,0,0.2)"
            ),
            zoom=1.2,
            emphasis_label_opts=opts.LabelOpts(is_show=True),
            tooltip_opts=opts.TooltipOpts(
                trigger="item",
                formatter="{b}: {c} medals"
            )
        )
        .set_global_opts(
            title_opts=opts.TitleOpts(
                title="Olympic medals by country",
                subtitle="Distinct (year, sport, event) medals",
                pos_left="center",
                title_textstyle_opts=opts.TextStyleOpts(font_size=20)
            ),
            visualmap_opts=opts.VisualMapOpts(
                max_=max_value,
                min_=0,
                is_piecewise=False,
                range_color=MAP_RANGE_COLOR,
                orient="horizontal",
                pos_left="center",
                pos_bottom="10%"
            ),
            legend_opts=opts.LegendOpts(is_show=False)
        )
    )
    return world_map


def render_medal_map(snapshot, output_file=MAP_HTML):
    build_medal_map(snapshot).render(output_file)
    print(f"Map written: {output_file}")
    return output_file

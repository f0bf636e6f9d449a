import matplotlib.pyplot as plt
import numpy as np

from config import MEDAL_COLORS, MEDAL_TYPES, NO_DATA_TEXT, SUMMARY_DPI, SUMMARY_FIGSIZE


def scale_position(value, most_count):
    """Where a country sits on the least -> most scale, 1 = most decorated."""
    if not most_count or value is None:
        return np.nan
    return float(np.clip(value / most_count, 0.0, 1.0))


def draw_medal_pie(ax, medal_percentages):
    sizes = [medal_percentages[m.lower()] for m in MEDAL_TYPES]
    ax.pie(
        sizes,
        labels=MEDAL_TYPES,
        colors=[MEDAL_COLORS[m] for m in MEDAL_TYPES],
        autopct='%1.2f%%',
        startangle=90,
        wedgeprops=dict(edgecolor='black', linewidth=0.5),
    )
    ax.set_aspect('equal')


def draw_comparison_scale(ax, report):
    most_name, most_count = report.most
    least_name, least_count = report.least

    # Most decorated on the right, least on the left, like a slider
    ax.plot([0, 1], [0, 0], color='gray', linewidth=6, solid_capstyle='round', alpha=0.5)
    ax.text(1, 0.35, f"{most_name}\n{most_count}", ha='center', va='bottom', fontsize=10, fontweight='bold')
    ax.text(0, 0.35, f"{least_name}\n{least_count}", ha='center', va='bottom', fontsize=10, fontweight='bold')

    pos = scale_position(report.unique_medals, most_count)
    if not np.isnan(pos):
        ax.plot([pos], [0], 'o', color='royalblue', markersize=12, zorder=5)
        ax.text(pos, -0.35, str(report.unique_medals), ha='center', va='top', fontsize=10)

    ax.set_xlim(-0.15, 1.15)
    ax.set_ylim(-1, 1)
    ax.axis('off')
    ax.set_title("Comparison with the most and least decorated country", fontsize=11)


def plot_country_summary(report, output_file):
    if not report.has_data:
        fig, ax = plt.subplots(figsize=(SUMMARY_FIGSIZE[0], 2))
        ax.text(0.5, 0.5, NO_DATA_TEXT, ha='center', va='center', fontsize=14)
        ax.set_title(report.country, fontsize=16, fontweight='bold')
        ax.axis('off')
    else:
        fig, (ax_pie, ax_scale) = plt.subplots(
            2, 1, figsize=SUMMARY_FIGSIZE, gridspec_kw={'height_ratios': [4, 1]}
        )
        sports = ", ".join(f"{sport} ({count})" for sport, count in report.top_sports)
        fig.suptitle(f"{report.country}\nTop sports: {sports}", fontsize=13, fontweight='bold')
        draw_medal_pie(ax_pie, report.medal_percentages)
        if report.most and report.least:
            draw_comparison_scale(ax_scale, report)
        else:
            ax_scale.axis('off')

    plt.tight_layout()
    plt.savefig(output_file, dpi=SUMMARY_DPI, bbox_inches='tight')
    plt.close(fig)
    print(f"Figure saved: {output_file}")
    return output_file

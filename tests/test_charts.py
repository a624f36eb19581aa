from pathlib import Path

from txrealty.charts import comparisons, distributions, trends
from txrealty.charts.style import apply_theme, city_palette, save_fig
from txrealty.metrics.derived import add_derived_columns
from txrealty.metrics.frequency import bin_classes, frequency_table
from txrealty.metrics.volume import volume_share


def _exists(paths):
    return paths and all(Path(p).is_file() and Path(p).stat().st_size > 0 for p in paths)


def test_densities(tmp_path, panel):
    apply_theme()
    df = add_derived_columns(panel)
    paths = distributions.plot_densities(df, ["sales", "volume", "avg_price", "sales_offer_efficiency"], str(tmp_path), dpi=40)
    assert _exists(paths)


def test_frequency_bars(tmp_path, panel):
    table = frequency_table(bin_classes(panel["median_price"]))
    paths = distributions.plot_frequency_bars(table, "median_price_classes", str(tmp_path), dpi=40)
    assert _exists(paths)
    assert Path(paths[0]).name == "freq_median_price_classes.png"


def test_monthly_lines(tmp_path, panel):
    assert _exists(trends.plot_monthly_lines(panel, "sales", str(tmp_path), dpi=40))


def test_volume_share_lines(tmp_path, panel):
    assert _exists(trends.plot_volume_share(volume_share(panel), str(tmp_path), dpi=40))


def test_boxplots(tmp_path, panel):
    df = add_derived_columns(panel)
    assert _exists(comparisons.plot_box_by_city(df, "median_price", str(tmp_path), dpi=40))
    assert _exists(comparisons.plot_box_by_city_year(df, "avg_price", str(tmp_path), dpi=40))


def test_stacked_volume(tmp_path, panel):
    plain = comparisons.plot_volume_stacked(panel, str(tmp_path), normalize=False, dpi=40)
    normalized = comparisons.plot_volume_stacked(panel, str(tmp_path), normalize=True, formats=("png", "pdf"), dpi=40)
    assert _exists(plain)
    assert [Path(p).suffix for p in normalized] == [".png", ".pdf"]
    assert _exists(normalized)


def test_city_palette_handles_unknown_city():
    palette = city_palette(["Tyler", "Austin"])
    assert list(palette) == ["Tyler", "Austin"]
    assert palette["Tyler"] != palette["Austin"]


def test_save_fig_creates_directory(tmp_path):
    import matplotlib.pyplot as plt

    fig, ax = plt.subplots()
    ax.plot([0, 1], [0, 1])
    paths = save_fig(fig, "line", str(tmp_path / "nested" / "figs"), dpi=40)
    assert _exists(paths)

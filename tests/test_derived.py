import numpy as np
import pytest

from txrealty.metrics.derived import add_derived_columns
from txrealty.metrics.probability import count_rows, probability, probability_table
from txrealty.metrics.volume import volume_pivot, volume_share


def test_derived_columns(panel):
    out = add_derived_columns(panel)
    assert "avg_price" not in panel.columns
    assert np.allclose(out["avg_price"] * out["sales"], out["volume"] * 1_000_000)
    assert out["sales_offer_efficiency"].between(0, 1).all()
    assert out["sales_offer_efficiency"].iloc[0] == pytest.approx(panel["sales"].iloc[0] / panel["listings"].iloc[0])


def test_probabilities(panel):
    assert probability(panel, city="Beaumont") == pytest.approx(0.25)
    assert probability(panel, month=7) == pytest.approx(1 / 12)
    assert probability(panel, month=12, year=2012) == pytest.approx(1 / 60)
    assert count_rows(panel, city="Tyler") == 60
    assert count_rows(panel, city="Tyler", month=3) == 5
    assert probability(panel.iloc[0:0], city="Tyler") == 0.0


def test_probability_unknown_column(panel):
    with pytest.raises(KeyError):
        probability(panel, borough="Tyler")


def test_probability_table(panel):
    table = probability_table(panel)
    assert table.loc["city = Beaumont", "rows"] == 60
    assert table.loc["month = 12, year = 2012", "probability"] == pytest.approx(1 / 60)
    assert len(table) == 6


def test_volume_pivot(panel):
    pivot = volume_pivot(panel, index="month", columns="city")
    assert pivot.shape == (12, 4)
    assert pivot.to_numpy().sum() == pytest.approx(panel["volume"].sum())

    normalized = volume_pivot(panel, index="month", columns="city", normalize=True)
    assert np.allclose(normalized.sum(axis=1), 100.0)


def test_volume_share(panel):
    share = volume_share(panel)
    assert len(share) == 20
    totals = share.groupby("year")["share_pct"].sum()
    assert np.allclose(totals, 100.0)


def test_zero_denominator_gives_missing(panel):
    df = panel.copy()
    df.loc[0, ["sales", "volume"]] = [0, 0.0]
    out = add_derived_columns(df)
    assert np.isnan(out.loc[0, "avg_price"])
    assert out.loc[0, "sales_offer_efficiency"] == 0.0

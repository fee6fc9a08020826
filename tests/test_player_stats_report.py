"""Tests for the crawl summary report."""

import matplotlib
matplotlib.use("Agg")

import pytest

from player_stats_report import (
    faction_totals, load_player_table, plot_faction_wins, plot_mmr_histogram, summarize_players
)

PLAYERS_CSV = """id,rank,total wins,current wins,current losses,current draws,MMR,prestige,level
geralt,14,1532,88,60,2,2345,3,27
ciri,1,900,30,10,0,9800,5,60
hidden,30,0,0,0,0,0,0,0
gone,30,0,0,0,0,0,0,0
"""

FACTIONS_CSV = """id,season,faction,wins
geralt,total,NR,700
geralt,total,SK,832
geralt,current,NR,40
ciri,total,NR,900
"""


@pytest.fixture
def players_csv(tmp_path):
    path = tmp_path / "Data.csv"
    path.write_text(PLAYERS_CSV, encoding="utf-8")
    return str(path)


@pytest.fixture
def factions_csv(tmp_path):
    path = tmp_path / "Factions.csv"
    path.write_text(FACTIONS_CSV, encoding="utf-8")
    return str(path)


def test_load_player_table_keeps_ids_as_text(tmp_path):
    path = tmp_path / "Data.csv"
    path.write_text(
        "id,rank,total wins,current wins,current losses,current draws,MMR,prestige,level\n"
        "007,30,0,0,0,0,0,0,0\n",
        encoding="utf-8",
    )
    df = load_player_table(str(path))
    assert df["id"].tolist() == ["007"]
    assert df["rank"].tolist() == [30]


def test_load_player_table_rejects_other_tables(tmp_path):
    path = tmp_path / "other.csv"
    path.write_text("appid,name\n1,x\n", encoding="utf-8")
    with pytest.raises(ValueError, match="missing columns"):
        load_player_table(str(path))


def test_summarize_players(players_csv):
    summary = summarize_players(load_player_table(players_csv))

    assert summary["players"] == 4
    assert summary["with_data"] == 2
    assert summary["default_rows"] == 2
    assert summary["rated_players"] == 2
    assert summary["mmr_mean"] == pytest.approx((2345 + 9800) / 2)
    assert summary["mmr_max"] == 9800
    assert summary["total_wins"] == 2432
    assert summary["mean_win_rate"] == pytest.approx((88 / 150 * 100 + 30 / 40 * 100) / 2)
    assert summary["rank_counts"] == {1: 1, 14: 1, 30: 2}


def test_summarize_all_default_rows(tmp_path):
    path = tmp_path / "Data.csv"
    path.write_text(
        "id,rank,total wins,current wins,current losses,current draws,MMR,prestige,level\n"
        "a,30,0,0,0,0,0,0,0\n",
        encoding="utf-8",
    )
    summary = summarize_players(load_player_table(str(path)))
    assert summary["with_data"] == 0
    assert summary["mmr_mean"] == 0.0
    assert summary["mean_win_rate"] == 0.0


def test_faction_totals(factions_csv):
    totals = faction_totals(factions_csv)
    assert totals["faction"].tolist() == ["NR", "SK"]
    assert totals["wins"].tolist() == [1600, 832]
    assert totals["share"].sum() == pytest.approx(100.0)


def test_faction_totals_current_season(factions_csv):
    totals = faction_totals(factions_csv, season="current")
    assert totals["faction"].tolist() == ["NR"]
    assert totals["wins"].tolist() == [40]


def test_charts_saved(tmp_path, players_csv, factions_csv):
    df = load_player_table(players_csv)
    mmr_png = tmp_path / "mmr.png"
    factions_png = tmp_path / "factions.png"

    plot_mmr_histogram(df, str(mmr_png), bins=5)
    plot_faction_wins(faction_totals(factions_csv), str(factions_png))

    assert mmr_png.stat().st_size > 0
    assert factions_png.stat().st_size > 0

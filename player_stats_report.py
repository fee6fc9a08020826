#!/usr/bin/env python3
"""
Summary report for a finished Gwent crawl.

Reads the player table (and optionally the per-faction table) written by the
crawler, prints headline numbers and saves two charts:
an MMR histogram of ranked players and a bar chart of wins per faction.

Usage:
    python player_stats_report.py \
        --players-csv Data.csv \
        --factions-csv Factions.csv \
        --out-dir report
"""
import argparse
import os

import pandas as pd
import numpy as np
import matplotlib.pyplot as plt

DEFAULT_RANK = 30
NUMERIC_COLUMNS = ["rank", "total wins", "current wins", "current losses",
                   "current draws", "MMR", "prestige", "level"]


def load_player_table(csv_path: str) -> pd.DataFrame:
    """Load the crawler's player table with numeric columns as integers."""
    df = pd.read_csv(csv_path, dtype={"id": str}, keep_default_na=False)
    missing = [c for c in ["id"] + NUMERIC_COLUMNS if c not in df.columns]
    if missing:
        raise ValueError(f"{csv_path} is missing columns: {missing}")
    for col in NUMERIC_COLUMNS:
        df[col] = pd.to_numeric(df[col], errors="coerce").fillna(0).astype(int)
    return df


def default_row_mask(df: pd.DataFrame) -> pd.Series:
    """Rows that kept every default (private, missing or empty profiles)."""
    counts = df[[c for c in NUMERIC_COLUMNS if c != "rank"]]
    return (df["rank"] == DEFAULT_RANK) & (counts == 0).all(axis=1)


def summarize_players(df: pd.DataFrame) -> dict:
    """
    Headline numbers for a player table.
    MMR statistics only consider players with a non-zero rating.
    """
    defaults = default_row_mask(df)
    rated = df.loc[df["MMR"] > 0, "MMR"]

    played = df["current wins"] + df["current losses"] + df["current draws"]
    with np.errstate(divide="ignore", invalid="ignore"):
        win_rate = np.where(played > 0, df["current wins"] / played * 100.0, np.nan)

    return {
        "players": int(len(df)),
        "with_data": int((~defaults).sum()),
        "default_rows": int(defaults.sum()),
        "rated_players": int(len(rated)),
        "mmr_mean": float(rated.mean()) if len(rated) else 0.0,
        "mmr_median": float(rated.median()) if len(rated) else 0.0,
        "mmr_max": int(rated.max()) if len(rated) else 0,
        "total_wins": int(df["total wins"].sum()),
        "mean_win_rate": float(np.nanmean(win_rate)) if np.isfinite(win_rate).any() else 0.0,
        "rank_counts": {int(k): int(v) for k, v in df["rank"].value_counts().sort_index().items()},
    }


def faction_totals(factions_csv: str, season: str = "total") -> pd.DataFrame:
    """Sum wins per faction for one season ('total' or 'current'), most wins first."""
    df = pd.read_csv(factions_csv, dtype={"id": str, "faction": str}, keep_default_na=False)
    df["wins"] = pd.to_numeric(df["wins"], errors="coerce").fillna(0).astype(int)
    df = df[df["season"] == season]
    totals = df.groupby("faction", as_index=False)["wins"].sum()
    totals["share"] = totals["wins"] / max(int(totals["wins"].sum()), 1) * 100.0
    return totals.sort_values("wins", ascending=False).reset_index(drop=True)


def plot_mmr_histogram(df: pd.DataFrame, out_path: str, bins: int = 30):
    rated = df.loc[df["MMR"] > 0, "MMR"]
    plt.figure(figsize=(10, 6))
    plt.hist(rated, bins=bins, color="steelblue", alpha=0.8, edgecolor="black", linewidth=0.5)
    if len(rated):
        plt.axvline(rated.median(), color="red", linestyle="--", alpha=0.7,
                    label=f"median {rated.median():,.0f}")
        plt.legend()
    plt.xlabel("MMR", fontsize=12, fontweight="bold")
    plt.ylabel("Players", fontsize=12, fontweight="bold")
    plt.title(f"MMR distribution ({len(rated)} rated players)", fontsize=14, fontweight="bold")
    plt.grid(axis="y", alpha=0.3, linestyle="--")
    plt.tight_layout()
    plt.savefig(out_path, dpi=150, bbox_inches="tight")
    plt.close()
    print(f"Chart saved to: {out_path}")


def plot_faction_wins(totals: pd.DataFrame, out_path: str, season: str = "total"):
    plt.figure(figsize=(12, 7))
    colors = plt.cm.viridis(np.linspace(0, 1, max(len(totals), 1)))
    bars = plt.bar(range(len(totals)), totals["wins"], color=colors, alpha=0.8,
                   edgecolor="black", linewidth=0.5)
    plt.xticks(range(len(totals)), totals["faction"], rotation=45, ha="right")

    for i, bar in enumerate(bars):
        plt.text(bar.get_x() + bar.get_width() / 2., bar.get_height(),
                 f'{totals.iloc[i]["share"]:.1f}%', ha="center", va="bottom", fontsize=9)

    plt.xlabel("Faction", fontsize=12, fontweight="bold")
    plt.ylabel("Wins", fontsize=12, fontweight="bold")
    plt.title(f"Wins per faction ({season})", fontsize=14, fontweight="bold", pad=20)
    plt.grid(axis="y", alpha=0.3, linestyle="--")
    plt.tight_layout()
    plt.savefig(out_path, dpi=150, bbox_inches="tight")
    plt.close()
    print(f"Chart saved to: {out_path}")


def print_summary(summary: dict, totals: pd.DataFrame | None = None):
    print(f"\n{'=' * 60}")
    print("GWENT PLAYER REPORT")
    print(f"{'=' * 60}")
    print(f"Players:          {summary['players']:,}")
    print(f"With data:        {summary['with_data']:,}")
    print(f"Private/missing:  {summary['default_rows']:,}")
    print(f"Rated players:    {summary['rated_players']:,}")
    print(f"MMR mean/median:  {summary['mmr_mean']:,.1f} / {summary['mmr_median']:,.1f}")
    print(f"MMR max:          {summary['mmr_max']:,}")
    print(f"Lifetime wins:    {summary['total_wins']:,}")
    print(f"Mean win rate:    {summary['mean_win_rate']:.1f}%")

    print(f"\n{'Rank':<6} {'Players':<8}")
    print(f"{'-' * 6} {'-' * 8}")
    for rank, count in summary["rank_counts"].items():
        print(f"{rank:<6} {count:<8}")

    if totals is not None and len(totals):
        print(f"\n{'Faction':<12} {'Wins':<10} {'Share':<6}")
        print(f"{'-' * 12} {'-' * 10} {'-' * 6}")
        for _, row in totals.iterrows():
            print(f"{row['faction']:<12} {row['wins']:<10} {row['share']:.1f}%")


def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--players-csv", default="Data.csv", help="Player table written by the crawler")
    ap.add_argument("--factions-csv", default=None, help="Faction table written with --factions")
    ap.add_argument("--season", choices=["total", "current"], default="total")
    ap.add_argument("--out-dir", default="report", help="Directory for the charts")
    ap.add_argument("--bins", type=int, default=30, help="MMR histogram bins")
    args = ap.parse_args()

    df = load_player_table(args.players_csv)
    summary = summarize_players(df)
    totals = faction_totals(args.factions_csv, args.season) if args.factions_csv else None

    print_summary(summary, totals)

    os.makedirs(args.out_dir, exist_ok=True)
    plot_mmr_histogram(df, os.path.join(args.out_dir, "mmr_distribution.png"), bins=args.bins)
    if totals is not None:
        plot_faction_wins(totals, os.path.join(args.out_dir, f"faction_wins_{args.season}.png"), args.season)


if __name__ == "__main__":
    main()

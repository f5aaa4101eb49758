# common/plots.py
from __future__ import annotations
from typing import Optional

import pandas as pd
import matplotlib.pyplot as plt

from common.colors import HOME_COLOR, OGIVE_COLOR, darken

DEFAULT_FIGSIZE = (6.6, 2.6)  # compact; pages pass their own axes anyway

def _new_ax(ax=None):
    """Return a compact figure/axes when ax is None; otherwise reuse the axes."""
    if ax is None:
        fig, ax = plt.subplots(figsize=DEFAULT_FIGSIZE, constrained_layout=True)
    else:
        fig = ax.figure
    return fig, ax


# --- Histogram (goals per match) ----------------
def plot_histogram(hist: pd.DataFrame,
                   color: str = HOME_COLOR,
                   ax: Optional[plt.Axes] = None,
                   title: str = "",
                   xlabel: str = "Goals") -> plt.Axes:
    fig, ax = _new_ax(ax)

    x = hist["Goals"].values
    y = hist["Count"].values
    ax.bar(x, y, width=0.8, color=color)
    ax.set_xticks(x)
    ax.grid(axis="y", linestyle="--", linewidth=0.5, alpha=0.6)
    ax.set_axisbelow(True)

    ax.set_xlabel(xlabel, fontsize=6); ax.set_ylabel("Matches", fontsize=6)
    ax.set_title(title, fontsize=8)
    ax.tick_params(axis="both", labelsize=6)
    return ax


# --- Ogive (cumulative frequency) ----------------
def plot_ogive(cumulative: pd.DataFrame,
               color: str = OGIVE_COLOR,
               ax: Optional[plt.Axes] = None,
               title: str = "",
               xlabel: str = "Total goals") -> plt.Axes:
    fig, ax = _new_ax(ax)

    x = cumulative["Goals"].values
    y = cumulative["Cumulative"].values
    ax.plot(x, y, color=color, linewidth=2.5, marker="o", markersize=3,
            markerfacecolor=darken(color))
    if len(x):
        ax.set_xticks(x)
        ax.set_ylim(0, max(float(y[-1]), 1.0) * 1.05)
    ax.grid(linestyle="--", linewidth=0.5, alpha=0.6)

    ax.set_xlabel(xlabel, fontsize=6); ax.set_ylabel("Cumulative matches", fontsize=6)
    ax.set_title(title, fontsize=8)
    ax.tick_params(axis="both", labelsize=6)
    return ax


# --- Result distribution (pie) ----------------
def plot_result_pie(pie: pd.DataFrame,
                    ax: Optional[plt.Axes] = None,
                    title: str = "") -> plt.Axes:
    fig, ax = _new_ax(ax)
    total = int(pie["Value"].sum())

    if total == 0:
        # matplotlib refuses a zero-sum pie
        ax.text(0.5, 0.5, "No matches", ha="center", va="center", fontsize=8)
        ax.axis("off")
        return ax

    labels = [f"{n}: {v} ({v / total * 100:.1f}%)" if v else "" for n, v in zip(pie["Name"], pie["Value"])]
    ax.pie(pie["Value"], labels=labels, colors=pie["Color"].tolist(),
           startangle=90, counterclock=False, textprops={"fontsize": 6})
    ax.set_aspect("equal")
    ax.set_title(title, fontsize=8)
    return ax

"""Bar chart rendering for ranked regression coefficients."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Sequence

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402

from fighterstats.regression import FeatureImportance  # noqa: E402


logger = logging.getLogger(__name__)


def plot_importances(
    importances: Sequence[FeatureImportance],
    path: Path,
    *,
    title: str = "Feature Importances",
) -> Path:
    """Draw one horizontal bar per coefficient and save the figure as PNG.

    Features are listed top to bottom in the order given, so ranked input
    puts the most influential feature first.
    """

    if not importances:
        raise ValueError("no coefficients to plot")

    names = [item.name for item in importances]
    coefs = [item.coefficient for item in importances]
    positions = list(range(len(importances)))
    colors = ["tab:blue" if coef >= 0 else "tab:red" for coef in coefs]

    low = min(min(coefs), 0.0)
    high = max(max(coefs), 0.0)
    pad = (high - low) * 0.1 or 0.1

    fig, ax = plt.subplots(figsize=(10, 6))
    try:
        ax.barh(positions, coefs, color=colors, alpha=0.6)
        ax.set_yticks(positions)
        ax.set_yticklabels(names)
        ax.invert_yaxis()
        ax.axvline(0.0, color="black", linewidth=0.8)
        ax.set_xlim(low - pad, high + pad)
        ax.set_title(title)
        ax.set_xlabel("Coefficient")
        ax.set_ylabel("Feature")
        plt.tight_layout()
        path = Path(path)
        fig.savefig(path, dpi=150, bbox_inches="tight")
    finally:
        plt.close(fig)

    logger.info("Saved feature importance chart to %s", path)
    return path

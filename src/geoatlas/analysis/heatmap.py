"""
Association heatmap over two categorical facets.

Scores every (facet A value, facet B value) combination. The focus asset's
own cell is always the hottest; facet B values are compared on their first
``prefix_length`` characters (stage names share a short keyword prefix).

Strategies:
- ``reference``: reproducible placeholder score, bit-compatible with the
  catalogue front end.
- ``cooccurrence``: real co-occurrence counts scaled against the busiest cell.
"""

import logging
from typing import Dict, List, Optional, Sequence, Tuple

from ..config import BACKGROUND_CEILING, FOCUS_INTENSITY, HeatmapConfig
from ..core.exceptions import InvalidArgumentError
from ..core.types import Asset, Facet, HeatmapCell, HeatmapMatrix, HeatmapStrategy

logger = logging.getLogger(__name__)


def parse_facet(facet: object) -> Facet:
    try:
        return Facet(facet)
    except ValueError:
        raise InvalidArgumentError(
            f"Unknown facet: {facet!r}",
            {"allowed": [f.value for f in Facet]},
        ) from None


def parse_strategy(strategy: object) -> HeatmapStrategy:
    try:
        return HeatmapStrategy(strategy)
    except ValueError:
        raise InvalidArgumentError(
            f"Unknown heatmap strategy: {strategy!r}",
            {"allowed": [s.value for s in HeatmapStrategy]},
        ) from None


def reference_intensity(a: str, b: str, total_assets: int) -> int:
    seed = len(a) + len(b) + (total_assets % 5)
    return (seed * 17) % BACKGROUND_CEILING


class HeatmapAnalyzer:
    """
    Computes association matrices for a pair of facets.
    """

    def __init__(self, config: Optional[HeatmapConfig] = None):
        self.config = config or HeatmapConfig()

    def default_axes(
        self,
        assets: Sequence[Asset],
        facet_a: Optional[Facet] = None,
        facet_b: Optional[Facet] = None,
    ) -> Tuple[List[str], List[str]]:
        """Distinct facet A values and facet B prefixes, first-seen order."""
        fa = parse_facet(facet_a or self.config.facet_a)
        fb = parse_facet(facet_b or self.config.facet_b)
        n = self.config.prefix_length
        rows = dict.fromkeys(v for v in (a.facet_value(fa) for a in assets) if v)
        columns = dict.fromkeys(v[:n] for v in (a.facet_value(fb) for a in assets) if v)
        return list(rows), list(columns)

    def compute(
        self,
        assets: Sequence[Asset],
        facet_a_values: Sequence[str],
        facet_b_values: Sequence[str],
        focus_asset: Optional[Asset],
        facet_a: Optional[Facet] = None,
        facet_b: Optional[Facet] = None,
        strategy: Optional[str] = None,
    ) -> HeatmapMatrix:
        """
        Build the full facet_a_values x facet_b_values matrix.

        Raises:
            InvalidArgumentError: For an unknown facet or strategy.
        """
        fa = parse_facet(facet_a or self.config.facet_a)
        fb = parse_facet(facet_b or self.config.facet_b)
        mode = parse_strategy(strategy or self.config.strategy)

        focus_cell = None
        if focus_asset is not None:
            focus_cell = (
                focus_asset.facet_value(fa),
                focus_asset.facet_value(fb)[:self.config.prefix_length],
            )

        if mode is HeatmapStrategy.REFERENCE:
            total = len(assets)
            background = {
                (a, b): reference_intensity(a, b, total)
                for a in facet_a_values for b in facet_b_values
            }
        else:
            counts = self._cooccurrence(assets, facet_a_values, facet_b_values, fa, fb)
            peak = max((c for cell, c in counts.items() if cell != focus_cell), default=0)
            background = {cell: self._scale(c, peak) for cell, c in counts.items()}

        cells = []
        for a in facet_a_values:
            for b in facet_b_values:
                if (a, b) == focus_cell:
                    intensity = FOCUS_INTENSITY
                else:
                    intensity = background[(a, b)]
                cells.append(HeatmapCell(facet_a_value=a, facet_b_value=b, intensity=intensity))

        logger.debug("Heatmap %s x %s (%s): %d cells", fa, fb, mode, len(cells))
        return HeatmapMatrix(
            facet_a=fa,
            facet_b=fb,
            facet_a_values=list(facet_a_values),
            facet_b_values=list(facet_b_values),
            cells=cells,
        )

    @staticmethod
    def _cooccurrence(
        assets: Sequence[Asset],
        facet_a_values: Sequence[str],
        facet_b_values: Sequence[str],
        fa: Facet,
        fb: Facet,
    ) -> Dict[Tuple[str, str], int]:
        counts = {(a, b): 0 for a in facet_a_values for b in facet_b_values}
        for asset in assets:
            a = asset.facet_value(fa)
            b_value = asset.facet_value(fb)
            for b in facet_b_values:
                if b and b_value.startswith(b) and (a, b) in counts:
                    counts[(a, b)] += 1
        return counts

    @staticmethod
    def _scale(count: int, peak: int) -> int:
        if peak <= 0:
            return 0
        return min(BACKGROUND_CEILING, round(count * BACKGROUND_CEILING / peak))


def compute_heatmap(
    assets: Sequence[Asset],
    facet_a_values: Sequence[str],
    facet_b_values: Sequence[str],
    focus_asset: Optional[Asset],
    facet_a: Facet = Facet.PROFESSION,
    facet_b: Facet = Facet.STAGE,
    strategy: str = HeatmapStrategy.REFERENCE,
) -> HeatmapMatrix:
    return HeatmapAnalyzer().compute(
        assets, facet_a_values, facet_b_values, focus_asset,
        facet_a=facet_a, facet_b=facet_b, strategy=strategy,
    )

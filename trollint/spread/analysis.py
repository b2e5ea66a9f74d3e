# trollint/spread/analysis.py

from __future__ import annotations

from typing import List, Sequence

from trollint.models.catalog import Finish, Light, Turbidity
from trollint.models.query import FishingConditionsQuery

SHINY = {Finish.HOLOGRAPHIC, Finish.CHROME, Finish.MIRROR, Finish.GLITTER}
LOW_LIGHT = {Light.LOW, Light.DARK, Light.NIGHT}
MURKY = {Turbidity.MURKY, Turbidity.VERY_MURKY}


def analyze_spread(slots: Sequence, query: FishingConditionsQuery) -> List[str]:
    """
    Short review of a filled spread: colour, finish, size and depth diversity.
    slots are ScoredCandidate objects.
    """
    if not slots:
        return []

    lures = [c.lure for c in slots]
    lines: List[str] = []

    colors = {l.color for l in lures}
    if len(colors) == len(lures):
        lines.append(f"Colours: {len(colors)} distinct, every lure stands apart.")
    else:
        lines.append(f"Colours: {len(colors)} distinct for {len(lures)} lines, some colours repeat.")

    finishes = [l.finish for l in lures if l.finish is not None]
    if not finishes:
        lines.append("Finishes: none recorded for these lures.")
    else:
        names = ", ".join(sorted({f.value for f in finishes}))
        lines.append(f"Finishes: {names} ({len(finishes)}/{len(lures)} lures).")
        if query.light == Light.STRONG and query.turbidity == Turbidity.CLEAR:
            if sum(f in SHINY for f in finishes) >= 2:
                lines.append("Several reflective finishes: well suited to strong light.")
            else:
                lines.append("A holographic or chrome finish would make more of the strong light.")
        elif query.light in LOW_LIGHT:
            if any(f in (Finish.MATTE, Finish.PHOSPHORESCENT) for f in finishes):
                lines.append("A matte or phosphorescent finish is present for the low light.")
            else:
                lines.append("A matte finish would sharpen the silhouette in low light.")
        elif query.turbidity in MURKY:
            if any(f in (Finish.MATTE, Finish.UV) for f in finishes):
                lines.append("A finish suited to murky water is present.")
            else:
                lines.append("UV or matte finishes cut better through murky water.")

    sizes = [l.length_cm for l in lures]
    spread_cm = max(sizes) - min(sizes)
    if spread_cm >= 5:
        lines.append(f"Sizes: {min(sizes):g}-{max(sizes):g} cm, a good range of profiles.")
    else:
        lines.append(f"Sizes: {min(sizes):g}-{max(sizes):g} cm, similar profiles.")

    depths = [l.depth_max for l in lures if l.depth_max is not None]
    if depths:
        if max(depths) - min(depths) >= 3:
            lines.append(f"Depths: {min(depths):g}-{max(depths):g} m, good vertical coverage.")
        else:
            lines.append(f"Depths: {min(depths):g}-{max(depths):g} m, all lures swim at a similar depth.")

    return lines

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, List, Sequence

from ..config import RuntimeConfig
from .zipper import Zipper


Transform = Callable[[Zipper[float]], float]


def running_max(z: Zipper[float]) -> float:
    """Maximum of the focus and everything before it."""
    return max(z.prev() + (z.extract(),))


def moving_max(window: int) -> Transform:
    """Maximum over the focus and at most ``window - 1`` preceding samples."""
    if window < 1:
        raise ValueError(f"window must be >= 1, got {window}")

    def compute(z: Zipper[float]) -> float:
        return max([z.extract(), *z.lefts(window - 1)])

    return compute


def is_peak(z: Zipper[float]) -> bool:
    """True when the focus is strictly above both immediate neighbours.

    Boundary positions have a missing neighbour and are never peaks.
    """
    left = next(z.lefts(1), None)
    right = next(z.rights(1), None)
    if left is None or right is None:
        return False
    return left < z.extract() > right


def peak_marker(marker: float = 10.0) -> Transform:
    """Display magnitude for peaks: ``marker`` at a peak, else 0."""

    def compute(z: Zipper[float]) -> float:
        return float(marker) if is_peak(z) else 0.0

    return compute


def weighted_moving_average(weights: Sequence[float]) -> Transform:
    """Weighted average of a window centered on the focus.

    ``weights`` must have odd length; the middle weight applies to the focus.
    Neighbours missing at the ends are skipped and the remaining weights are
    renormalised.
    """
    ws = [float(w) for w in weights]
    if not ws or len(ws) % 2 == 0:
        raise ValueError(f"weights must have odd length, got {len(ws)}")
    if any(w < 0 for w in ws) or sum(ws) <= 0:
        raise ValueError("weights must be non-negative with a positive sum")
    radius = len(ws) // 2

    def compute(z: Zipper[float]) -> float:
        total = ws[radius] * z.extract()
        norm = ws[radius]
        for offset, value in enumerate(z.lefts(radius), start=1):
            total += ws[radius - offset] * value
            norm += ws[radius - offset]
        for offset, value in enumerate(z.rights(radius), start=1):
            total += ws[radius + offset] * value
            norm += ws[radius + offset]
        # Zero focus weight with no neighbours leaves nothing to average.
        return total / norm if norm > 0 else z.extract()

    return compute


@dataclass
class TransformSpec:
    key: str
    label: str
    build: Callable[[RuntimeConfig], Transform]


TRANSFORMS: Dict[str, TransformSpec] = {
    "running_max": TransformSpec(
        key="running_max", label="Running max", build=lambda cfg: running_max
    ),
    "moving_max": TransformSpec(
        key="moving_max",
        label="Moving max",
        build=lambda cfg: moving_max(cfg.window_size),
    ),
    "peaks": TransformSpec(
        key="peaks",
        label="Peaks",
        build=lambda cfg: peak_marker(cfg.peak_marker),
    ),
    "wma": TransformSpec(
        key="wma",
        label="Weighted moving average",
        build=lambda cfg: weighted_moving_average(cfg.weights),
    ),
}


def resolve(keys: Sequence[str]) -> List[TransformSpec]:
    unknown = [k for k in keys if k not in TRANSFORMS]
    if unknown:
        raise ValueError(
            f"Unknown transform(s): {', '.join(unknown)}; expected one of {', '.join(TRANSFORMS)}"
        )
    return [TRANSFORMS[k] for k in keys]


def run_all(cfg: RuntimeConfig, keys: Sequence[str] | None = None) -> Dict[str, List[float]]:
    """Apply the selected transforms to the configured samples.

    Returns a mapping of transform key to the flattened derived series.
    """
    series = Zipper.from_list(cfg.samples, cfg.focus_index)
    out: Dict[str, List[float]] = {}
    for spec in resolve(cfg.transforms if keys is None else keys):
        out[spec.key] = [float(v) for v in series.extend(spec.build(cfg)).to_list()]
    return out

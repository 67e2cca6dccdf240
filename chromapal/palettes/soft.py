"""
Soft palettes: k-means clustering of the L*a*b* gamut.

The L*a*b* cube is sampled on a regular grid, samples outside sRGB (or
rejected by the caller's constraint) are dropped, and k-means is run on the
rest. The means of the clusters are the palette.

A mean can fall outside the allowed region when the constraint carves a
non-convex shape out of the gamut. In that case the cluster switches to
k-medoid for that iteration and takes the closest unused sample instead, so
every returned color satisfies the constraint as long as enough samples
passed the filter in the first place.

Everything runs in L*a*b* with L in [0, 1] and a, b in [-1, 1]; conversion
to RGB only happens for the output.
"""

from __future__ import annotations
import logging
import math
from dataclasses import dataclass
from typing import List, Optional

import numpy as np
from numpy import ndarray as NDArray

from ..colors import Color, from_lab
from ..conversions import np_lab_to_xyz_white_ref, np_xyz_to_linear_rgb, np_delinearize
from ..errors import PaletteGenerationError
from ..types.color_types import LabConstraint, Triple
from ..types.white_point import D65
from ..utils.num_utils import sq
from ..utils.rand import RandomSource, default_random_source

logger = logging.getLogger(__name__)

# Two L*a*b* samples closer than this on every axis are the same sample.
LAB_DELTA = 1e-6

# Grid steps (dl, dab): roughly 8000 and 160000 grid points before filtering.
FEW_SAMPLES_STEPS = (0.05, 0.1)
MANY_SAMPLES_STEPS = (0.01, 0.05)


@dataclass(frozen=True)
class SoftPaletteSettings:
    """Options for ``soft_palette_with_rand``."""
    # Restricts the allowed colors; called as check_color(l, a, b).
    check_color: Optional[LabConstraint] = None
    # More iterations give better spread at a linear cost.
    iterations: int = 50
    # Sample the gamut about 20x denser. Only worth it when check_color
    # leaves a small or oddly shaped region.
    many_samples: bool = False


def _grid_axis(start: float, step: float) -> List[float]:
    # Accumulated, not multiplied: the grid must land on the same floats
    # as a running `v += step` loop.
    values = []
    v = start
    while v <= 1.0:
        values.append(v)
        v += step
    return values


def _check(settings: SoftPaletteSettings, lab: Triple) -> bool:
    l, a, b = lab
    return from_lab(l, a, b).is_valid() and (
        settings.check_color is None or bool(settings.check_color(l, a, b))
    )


def sample_lab_space(settings: SoftPaletteSettings) -> NDArray:
    """
    Sample the L*a*b* cube and keep the allowed points.

    Returns:
        Array of shape (n, 3), in grid order (L outermost, b innermost)
    """
    dl, dab = MANY_SAMPLES_STEPS if settings.many_samples else FEW_SAMPLES_STEPS
    ls = _grid_axis(0.0, dl)
    abs_ = _grid_axis(-1.0, dab)

    l_grid, a_grid, b_grid = np.meshgrid(ls, abs_, abs_, indexing='ij')
    lab = np.stack([l_grid.ravel(), a_grid.ravel(), b_grid.ravel()], axis=-1)

    xyz = np_lab_to_xyz_white_ref(lab[:, 0], lab[:, 1], lab[:, 2], D65)
    rgb = np_delinearize(np_xyz_to_linear_rgb(xyz[:, 0], xyz[:, 1], xyz[:, 2]))
    samples = lab[np.all((rgb >= 0.0) & (rgb <= 1.0), axis=1)]

    if settings.check_color is not None:
        check = settings.check_color
        keep = np.fromiter(
            (bool(check(l, a, b)) for l, a, b in samples.tolist()),
            dtype=bool,
            count=len(samples),
        )
        samples = samples[keep]

    logger.debug(f"Sampled {lab.shape[0]} grid points, {samples.shape[0]} allowed")
    return samples


def _pick_initial_means(samples: NDArray, count: int, rand: RandomSource) -> NDArray:
    # Medoids rather than random points: they are guaranteed to be allowed.
    means = np.empty((count, 3))
    for i in range(count):
        while True:
            candidate = samples[rand.next_int(len(samples))]
            taken = np.all(np.abs(means[:i] - candidate) < LAB_DELTA, axis=1)
            if not taken.any():
                break
        means[i] = candidate
    return means


def _distances_to(samples: NDArray, point) -> NDArray:
    return np.sqrt(
        sq(samples[:, 0] - point[0]) + sq(samples[:, 1] - point[1]) + sq(samples[:, 2] - point[2])
    )


def soft_palette_with_rand(count: int, settings: SoftPaletteSettings, rand: RandomSource) -> List[Color]:
    """
    Generate ``count`` well-separated colors by k-means in L*a*b*.

    Args:
        count: Number of colors to generate
        settings: Constraint, iteration count and sampling density
        rand: Source of all random draws; a seeded source gives a
            reproducible palette

    Returns:
        List of ``count`` colors

    Raises:
        PaletteGenerationError: If fewer than ``count`` samples pass the filter
        ValueError: If ``count`` is negative
    """
    if count < 0:
        raise ValueError(f"count must be non-negative, got {count}")

    samples = sample_lab_space(settings)
    n_samples = len(samples)

    if n_samples < count:
        logger.debug(f"Infeasible soft palette: {count} colors requested, {n_samples} samples")
        raise PaletteGenerationError(count, n_samples)
    if n_samples == count:
        return [from_lab(*lab) for lab in samples.tolist()]
    if count == 0:
        return []

    means = cluster_lab_samples(samples, count, settings, rand)
    return [from_lab(*lab) for lab in means.tolist()]


def cluster_lab_samples(samples: NDArray, count: int, settings: SoftPaletteSettings, rand: RandomSource) -> NDArray:
    """
    Run k-means (with k-medoid fallback) over ``samples``.

    ``samples`` must hold more than ``count`` distinct rows. Random draws
    happen in a fixed order: ``count`` initial picks (redrawn on collision),
    then one redraw per empty cluster, in mean order, as iterations go.

    Returns:
        Array of shape (count, 3) with the final means
    """
    n_samples = len(samples)
    means = _pick_initial_means(samples, count, rand)
    fallbacks = 0

    for _ in range(settings.iterations):
        # Assignment: nearest mean, first one on ties.
        dl = samples[:, 0, None] - means[None, :, 0]
        da = samples[:, 1, None] - means[None, :, 1]
        db = samples[:, 2, None] - means[None, :, 2]
        dist = np.sqrt(dl * dl + da * da + db * db)
        clusters = np.argmin(dist, axis=1)

        # Samples currently serving as a medoid are not eligible as fallbacks.
        used = np.any(
            (np.abs(dl) < LAB_DELTA) & (np.abs(da) < LAB_DELTA) & (np.abs(db) < LAB_DELTA),
            axis=1,
        )

        sizes = np.bincount(clusters, minlength=count)
        sums = [np.bincount(clusters, weights=samples[:, c], minlength=count) for c in range(3)]

        for imean in range(count):
            size = int(sizes[imean])
            if size > 0:
                newmean = (
                    float(sums[0][imean]) / size,
                    float(sums[1][imean]) / size,
                    float(sums[2][imean]) / size,
                )
            else:
                # Empty cluster: restart it from a random unused sample.
                while True:
                    inewmean = rand.next_int(n_samples)
                    if not used[inewmean]:
                        break
                newmean = tuple(samples[inewmean].tolist())
                used[inewmean] = True

            if size > 0 and _check(settings, newmean):
                means[imean] = newmean
                continue

            # k-medoid fallback: closest unused sample.
            fallbacks += 1
            d = _distances_to(samples, newmean)
            d[used] = np.inf
            nearest = int(np.argmin(d))
            if math.isfinite(d[nearest]):
                newmean = tuple(samples[nearest].tolist())
            means[imean] = newmean

    logger.debug(
        f"Soft palette of {count} colors from {n_samples} samples: "
        f"{settings.iterations} iterations, {fallbacks} medoid fallbacks"
    )
    return means


def soft_palette(count: int, settings: Optional[SoftPaletteSettings] = None) -> List[Color]:
    """``soft_palette_with_rand`` with a fresh, unseeded random source."""
    if settings is None:
        settings = SoftPaletteSettings()
    return soft_palette_with_rand(count, settings, default_random_source())

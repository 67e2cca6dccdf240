import logging
import math

import numpy as np
import pytest

from chromapal import (
    LCGRandomSource,
    PaletteGenerationError,
    SoftPaletteSettings,
    from_lab,
    soft_palette,
    soft_palette_with_rand,
)
from chromapal.palettes import cluster_lab_samples, sample_lab_space


def test_settings_defaults():
    settings = SoftPaletteSettings()
    assert settings.check_color is None
    assert settings.iterations == 50
    assert settings.many_samples is False


def test_samples_are_in_gamut():
    samples = sample_lab_space(SoftPaletteSettings())
    assert samples.ndim == 2 and samples.shape[1] == 3
    assert 500 < len(samples) < 9261
    for lab in samples[::50].tolist():
        assert from_lab(*lab).is_valid()


def test_samples_respect_constraint():
    settings = SoftPaletteSettings(check_color=lambda l, a, b: l > 0.5)
    samples = sample_lab_space(settings)
    assert len(samples) > 0
    assert np.all(samples[:, 0] > 0.5)


def test_many_samples_is_denser():
    few = sample_lab_space(SoftPaletteSettings())
    many = sample_lab_space(SoftPaletteSettings(many_samples=True))
    assert len(many) > 10 * len(few)


def test_soft_palette_count_and_validity():
    settings = SoftPaletteSettings(iterations=1)
    for n in (1, 2, 5, 12):
        colors = soft_palette_with_rand(n, settings, LCGRandomSource(42))
        assert len(colors) == n
        assert all(c.is_valid() for c in colors)


def test_soft_palette_colors_are_distinct():
    colors = soft_palette_with_rand(8, SoftPaletteSettings(iterations=10), LCGRandomSource(3))
    assert len(set(c.hex() for c in colors)) == 8


def test_seeded_palette_is_reproducible():
    settings = SoftPaletteSettings(iterations=10)
    first = soft_palette_with_rand(6, settings, LCGRandomSource(1234))
    second = soft_palette_with_rand(6, settings, LCGRandomSource(1234))
    assert first == second


def test_constraint_is_honored():
    settings = SoftPaletteSettings(check_color=lambda l, a, b: l > 0.5, iterations=10)
    colors = soft_palette_with_rand(6, settings, LCGRandomSource(7))
    assert len(colors) == 6
    for c in colors:
        assert c.is_valid()
        assert c.lab()[0] > 0.5 - 1e-9


def test_too_many_colors():
    with pytest.raises(PaletteGenerationError) as excinfo:
        soft_palette_with_rand(100000, SoftPaletteSettings(iterations=1), LCGRandomSource(1))
    assert excinfo.value.requested == 100000
    assert 0 < excinfo.value.available < 100000
    assert isinstance(excinfo.value, ValueError)


def test_empty_constraint():
    settings = SoftPaletteSettings(check_color=lambda l, a, b: False)
    with pytest.raises(PaletteGenerationError) as excinfo:
        soft_palette_with_rand(1, settings, LCGRandomSource(1))
    assert excinfo.value.available == 0
    assert soft_palette_with_rand(0, settings, LCGRandomSource(1)) == []


def test_exactly_as_many_samples_as_colors():
    settings = SoftPaletteSettings(check_color=lambda l, a, b: l > 0.9 and a * a + b * b < 0.01)
    samples = sample_lab_space(settings)
    n = len(samples)
    assert n > 0

    colors = soft_palette_with_rand(n, settings, LCGRandomSource(1))
    assert colors == [from_lab(*lab) for lab in samples.tolist()]

    with pytest.raises(PaletteGenerationError):
        soft_palette_with_rand(n + 1, settings, LCGRandomSource(1))


def test_zero_and_negative_count():
    assert soft_palette_with_rand(0, SoftPaletteSettings(), LCGRandomSource(1)) == []
    with pytest.raises(ValueError):
        soft_palette_with_rand(-1, SoftPaletteSettings(), LCGRandomSource(1))


def test_unseeded_wrapper():
    colors = soft_palette(3, SoftPaletteSettings(iterations=2))
    assert len(colors) == 3
    assert len(soft_palette(2)) == 2


def test_debug_logging(caplog):
    with caplog.at_level(logging.DEBUG, logger="chromapal"):
        soft_palette_with_rand(3, SoftPaletteSettings(iterations=2), LCGRandomSource(5))
    assert any("Soft palette of 3 colors" in r.getMessage() for r in caplog.records)


class RecordingRandomSource:
    """Wraps a random source and records every ``next_int`` call as (n, result)."""

    def __init__(self, source):
        self.source = source
        self.calls = []

    def next_float64(self):
        return self.source.next_float64()

    def next_int(self, n):
        value = self.source.next_int(n)
        self.calls.append((n, value))
        return value


class ScriptedRandomSource:
    """Returns the given ints in order and records the bound of each call."""

    def __init__(self, values):
        self.values = list(values)
        self.bounds = []

    def next_float64(self):
        raise AssertionError("unexpected next_float64 call")

    def next_int(self, n):
        self.bounds.append(n)
        return self.values.pop(0)


def in_lab_shell(l, a, b):
    r = math.sqrt((l - 0.5) * (l - 0.5) + a * a + b * b)
    return 0.33 <= r <= 0.43


def test_shell_palette_draws_and_fallbacks(caplog):
    # Cluster means of a hollow shell fall into the hole, so every update
    # goes through the medoid fallback.
    settings = SoftPaletteSettings(check_color=in_lab_shell, iterations=3)
    assert len(sample_lab_space(settings)) == 316

    rand = RecordingRandomSource(LCGRandomSource(1))
    with caplog.at_level(logging.DEBUG, logger="chromapal"):
        colors = soft_palette_with_rand(4, settings, rand)

    assert rand.calls == [(316, 162), (316, 55), (316, 97), (316, 168)]
    expected = [
        (0.65, 0.3, 0.0),
        (0.15, 0.1, 0.1),
        (0.7, 0.0, -0.3),
        (0.6, -0.1, 0.3),
    ]
    for c, lab in zip(colors, expected):
        assert np.allclose(c.lab(), lab, atol=1e-9), (c.lab(), lab)
        assert in_lab_shell(*c.lab())
    assert any("12 medoid fallbacks" in r.getMessage() for r in caplog.records)


def test_initial_picks_redraw_on_collision():
    samples = sample_lab_space(SoftPaletteSettings())
    n = len(samples)
    rand = ScriptedRandomSource([7, 7, 3])

    means = cluster_lab_samples(samples, 2, SoftPaletteSettings(iterations=0), rand)

    assert rand.bounds == [n, n, n]
    assert np.array_equal(means, samples[[7, 3]])


def test_empty_cluster_is_redrawn(caplog):
    samples = np.array([
        [0.5, 0.02, 0.04],
        [0.5, 0.10, -0.10],
        [0.5, 0.08, -0.08],
        [0.5, -0.06, -0.08],
        [0.5, -0.08, -0.08],
    ])
    # Means start on the first three samples. After one update the third
    # mean loses both of its samples, so the second iteration redraws it:
    # sample 1 is a current mean and is skipped, sample 3 is taken and the
    # mean moves to the closest sample not in use, sample 4.
    rand = ScriptedRandomSource([0, 1, 2, 1, 3])

    with caplog.at_level(logging.DEBUG, logger="chromapal"):
        means = cluster_lab_samples(samples, 3, SoftPaletteSettings(iterations=2), rand)

    assert rand.bounds == [5, 5, 5, 5, 5]
    assert rand.values == []
    assert np.allclose(means[0], (0.5, -0.04, -0.04), atol=1e-12)
    assert np.allclose(means[1], (0.5, 0.09, -0.09), atol=1e-12)
    assert np.array_equal(means[2], samples[4])
    assert any("1 medoid fallbacks" in r.getMessage() for r in caplog.records)

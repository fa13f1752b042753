"""
Beam Shadow Tests

Shadow flags are derived from hand-computed shadow projections. With
pitch 3 and 10 segments the midpoints sit at 0.15, 0.45, ..., 2.85.
"""

import math

import numpy as np
import pytest
from conftest import make_geometry
from groundshade import ShadingGeometryError, compute_beam_shadow
from groundshade.components.beam_shadow import (
    cast_shadow,
    interior_shadow_intervals,
    shadow_projections,
    split_wrapped_shadow,
)

# =============================================================================
# Test Fixtures
# =============================================================================


def fixed_profile(tan_pa):
    """Profile angle function returning an angle with the given tangent."""
    angle = math.atan(tan_pa) if tan_pa > 0 else math.pi + math.atan(tan_pa)
    return lambda zenith, azimuth, panel_azimuth: angle


def shadow_for(tan_pa, geom=None, n_segments=10):
    geom = geom if geom is not None else make_geometry()
    return compute_beam_shadow(0.5, 0.0, geom, n_segments, profile_angle=fixed_profile(tan_pa))


# =============================================================================
# Property Tests
# =============================================================================


class TestSunBelowHorizon:
    @pytest.mark.parametrize("zenith", [math.pi / 2 + 1e-9, 1.7, 3.0])
    @pytest.mark.parametrize(
        "geom",
        [make_geometry(), make_geometry(tilt=0.0, clearance=5.0), make_geometry(tilt=1.0, pitch=8.0)],
    )
    def test_everything_shaded(self, zenith, geom):
        shadow = compute_beam_shadow(zenith, 0.3, geom, 12)

        for flags in (shadow.mid, shadow.first, shadow.last):
            assert np.all(flags == 1)
        assert shadow.front_profile_angle is None

    def test_profile_angle_not_evaluated(self, geometry):
        def fail(*args):
            raise AssertionError("profile angle evaluated for a sun below the horizon")

        shadow = compute_beam_shadow(2.0, 0.0, geometry, 5, profile_angle=fail)
        assert shadow.mid.tolist() == [1] * 5


class TestShadowFlags:
    def test_flags_are_binary(self, geometry):
        for zenith in np.linspace(0.0, 1.5, 7):
            for azimuth in np.linspace(-math.pi, math.pi, 9):
                shadow = compute_beam_shadow(zenith, azimuth, geometry, 25)
                for flags in (shadow.mid, shadow.first, shadow.last):
                    assert flags.dtype == np.int8
                    assert set(np.unique(flags)) <= {0, 1}

    def test_flat_panels_with_overhead_sun(self):
        """Overhead sun shades exactly the ground beneath a flat panel."""
        geom = make_geometry(tilt=0.0)
        shadow = compute_beam_shadow(0.0, 0.0, geom, 10)

        assert shadow.mid.tolist() == [1, 1, 1, 0, 0, 0, 0, 0, 0, 0]
        assert shadow.last.tolist() == [1, 1, 1, 0, 0, 0, 0, 0, 0, 0]
        assert shadow.first.tolist() == [0] * 10

    def test_sun_in_front_shades_behind_row(self):
        """Example scenario: zenith 0.5 rad due south, panels facing south."""
        shadow = compute_beam_shadow(0.5, 0.0, make_geometry(), 10)

        assert shadow.front_profile_angle == pytest.approx(math.pi / 2 - 0.5)
        assert shadow.mid.tolist() == [1, 1, 1, 1, 0, 0, 0, 0, 0, 0]
        assert shadow.last.tolist() == [1, 1, 1, 1, 0, 0, 0, 0, 0, 0]
        assert shadow.first.tolist() == [0] * 10

    def test_sun_behind_panels_shades_front_of_row(self):
        """Sun behind the modules throws the shadow towards the front."""
        shadow = shadow_for(-0.5)

        # Shadow [-0.4, -0.036) relative to a row, i.e. [2.6, 2.964) in the span
        assert shadow.mid.tolist() == [0] * 9 + [1]
        assert shadow.first.tolist() == [0] * 9 + [1]
        assert shadow.last.tolist() == [0] * 10

    def test_low_sun_shades_whole_span(self):
        """Panel shadow longer than the gap shades all interior ground."""
        shadow = shadow_for(0.1)

        assert shadow.mid.tolist() == [1] * 10
        assert shadow.last.tolist() == [1] * 10
        assert shadow.first.tolist() == [0] * 10

    def test_low_sun_from_behind_shades_whole_span(self):
        shadow = shadow_for(-0.05)

        assert shadow.mid.tolist() == [1] * 10
        assert shadow.first.tolist() == [1] * 10

    def test_sun_on_profile_horizon_shades_everything(self, geometry):
        shadow = compute_beam_shadow(0.5, 0.0, geometry, 6, profile_angle=lambda z, a, p: 0.0)

        assert shadow.mid.tolist() == [1] * 6
        assert shadow.first.tolist() == [1] * 6
        assert shadow.last.tolist() == [1] * 6

    def test_midpoint_rule_for_coarse_segments(self):
        """A segment counts as shaded only if its midpoint is."""
        # Shadow [0.109, 1.226) with 2 segments: midpoints 0.75 (in) and 2.25 (out)
        shadow = compute_beam_shadow(0.5, 0.0, make_geometry(), 2)
        assert shadow.mid.tolist() == [1, 0]


class TestWraparound:
    def test_shadow_past_pitch_wraps_to_span_start(self):
        """tan(PA) = 0.2 puts the shadow at [1.0, 3.433), past the pitch of 3."""
        shadow = shadow_for(0.2)

        intervals = shadow.mid_intervals.intervals
        assert len(intervals) == 2
        (s1_start, s1_end), (s2_start, s2_end) = intervals
        assert s1_start == pytest.approx(1.0)
        assert s1_end == 3.0
        assert s2_start == 0.0
        assert s2_end == pytest.approx(0.43294, abs=1e-4)

        assert shadow.mid.tolist() == [1, 0, 0, 1, 1, 1, 1, 1, 1, 1]
        # Edge rows never wrap
        assert shadow.last.tolist() == [0, 0, 0, 1, 1, 1, 1, 1, 1, 1]
        assert shadow.first.tolist() == [0] * 10

    def test_wrapped_parts_partition_the_shadow(self, geometry):
        lh, lc, lhc = shadow_projections(geometry, math.atan(0.2))
        start, end = cast_shadow(lc, lhc, geometry.base)
        intervals = interior_shadow_intervals(lh, lc, lhc, geometry.pitch, geometry.base).intervals

        covered = sum(e - s for s, e in intervals)
        assert covered == pytest.approx(end - start)
        # Sub-intervals do not overlap
        assert intervals[1][1] <= intervals[0][0]

    def test_fine_segments_count_matches_shadow_length(self, geometry):
        n = 3000
        shadow = compute_beam_shadow(0.5, 0.0, geometry, n, profile_angle=fixed_profile(0.2))
        shaded_length = shadow.mid.sum() * geometry.pitch / n

        assert shaded_length == pytest.approx(3.43294 - 1.0, abs=2 * geometry.pitch / n)

    def test_far_shadow_moved_into_span(self):
        """A shadow cast several spans back is folded into [0, pitch)."""
        geom = make_geometry(tilt=0.1, pitch=2.0, clearance=2.9)
        lh, lc, lhc = shadow_projections(geom, math.atan(0.5))
        intervals = interior_shadow_intervals(lh, lc, lhc, geom.pitch, geom.base).intervals

        for start, end in intervals:
            assert 0.0 <= start < end <= geom.pitch

    def test_overlap_beyond_tolerance_is_fatal(self):
        with pytest.raises(ShadingGeometryError) as excinfo:
            split_wrapped_shadow(0.5, 3.6, 3.0)

        assert excinfo.value.pitch == 3.0
        assert excinfo.value.overlap == pytest.approx(0.1)
        assert "Unexpected shading coordinates" in str(excinfo.value)

    def test_overlap_within_tolerance_is_accepted(self):
        intervals = split_wrapped_shadow(0.5, 3.5 + 5e-7, 3.0)

        assert intervals[0] == (0.5, 3.0)
        assert intervals[1][0] == 0.0
        assert intervals[1][1] == pytest.approx(0.5 + 5e-7)

    def test_shadow_inside_span_is_not_split(self):
        assert split_wrapped_shadow(0.5, 2.0, 3.0) == ((0.5, 2.0),)

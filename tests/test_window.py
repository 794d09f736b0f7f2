"""
Tests for clamped local windows and open-interval membership.
"""

import numpy as np
import pytest

from locality.window import LocalWindow, contains, local_window, window_bounds


# =============================================================================
# WINDOW GENERATION
# =============================================================================

class TestLocalWindow:
    """Window placement around a query coordinate."""

    def test_centered_window(self):
        """lam=0.1 around 0.6 gives (0.55, 0.65)."""
        window = local_window(0.6, 0.1)
        assert window.lo == pytest.approx(0.55)
        assert window.hi == pytest.approx(0.65)

    def test_clamped_at_zero(self):
        """Queries near 0 snap to [0, lam]."""
        window = local_window(0.0, 0.1)
        assert window.lo == 0.0
        assert window.hi == pytest.approx(0.1)

    def test_clamped_at_one(self):
        """Queries near 1 snap to [1 - lam, 1]."""
        window = local_window(1.0, 0.1)
        assert window.lo == pytest.approx(0.9)
        assert window.hi == 1.0

    def test_just_inside_lower_boundary_zone(self):
        """z below lam/2 is still snapped to the lower boundary."""
        window = local_window(0.04, 0.1)
        assert window.lo == 0.0
        assert window.hi == pytest.approx(0.1)

    @pytest.mark.parametrize("z", np.linspace(0.0, 1.0, 41))
    @pytest.mark.parametrize("lam", [0.05, 0.1, 0.5, 0.9])
    def test_width_and_bounds(self, z, lam):
        """Every window has width lam and stays inside [0, 1]."""
        window = local_window(z, lam)
        assert window.width == pytest.approx(lam)
        assert 0.0 <= window.lo < window.hi <= 1.0

    @pytest.mark.parametrize("lam", [0.0, 1.0, -0.2, 1.5])
    def test_invalid_fraction(self, lam):
        """lam outside (0, 1) is rejected."""
        with pytest.raises(ValueError, match="lam must be in"):
            local_window(0.5, lam)

    def test_invalid_query(self):
        """z outside [0, 1] is rejected."""
        with pytest.raises(ValueError, match="z must be in"):
            local_window(1.2, 0.1)

    def test_window_rejects_inverted_bounds(self):
        with pytest.raises(ValueError):
            LocalWindow(0.6, 0.4)


class TestWindowBounds:
    """Vectorized window placement."""

    def test_matches_scalar_rule(self):
        """Elementwise bounds equal the scalar windows."""
        z = np.array([0.0, 0.03, 0.3, 0.6, 0.97, 1.0])
        lo, hi = window_bounds(z, 0.1)
        for zi, l, h in zip(z, lo, hi):
            window = local_window(zi, 0.1)
            assert l == pytest.approx(window.lo)
            assert h == pytest.approx(window.hi)

    def test_rejects_out_of_range(self):
        with pytest.raises(ValueError, match="query coordinates"):
            window_bounds(np.array([0.5, -0.1]), 0.1)


# =============================================================================
# MEMBERSHIP
# =============================================================================

class TestContains:
    """Open-interval membership."""

    def test_interior_point(self):
        assert contains(LocalWindow(0.2, 0.4), 0.3)

    def test_endpoints_excluded(self):
        """Exact endpoints are outside the window."""
        window = LocalWindow(0.2, 0.4)
        assert not contains(window, 0.2)
        assert not contains(window, 0.4)

    def test_array_membership(self):
        window = LocalWindow(0.0, 0.1)
        x = np.array([0.0, 0.05, 0.1, 0.5])
        assert contains(window, x).tolist() == [False, True, False, False]

    def test_method_delegates(self):
        assert LocalWindow(0.5, 0.6).contains(0.55)

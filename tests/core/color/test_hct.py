"""Tests for HCT, CAM16 and viewing conditions."""

from __future__ import annotations

import pytest

from chromatone.core.color.cam16 import Cam16
from chromatone.core.color.hct import Hct
from chromatone.core.color.viewing_conditions import ViewingConditions

RED = 0xFFFF0000
GREEN = 0xFF00FF00
BLUE = 0xFF0000FF
WHITE = 0xFFFFFFFF
BLACK = 0xFF000000


class TestCam16:
    """Tests for CAM16 conversion of primaries."""

    def test_red(self) -> None:
        cam = Cam16.from_argb(RED)
        assert cam.hue == pytest.approx(27.408, abs=0.01)
        assert cam.chroma == pytest.approx(113.357, abs=0.01)
        assert cam.j == pytest.approx(46.445, abs=0.01)

    def test_blue(self) -> None:
        cam = Cam16.from_argb(BLUE)
        assert cam.hue == pytest.approx(282.788, abs=0.01)
        assert cam.chroma == pytest.approx(87.230, abs=0.01)

    def test_round_trip_through_argb(self) -> None:
        for argb in (RED, GREEN, BLUE, 0xFF6750A4):
            assert Cam16.from_argb(argb).to_argb() == argb

    def test_distance_to_self_is_zero(self) -> None:
        cam = Cam16.from_argb(GREEN)
        assert cam.distance(cam) == pytest.approx(0.0)

    def test_distance_is_positive_for_different_colors(self) -> None:
        assert Cam16.from_argb(RED).distance(Cam16.from_argb(BLUE)) > 0.0


class TestViewingConditions:
    def test_default_is_cached(self) -> None:
        assert ViewingConditions.default() is ViewingConditions.default()

    def test_background_lstar_changes_conditions(self) -> None:
        dark = ViewingConditions.default_with_background_lstar(10.0)
        light = ViewingConditions.default_with_background_lstar(90.0)
        assert dark != light


class TestHct:
    """Tests for the Hct value type."""

    def test_from_argb_primaries(self) -> None:
        red = Hct.from_argb(RED)
        assert red.hue == pytest.approx(27.408, abs=0.01)
        assert red.chroma == pytest.approx(113.357, abs=0.01)
        assert red.tone == pytest.approx(53.241, abs=0.01)

        blue = Hct.from_argb(BLUE)
        assert blue.hue == pytest.approx(282.788, abs=0.01)
        assert blue.tone == pytest.approx(32.302, abs=0.01)

    def test_achromatic_extremes(self) -> None:
        assert Hct.from_argb(WHITE).tone == pytest.approx(100.0, abs=0.01)
        # CAM16 white under default viewing conditions keeps a small residual chroma
        assert Hct.from_argb(WHITE).chroma == pytest.approx(2.869, abs=0.01)
        assert Hct.from_argb(BLACK).tone == pytest.approx(0.0, abs=0.01)

    def test_to_argb_round_trip(self) -> None:
        assert Hct.from_argb(0xFF4285F4).to_argb() == 0xFF4285F4

    def test_create_hits_requested_tone(self) -> None:
        hct = Hct.create(270.0, 36.0, 50.0)
        assert hct.tone == pytest.approx(50.0, abs=0.5)
        assert hct.hue == pytest.approx(270.0, abs=1.0)
        assert hct.chroma == pytest.approx(36.0, abs=1.0)

    def test_create_maps_out_of_gamut_chroma(self) -> None:
        hct = Hct.create(120.0, 200.0, 50.0)
        assert hct.chroma < 200.0
        assert hct.tone == pytest.approx(50.0, abs=0.5)

    def test_equality_is_by_argb(self) -> None:
        assert Hct.from_argb(RED) == Hct.from_argb(RED)
        assert Hct.from_argb(RED) != Hct.from_argb(BLUE)
        assert hash(Hct.from_argb(RED)) == hash(Hct.from_argb(RED))

    def test_with_tone_keeps_hue(self) -> None:
        base = Hct.create(200.0, 20.0, 40.0)
        lighter = base.with_tone(80.0)
        assert lighter.tone == pytest.approx(80.0, abs=0.5)
        assert lighter.hue == pytest.approx(base.hue, abs=2.0)

    def test_with_chroma_zero_is_gray(self) -> None:
        gray = Hct.from_argb(RED).with_chroma(0.0)
        argb = gray.to_argb()
        assert (argb >> 16) & 0xFF == (argb >> 8) & 0xFF == argb & 0xFF
        assert gray.chroma < 3.0

    def test_in_viewing_conditions_default_is_identity(self) -> None:
        hct = Hct.from_argb(0xFF6750A4)
        recast = hct.in_viewing_conditions(ViewingConditions.default())
        assert recast.to_argb() == hct.to_argb()

    @pytest.mark.parametrize(
        ("hue", "blue", "yellow", "cyan"),
        [
            (250.0, True, False, False),
            (269.9, True, False, False),
            (270.0, False, False, False),
            (105.0, False, True, False),
            (125.0, False, False, False),
            (170.0, False, False, True),
            (207.0, False, False, False),
        ],
    )
    def test_hue_families(self, hue: float, blue: bool, yellow: bool, cyan: bool) -> None:
        assert Hct.is_blue(hue) is blue
        assert Hct.is_yellow(hue) is yellow
        assert Hct.is_cyan(hue) is cyan

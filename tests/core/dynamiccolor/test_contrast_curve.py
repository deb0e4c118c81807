"""Tests for ContrastCurve."""

from pydantic import ValidationError
import pytest

from chromatone.core.dynamiccolor.contrast_curve import ContrastCurve


class TestContrastCurve:
    """Tests for ContrastCurve sampling and interpolation."""

    @pytest.fixture
    def curve(self) -> ContrastCurve:
        return ContrastCurve.of(3.0, 4.5, 7.0, 11.0)

    def test_sample_points(self, curve: ContrastCurve) -> None:
        assert curve.get(-1.0) == 3.0
        assert curve.get(0.0) == 4.5
        assert curve.get(0.5) == 7.0
        assert curve.get(1.0) == 11.0

    def test_interpolates_between_samples(self, curve: ContrastCurve) -> None:
        assert curve.get(-0.5) == pytest.approx(3.75)
        assert curve.get(0.25) == pytest.approx(5.75)
        assert curve.get(0.75) == pytest.approx(9.0)

    def test_clamps_outside_range(self, curve: ContrastCurve) -> None:
        assert curve.get(-2.0) == 3.0
        assert curve.get(5.0) == 11.0

    def test_of_matches_keyword_construction(self) -> None:
        assert ContrastCurve.of(1.0, 2.0, 3.0, 4.0) == ContrastCurve(
            low=1.0, normal=2.0, medium=3.0, high=4.0
        )

    def test_is_frozen(self, curve: ContrastCurve) -> None:
        with pytest.raises(ValidationError):
            curve.low = 1.0  # type: ignore[misc]

    def test_rejects_negative_values(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            ContrastCurve.of(-1.0, 4.5, 7.0, 11.0)
        assert "low" in str(exc_info.value)

    def test_rejects_unknown_fields(self) -> None:
        with pytest.raises(ValidationError):
            ContrastCurve(low=1.0, normal=1.0, medium=1.0, high=1.0, extreme=2.0)  # type: ignore[call-arg]

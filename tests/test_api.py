"""Tests for the distribution facade."""

import pytest

from successdist.api import Binomial, PoissonBinomial, at_least, successes_distribution
from successdist.core.errors import InvalidArgumentError
from successdist.core.names import FamilyName
from successdist.core.validation import ValidationConfig
from successdist.stats.common.mode import Mode
from successdist.stats.distributions import binomial_cdf, poisson_binomial_pmf


class TestBinomial:
    """Test the Binomial value object."""

    def test_queries_delegate(self) -> None:
        """Test pmf/cdf agree with the plain functions."""
        d = Binomial(n=6, p=0.3)
        assert d.pmf(2) == pytest.approx(0.324135)
        assert d.cdf(2) == pytest.approx(binomial_cdf(2, 6, 0.3))
        assert d.sf(2) == pytest.approx(1 - binomial_cdf(2, 6, 0.3))
        assert d.at_least(3) == pytest.approx(d.sf(2))

    def test_moments(self) -> None:
        """Test mean and variance."""
        d = Binomial(n=10, p=0.2)
        assert d.mean() == pytest.approx(2.0)
        assert d.variance() == pytest.approx(1.6)

    def test_mode(self) -> None:
        """Test the mode search runs on the object."""
        assert Binomial(n=4, p=0.5).mode() == Mode(2, 0.375)

    def test_family(self) -> None:
        assert Binomial(n=1, p=0.5).family is FamilyName.BINOMIAL

    def test_validated_on_construction(self) -> None:
        """Test bad parameters fail early."""
        with pytest.raises(InvalidArgumentError):
            Binomial(n=-2, p=0.5)
        with pytest.raises(InvalidArgumentError):
            Binomial(n=2, p=2.0)

    def test_rejects_fractional_k(self) -> None:
        """Test k is still checked per query."""
        with pytest.raises(InvalidArgumentError, match="Binomial PMF"):
            Binomial(n=2, p=0.5).pmf(1.5)

    def test_tolerance_clips_parameter(self) -> None:
        """Test a configured tolerance normalizes p."""
        d = Binomial(n=2, p=1 + 1e-12, validation=ValidationConfig(tolerance=1e-9))
        assert d.p == 1.0


class TestPoissonBinomial:
    """Test the Poisson Binomial value object."""

    def test_n_is_vector_length(self) -> None:
        assert PoissonBinomial(p=[0.1, 0.2, 0.3]).n == 3

    def test_stores_tuple(self) -> None:
        """Test the vector is frozen into a tuple."""
        assert PoissonBinomial(p=[0.1, 0.2]).p == (0.1, 0.2)

    def test_queries_delegate(self, skewed_vector) -> None:
        """Test pmf agrees with the plain function."""
        d = PoissonBinomial(p=skewed_vector)
        for k in range(d.n + 1):
            assert d.pmf(k) == pytest.approx(poisson_binomial_pmf(k, d.n, skewed_vector))
        assert d.cdf(d.n) == pytest.approx(1.0)
        assert d.at_least(0) == pytest.approx(1.0)

    def test_moments(self) -> None:
        """Test mean and variance."""
        d = PoissonBinomial(p=[0.2, 0.5])
        assert d.mean() == pytest.approx(0.7)
        assert d.variance() == pytest.approx(0.16 + 0.25)

    def test_mode(self) -> None:
        """Test the peak of two fair trials."""
        assert PoissonBinomial(p=[0.5, 0.5]).mode() == Mode(1, 0.5)

    def test_rejects_bad_entry(self) -> None:
        with pytest.raises(InvalidArgumentError):
            PoissonBinomial(p=[0.5, -0.5])


class TestSuccessesDistribution:
    """Test the factory."""

    def test_scalar_gives_binomial(self) -> None:
        assert successes_distribution(0.4, n=3) == Binomial(n=3, p=0.4)

    def test_vector_gives_poisson_binomial(self) -> None:
        assert successes_distribution([0.4, 0.1]) == PoissonBinomial(p=(0.4, 0.1))

    def test_scalar_needs_n(self) -> None:
        with pytest.raises(InvalidArgumentError, match="n must be provided"):
            successes_distribution(0.4)

    def test_vector_length_checked_against_n(self) -> None:
        with pytest.raises(InvalidArgumentError, match="expected 3, got 2"):
            successes_distribution([0.4, 0.1], n=3)

    def test_uniform_vector_as_binomial(self) -> None:
        assert successes_distribution([0.25] * 4, family="binomial") == Binomial(n=4, p=0.25)

    def test_non_uniform_vector_as_binomial(self) -> None:
        with pytest.raises(InvalidArgumentError, match="equal"):
            successes_distribution([0.25, 0.5], family="binomial")

    def test_scalar_as_poisson_binomial(self) -> None:
        d = successes_distribution(0.5, n=3, family="poisson_binomial")
        assert d == PoissonBinomial(p=(0.5, 0.5, 0.5))

    def test_unknown_family(self) -> None:
        with pytest.raises(InvalidArgumentError, match="Unknown distribution family"):
            successes_distribution(0.5, n=3, family="geometric")

    def test_families_agree(self) -> None:
        """Test both families give the same answers for a uniform vector."""
        b = successes_distribution(0.35, n=7)
        pb = successes_distribution(0.35, n=7, family="poisson_binomial")
        for k in range(8):
            assert b.pmf(k) == pytest.approx(pb.pmf(k))


class TestAtLeast:
    """Test the at-least shortcut."""

    def test_scalar(self) -> None:
        assert at_least(1, 0.5, n=2) == pytest.approx(0.75)

    def test_vector(self) -> None:
        assert at_least(2, [0.5, 0.5]) == pytest.approx(0.25)

    def test_bounds(self) -> None:
        assert at_least(0, [0.3, 0.3]) == 1.0
        assert at_least(3, [0.3, 0.3]) == pytest.approx(0.0)


class TestTailClipping:
    """Test tail probabilities stay non-negative when the CDF rounds above one."""

    @pytest.mark.parametrize("cls, kwargs", [(Binomial, {"n": 3, "p": 0.5}), (PoissonBinomial, {"p": [0.5] * 3})])
    def test_sf_and_at_least(self, monkeypatch, cls, kwargs) -> None:
        monkeypatch.setattr(cls, "cdf", lambda self, k: 1.0 + 2.2e-16)
        d = cls(**kwargs)
        assert d.sf(3) == 0.0
        assert d.at_least(4) == 0.0

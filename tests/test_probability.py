import math

import pytest

from wordkit.engine import Dist, Prob


def test_prob_from_fraction_and_product():
    half = Prob.from_fraction(1, 2)
    quarter = Prob.from_fraction(1, 4)
    assert half.nll == pytest.approx(math.log(2))
    assert (half * half).nll == pytest.approx(quarter.nll)
    assert (half * Prob.always()) == half
    assert half.value == pytest.approx(0.5)


def test_prob_orders_by_probability_not_nll():
    half = Prob.from_fraction(1, 2)
    tenth = Prob.from_fraction(1, 10)
    assert tenth < half
    assert half > tenth
    assert max([tenth, half, Prob.from_fraction(1, 3)]) == half
    assert Prob.always() > half


@pytest.mark.parametrize("num,denom", [(0, 5), (3, 2), (-1, 4), (1, 0)])
def test_prob_rejects_bad_fractions(num, denom):
    with pytest.raises(ValueError):
        Prob.from_fraction(num, denom)


def test_dist_sorts_most_probable_first_and_formats():
    d = Dist()
    d.append(Prob.from_fraction(1, 10), "rare")
    d.append(Prob.from_fraction(1, 2), "common")
    d.append(Prob.from_fraction(1, 10), "rare2")
    d.sort_by_probability()
    assert d.values() == ["common", "rare", "rare2"]  # ties keep input order
    assert len(d) == 3
    assert d.format().splitlines()[0] == "  0.69 common"


def test_empty_dist_is_falsy():
    assert not Dist()
    assert Dist().format() == ""

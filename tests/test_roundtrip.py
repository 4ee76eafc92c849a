from hypothesis import given
from hypothesis import strategies as st

from polysecret.codec import encode
from polysecret.interpolation import DivisionMode
from polysecret.models import Share, ShareSet
from polysecret.reconstruction import find_secret

from conftest import polynomial_at

coefficients = st.lists(st.integers(min_value=-(10**30), max_value=10**30), min_size=1, max_size=6)
bases = st.integers(min_value=2, max_value=36)


@st.composite
def share_sets(draw, consecutive: bool = False):
    coeffs = draw(coefficients)
    k = len(coeffs)
    extra = draw(st.integers(min_value=0, max_value=3))
    if consecutive:
        indices = list(range(1, k + extra + 1))
    else:
        indices = draw(st.lists(st.integers(min_value=1, max_value=40), min_size=k + extra, max_size=k + extra, unique=True))
    n = max(indices)
    shares = {}
    for i in indices:
        base = draw(bases)
        shares[i] = Share(i, base, encode(polynomial_at(coeffs, i), base))
    return coeffs[0], ShareSet(n=n, k=k, shares=shares)


@given(share_sets())
def test_exact_mode_recovers_constant_term(case):
    secret, share_set = case
    assert find_secret(share_set, mode=DivisionMode.EXACT) == secret


@given(share_sets(consecutive=True))
def test_truncating_mode_matches_on_consecutive_indices(case):
    secret, share_set = case
    assert find_secret(share_set, mode=DivisionMode.TRUNCATE) == secret

from dsakit.polynomial import Polynomial, Term


def _p():
    return Polynomial([(5, 4), (-2, 3), (-2, 1), (4, 0)])


def _q():
    return Polynomial([(7, 2), (-4, 0)])


def test_terms_kept_in_order():
    p = _p()
    assert list(p) == [Term(5, 4), Term(-2, 3), Term(-2, 1), Term(4, 0)]
    assert len(p) == 4


def test_append_adds_at_end():
    p = Polynomial()
    p.append(3, 2)
    p.append(1, 0)
    assert list(p) == [Term(3, 2), Term(1, 0)]


def test_display_format():
    assert str(_q()) == "+7X2 -4"


def test_null_polynomial_display():
    assert str(Polynomial()) == "Null Polynomial"


def test_sum_of_driver_polynomials():
    assert str(_p() + _q()) == "+5X4 -2X3 +7X2 -2X1"


def test_cancelling_terms_are_dropped():
    total = _p() + _q()
    assert [term.exponent for term in total] == [4, 3, 2, 1]
    assert len(total) == 4


def test_adding_empty_is_identity():
    assert _p() + Polynomial() == _p()
    assert Polynomial() + _p() == _p()


def test_adding_negation_gives_null():
    p = _p()
    negated = Polynomial((-c, e) for c, e in p)
    total = p + negated
    assert len(total) == 0
    assert str(total) == "Null Polynomial"


def test_addition_is_commutative_on_distinct_exponents():
    a = Polynomial([(1, 5), (2, 3)])
    b = Polynomial([(3, 4), (4, 1)])
    assert a + b == b + a
    exponents = [t.exponent for t in a + b]
    assert exponents == sorted(exponents, reverse=True)


def test_sum_matches_coefficients_per_exponent():
    a, b = _p(), _q()
    expected = {}
    for c, e in list(a) + list(b):
        expected[e] = expected.get(e, 0) + c
    expected = {e: c for e, c in expected.items() if c != 0}
    assert {t.exponent: t.coefficient for t in a + b} == expected
import math

import pytest

from chipsum.vector import Vector


def test_size_constructor_gives_zeros():
    v = Vector(4)
    assert len(v) == 4
    assert v.tolist() == [0.0, 0.0, 0.0, 0.0]


def test_values_constructor_round_trip():
    values = [1.0, 2.0, -6.0, 6.0, 4.0]
    assert Vector(values).tolist() == values


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        Vector(-1)


def test_indexing_and_assignment():
    v = Vector([1.0, 2.0, 3.0])
    v[1] = 7.5
    assert v[1] == 7.5
    assert v[-1] == 3.0
    with pytest.raises(IndexError):
        v[3]


def test_iteration_matches_tolist():
    v = Vector([1.0, 2.0, 3.0])
    assert list(v) == v.tolist()


def test_equality():
    assert Vector([1.0, 2.0]) == Vector([1.0, 2.0])
    assert not (Vector([1.0, 2.0]) == Vector([1.0, 2.0, 0.0]))
    assert Vector([1.0, 2.0]) == [1.0, 2.0]


def test_copy_is_independent():
    a = Vector([1.0, 2.0, 3.0])
    b = a.copy()
    b[0] = 100.0
    assert a[0] == 1.0
    assert b[0] == 100.0


def test_deep_copy_overwrites():
    a = Vector([1.0, 2.0, 3.0])
    b = Vector(3)
    b.deep_copy(a)
    assert b == a
    a[0] = 9.0
    assert b[0] == 1.0


def test_deep_copy_size_mismatch():
    with pytest.raises(ValueError):
        Vector(2).deep_copy(Vector(3))


def test_slice_returns_subrange():
    v = Vector([1.0, 2.0, 3.0, 4.0, 5.0])
    assert v.slice(1, 4).tolist() == [2.0, 3.0, 4.0]
    assert len(v.slice(2, 2)) == 0


def test_slice_out_of_range():
    with pytest.raises(IndexError):
        Vector(3).slice(1, 5)


def test_dot_value():
    assert Vector([1.0, 2.0, 3.0]).dot(Vector([4.0, 5.0, 6.0])) == 32.0


def test_dot_self_equals_norm2_squared():
    v = Vector([1.0, -2.0, 3.5, 0.25])
    assert v.dot(v) == pytest.approx(v.norm2() ** 2)


def test_dot_size_mismatch():
    with pytest.raises(ValueError):
        Vector(2).dot(Vector(3))


def test_norm2_value():
    assert Vector([3.0, 4.0]).norm2() == 5.0


def test_norminf_uses_absolute_value():
    assert Vector([1.0, 2.0, -6.1, 4.0, 5.0]).norminf() == 6.1


def test_norm_ordering_invariant():
    v = Vector([1.0, -2.0, 3.0, -4.5])
    assert v.norm1() >= v.norm2() >= v.norminf()


def test_norms_sign_invariant():
    v = Vector([1.0, -2.0, 3.0])
    neg = v * -1.0
    assert neg.norm1() == v.norm1()
    assert neg.norm2() == v.norm2()
    assert neg.norminf() == v.norminf()


def test_norminf_of_empty_is_zero():
    assert Vector(0).norminf() == 0.0


def test_scal_returns_new_vector():
    v = Vector([1.0, 2.0, 3.0])
    s = v.scal(2.0)
    assert s.tolist() == [2.0, 4.0, 6.0]
    assert v.tolist() == [1.0, 2.0, 3.0]


def test_mul_and_rmul_agree():
    v = Vector([1.0, -2.0, 0.5])
    assert v * 3.0 == 3.0 * v


def test_imul_in_place():
    v = Vector([1.0, 2.0])
    original = v
    v *= 0.5
    assert v is original
    assert v.tolist() == [0.5, 1.0]


def test_add_and_iadd():
    a = Vector([1.0, 2.0])
    b = Vector([3.0, 4.0])
    c = a + b
    assert c.tolist() == [4.0, 6.0]
    a += b
    assert a == c


def test_add_size_mismatch():
    with pytest.raises(ValueError):
        Vector(2) + Vector(3)


def test_axpby_alpha_one_beta_zero_copies():
    x = Vector([1.0, 2.0, 3.0])
    y = Vector([9.0, 9.0, 9.0])
    result = x.axpby(y, 1.0, 0.0)
    assert result is y
    assert y == x


def test_axpby_alpha_zero_beta_one_keeps_y():
    x = Vector([1.0, 2.0, 3.0])
    y = Vector([4.0, 5.0, 6.0])
    x.axpby(y, 0.0, 1.0)
    assert y.tolist() == [4.0, 5.0, 6.0]


def test_axpby_residual_is_zero_for_equal_vectors():
    b = Vector([1.0, 2.0, 3.0])
    r = b.copy()
    b.axpby(r, 1.0, -1.0)
    assert r.norm2() == 0.0


def test_axpby_defaults_add():
    x = Vector([1.0, 2.0])
    y = Vector([3.0, 4.0])
    expected = x + y
    x.axpby(y)
    assert y == expected


def test_axpby_size_mismatch():
    with pytest.raises(ValueError):
        Vector(2).axpby(Vector(3), 1.0, 1.0)


def test_str_and_repr():
    v = Vector([1.0, 2.5])
    assert str(v) == "[1, 2.5]"
    assert repr(v) == "Vector([1.0, 2.5])"


def test_norm2_matches_math_hypot():
    v = Vector([1.5, -2.0, 0.5])
    assert v.norm2() == pytest.approx(math.hypot(1.5, -2.0, 0.5))
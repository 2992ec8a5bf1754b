from cmpqueue import default_comparator, natural_order, reverse_order

from hypothesis import given, strategies as st

import decimal
import fractions
import functools
import pickle
import pytest

def sign(n):
	return (n > 0) - (n < 0)

values = st.one_of(
	st.integers(),
	st.floats(),
	st.decimals(),
	st.text(),
	st.fractions(),
	st.none(),
	st.tuples(st.integers()),
)

@pytest.mark.parametrize('x,y,expected', [
	('jano', 'valentina', -1),
	('jano', 'jano', 0),
	('jano', 'fran', 1),
	(10, 1000, -1),
	(10, 10, 0),
	(10, 1, 1),
	(2.5, 2, 1),
	(fractions.Fraction(1, 2), 0.5, 0),
	(1000, 'a', -1),
	('1', 1, 1),
	(None, 'None', 0),
	((1, 2), '(1, 2)', 0),
	(decimal.Decimal('2'), 10, -1),
	(decimal.Decimal('10'), decimal.Decimal('9'), 1),
	(decimal.Decimal('2.5'), 2.5, 0),
	(decimal.Decimal('1'), fractions.Fraction(1, 2), 1),
	(decimal.Decimal('99'), 'a', -1),
	(float('nan'), 1.0, 1),
	(1.0, float('nan'), -1),
	(float('nan'), float('nan'), 0),
	(float('nan'), decimal.Decimal('NaN'), 0),
	(decimal.Decimal('sNaN'), float('inf'), 1),
	(float('nan'), 'nan', -1),
])
def test_default_comparator(x, y, expected):
	assert sign(default_comparator(x, y)) == expected

@given(values, values)
def test_default_antisymmetric(x, y):
	assert sign(default_comparator(x, y)) == -sign(default_comparator(y, x))

@given(values)
def test_default_reflexive(x):
	assert default_comparator(x, x) == 0

@given(st.lists(values, max_size=8))
def test_default_total(items):
	ordered = sorted(items, key=functools.cmp_to_key(default_comparator))
	for x, y in zip(ordered, ordered[1:]):
		assert default_comparator(x, y) <= 0
	for i, x in enumerate(ordered):
		for y in ordered[i:]:
			assert default_comparator(x, y) <= 0

@given(st.integers(), st.integers())
def test_natural_order(x, y):
	assert natural_order(x, y) == sign(x - y)

def test_natural_order_mixed():
	with pytest.raises(TypeError):
		natural_order(1, 'a')

@given(values, values)
def test_reverse_order(x, y):
	assert reverse_order()(x, y) == default_comparator(y, x)
	assert reverse_order(reverse_order())(x, y) == default_comparator(x, y)

def test_reverse_order_pickle():
	lowest = pickle.loads(pickle.dumps(reverse_order(natural_order)))
	assert lowest(1, 2) == 1

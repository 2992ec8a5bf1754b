from abc import abstractmethod
from typing import Any, Callable, TypeVar, Tuple
from typing_extensions import Protocol

import builtins
import decimal
import functools
import numbers

class Comparable(Protocol):
	@abstractmethod
	def __lt__(self, other: Any) -> bool: ...
	@abstractmethod
	def __eq__(self, other: Any) -> bool: ...

T = TypeVar('T')
K = TypeVar('K', bound=Comparable)

Comparator = Callable[[T, T], int]

class EmptyQueueError(IndexError):
	'''
	Raised when peeking at or removing from an empty container
	'''

def natural_order(x:K, y:K) -> int:
	r'''
	Compare two values using their own ``<`` and ``==``

	Positive when ``x`` outranks ``y``, zero on a tie, negative otherwise.

	>>> natural_order(3, 1)
	1
	>>> natural_order('a', 'a')
	0
	>>> natural_order((1, 'b'), (2, 'a'))
	-1
	'''
	if x == y: return 0
	if x < y: return -1
	return 1

def _default_key(value:Any) -> Tuple[int, int, Any]:
	# numbers < nans < everything else; all nans tie
	if isinstance(value, decimal.Decimal):
		if value.is_nan(): return 0, 1, 0
		return 0, 0, value
	if isinstance(value, numbers.Real):
		if value != value: return 0, 1, 0
		return 0, 0, value
	return 1, 0, str(value)

def default_comparator(x:Any, y:Any) -> int:
	r'''
	Total order over built-in values

	Real numbers and decimals compare arithmetically,
	everything else compares by its string representation.
	Any number ranks below any non-number.
	NaNs tie with each other and rank above every other number.

	>>> default_comparator(10, 1000)
	-1
	>>> default_comparator(decimal.Decimal('2'), 10)
	-1
	>>> default_comparator('jano', 'fran')
	1
	>>> default_comparator(None, 'None')
	0
	>>> default_comparator(99, 'a')
	-1
	>>> default_comparator(float('nan'), 1e300)
	1
	'''
	return natural_order(_default_key(x), _default_key(y))

def _reversed(comparator:Comparator[T], x:T, y:T) -> int:
	return comparator(y, x)

def reverse_order(comparator:Comparator[T]=default_comparator) -> Comparator[T]:
	r'''
	Flip a comparator so the lowest ranked value comes first

	>>> lowest = reverse_order()
	>>> lowest(1, 2)
	1
	'''
	return functools.partial(_reversed, comparator)

sphinx_build: bool = getattr(builtins, '__sphinx_build__', False)

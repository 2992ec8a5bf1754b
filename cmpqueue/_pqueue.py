from __future__ import annotations
from typing import Collection, Generic, Iterable, Iterator, Optional, \
	Callable, TypeVar, Tuple, Any

import itertools

from ._heapstore import HeapStore
from ._utility import Comparator, EmptyQueueError, default_comparator, sphinx_build

T = TypeVar('T')

class PriorityQueueView(Generic[T], Collection[T]):
	__slots__ = ('_queue', '_ordered')

	if not sphinx_build:
		_queue: PriorityQueue[T]
		_ordered: bool

	def __init__(self, _queue, _ordered):
		self._queue = _queue
		self._ordered = _ordered

	def __contains__(self, item) -> bool:
		r'''
		Check if the item is in the queue

		:math:`O(n)` or :math:`O(n\log{n})`

		>>> 4 in pqueue([3, 4, 1]).elements()
		True
		>>> 5 in pqueue([3, 4, 1]).elements(ordered=False)
		False
		'''
		return any(item == i for i in self)

	def __len__(self) -> int:
		r'''
		Get the size of the queue

		:math:`O(1)`

		>>> len(pqueue([3, 4, 1]).elements())
		3
		'''
		return self._queue._size

	def _iter_unordered(self) -> Iterator[T]:
		return itertools.chain(self._queue._heap, self._queue._overflow)

	def _iter_ordered(self, queue:PriorityQueue[T]) -> Iterator[T]:
		# drains a snapshot taken when iteration starts
		while queue._size > 0:
			yield queue.dequeue()

	def __iter__(self) -> Iterator[T]:
		r'''
		Iterate through the queue

		:math:`O(n)` for ``ordered=False``,
		:math:`O(n\log{n})` for ``ordered=True``

		>>> list(pqueue([3, 4, 1, 7]).elements())
		[7, 4, 3, 1]
		>>> list(pqueue([1, 2, 3]).elements(ordered=False))
		[3, 2, 1]
		'''
		if self._ordered:
			return self._iter_ordered(self._queue.copy())
		return self._iter_unordered()

	def __repr__(self) -> str:
		return '{}({!r}, ordered={})'.format(
			type(self).__name__, self._queue, self._ordered)

class PriorityQueue(Generic[T], Collection[T]):
	r'''
	Mutable priority queue

	Elements come out highest priority first,
	as ranked by a comparator ``(a, b) -> int`` that is positive
	when ``a`` outranks ``b``, zero on a tie and negative otherwise.
	The comparator must be a total order,
	and defaults to :func:`default_comparator`.

	Use :func:`pqueue` or :func:`pq` for a shorter way to build one.

	The queue keeps two binary heaps sharing the same comparator:
	the main :class:`HeapStore`, and an overflow store that takes
	items tying the main maximum at the time they are enqueued.
	Peek and dequeue always compare the tops of both,
	preferring the overflow top on a tie.

	Enqueue/dequeue are :math:`O(\log{n})`,
	peek/len are :math:`O(1)`,
	and building from an iterable is :math:`O(n)`.
	Operations are not stable:
	tied items may come out in any order relative to each other.

	The queue is not thread-safe.

	>>> queue = PriorityQueue([3, 4, 1, 7, 6, 4])
	>>> queue.enqueue(5)
	7
	>>> queue.peek()
	7
	>>> [queue.dequeue() for _ in range(len(queue))]
	[7, 6, 5, 4, 4, 3, 1]
	>>> lowest = PriorityQueue([3, 4, 1, 7, 6, 4], lambda a, b: b - a)
	>>> [lowest.dequeue() for _ in range(len(lowest))]
	[1, 3, 4, 4, 6, 7]
	'''

	__slots__ = ('_heap', '_overflow', '_size', '_comparator')

	if not sphinx_build:
		_heap: HeapStore[T]
		_overflow: HeapStore[T]
		_size: int
		_comparator: Comparator[T]

	def __init__(self, items:Optional[Iterable[T]]=None,
			comparator:Optional[Comparator[T]]=None):
		if comparator is None:
			comparator = default_comparator
		self._comparator = comparator
		self._heap = HeapStore(comparator, items)
		self._overflow = HeapStore(comparator)
		self._size = len(self._heap)

	@property
	def comparator(self) -> Comparator[T]:
		return self._comparator

	def _top(self) -> HeapStore[T]:
		# the store holding the overall maximum, ties go to the overflow
		if self._size == 0:
			raise EmptyQueueError('PriorityQueue is empty')
		if not self._overflow: return self._heap
		if not self._heap: return self._overflow
		if self._comparator(self._heap.peek(), self._overflow.peek()) > 0:
			return self._heap
		return self._overflow

	def enqueue(self, item:T) -> int:
		r'''
		Insert an item and return the new size

		:math:`O(\log{n})`

		An item tying the current main maximum goes to the overflow store,
		otherwise it is pushed into the main store.

		>>> queue = pqueue(['jano'])
		>>> queue.enqueue('valentina')
		2
		>>> queue.enqueue('fran')
		3
		>>> queue.peek()
		'valentina'
		'''
		if self._heap and self._comparator(item, self._heap.peek()) == 0:
			self._overflow.push(item)
		else:
			self._heap.push(item)
		self._size += 1
		return self._size

	def dequeue(self) -> T:
		r'''
		Remove and return the highest priority item

		:math:`O(\log{n})`

		:raises EmptyQueueError: if the queue is empty

		>>> queue = pqueue([3, 1, 2])
		>>> queue.dequeue(), queue.dequeue(), queue.dequeue()
		(3, 2, 1)
		>>> queue.dequeue()
		Traceback (most recent call last):
		...
		EmptyQueueError: ...
		'''
		item = self._top().pop()
		self._size -= 1
		return item

	def peek(self) -> T:
		r'''
		Find the highest priority item without removing it

		:math:`O(1)`

		:raises EmptyQueueError: if the queue is empty

		>>> pqueue([3, 1, 2]).peek()
		3
		>>> pqueue().peek()
		Traceback (most recent call last):
		...
		EmptyQueueError: ...
		'''
		return self._top().peek()

	def is_empty(self) -> bool:
		return self._size == 0

	def size(self) -> int:
		return self._size

	def __len__(self) -> int:
		r'''
		Get the size of the queue

		:math:`O(1)`

		>>> len(pqueue([3, 1, 2]))
		3
		'''
		return self._size

	def __bool__(self) -> bool:
		return self._size != 0

	def __contains__(self, item) -> bool:
		return item in PriorityQueueView(self, False)

	def elements(self, ordered:bool=True) -> PriorityQueueView[T]:
		r'''
		Create a read-only view of the queue's items

		:math:`O(1)`

		Iterating over the entire queue is :math:`O(n\log{n})` for
		``ordered=True`` and :math:`O(n)` for ``ordered=False``.
		The unordered view lists the main store first,
		then the overflow store, in storage order.

		>>> queue = pqueue([1, 2, 3])
		>>> queue.enqueue(3)
		4
		>>> list(queue.elements())
		[3, 3, 2, 1]
		>>> list(queue.elements(ordered=False))
		[3, 2, 1, 3]
		'''
		return PriorityQueueView(self, ordered)

	def for_each(self, visitor:Callable[[T, int], Any], ordered:bool=True) -> None:
		r'''
		Call ``visitor(item, index)`` for every item

		The queue is not modified, see :meth:`elements`.

		>>> seen = []
		>>> pqueue(['a', 'b', 'd']).for_each(lambda item, index: seen.append((index, item)))
		>>> seen
		[(0, 'd'), (1, 'b'), (2, 'a')]
		'''
		for index, item in enumerate(PriorityQueueView(self, ordered)):
			visitor(item, index)

	def __iter__(self) -> Iterator[T]:
		r'''
		Iterate through the queue in priority order without consuming it

		:math:`O(n\log{n})`

		>>> list(pqueue([3, 4, 1, 7, 6, 4]))
		[7, 6, 4, 4, 3, 1]
		'''
		return iter(PriorityQueueView(self, True))

	def extend(self, items:Iterable[T]) -> int:
		r'''
		Enqueue every item in turn and return the new size

		>>> queue = pqueue([1])
		>>> queue.extend([5, 3])
		3
		>>> list(queue)
		[5, 3, 1]
		'''
		for item in items:
			self.enqueue(item)
		return self._size

	def copy(self) -> PriorityQueue[T]:
		clone: PriorityQueue[T] = type(self)(comparator=self._comparator)
		clone._heap = self._heap.copy()
		clone._overflow = self._overflow.copy()
		clone._size = self._size
		return clone

	def clear(self) -> None:
		self._heap.clear()
		self._overflow.clear()
		self._size = 0

	def __repr__(self) -> str:
		if self._comparator is default_comparator:
			return 'pqueue({})'.format(list(self))
		return 'pqueue({}, comparator={!r})'.format(list(self), self._comparator)

	def __reduce__(self):
		r'''
		Support method for :mod:`python:pickle`

		:math:`O(n)`

		>>> import pickle
		>>> pickle.loads(pickle.dumps(pqueue([3, 1, 2])))
		pqueue([3, 2, 1])
		'''
		return pqueue, (tuple(PriorityQueueView(self, False)), self._comparator)

def pqueue(items:Iterable[T]=(), comparator:Optional[Comparator[T]]=None) -> PriorityQueue[T]:
	r'''
	Create a :class:`PriorityQueue` from the given items

	:math:`O(n)`

	>>> pqueue()
	pqueue([])
	>>> pqueue([3, 4, 1])
	pqueue([4, 3, 1])
	'''
	return PriorityQueue(items, comparator)

def pq(*items:T) -> PriorityQueue[T]:
	'''
	Shorthand for :func:`pqueue` with the default comparator

	>>> pq('b', 'c', 'a')
	pqueue(['c', 'b', 'a'])
	'''
	return pqueue(items)

__all__: Tuple[str, ...] = ('pq', 'pqueue', 'PriorityQueue')
if sphinx_build: __all__ += ('PriorityQueueView',)

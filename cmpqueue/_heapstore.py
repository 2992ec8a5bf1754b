from __future__ import annotations
from typing import Generic, Iterable, Iterator, List, Optional, TypeVar

from ._utility import Comparator, EmptyQueueError, default_comparator, sphinx_build

T = TypeVar('T')

class HeapStore(Generic[T]):
	r'''
	Array-backed binary max-heap

	Holds the invariant ``comparator(items[i], items[c]) >= 0``
	for every child ``c`` in ``2*i+1`` and ``2*i+2``,
	so the maximum always sits at index 0.

	Push/pop are :math:`O(\log{n})`, peek is :math:`O(1)`,
	and building from a list is :math:`O(n)`.

	>>> store = HeapStore(items=[3, 4, 1, 7, 6, 4])
	>>> store
	HeapStore([7, 6, 4, 4, 3, 1])
	>>> store.push(5)
	>>> store.pop(), store.pop(), store.pop()
	(7, 6, 5)
	'''

	__slots__ = ('_items', '_comparator')

	if not sphinx_build:
		_items: List[T]
		_comparator: Comparator[T]

	def __init__(self, comparator:Comparator[T]=default_comparator,
			items:Optional[Iterable[T]]=None):
		self._comparator = comparator
		self._items = []
		if items is not None:
			self._items.extend(items)
			self.heapify()

	@property
	def comparator(self) -> Comparator[T]:
		return self._comparator

	def _compare(self, i:int, j:int) -> int:
		return self._comparator(self._items[i], self._items[j])

	def _swap(self, i:int, j:int) -> None:
		items = self._items
		items[i], items[j] = items[j], items[i]

	def sift_up(self, index:int) -> None:
		r'''
		Move the item at ``index`` towards the root until its parent outranks it

		:math:`O(\log{n})`
		'''
		while index > 0:
			parent = (index - 1) // 2
			if self._compare(index, parent) < 0: break
			self._swap(index, parent)
			index = parent

	def sift_down(self, index:int, size:Optional[int]=None) -> None:
		r'''
		Move the item at ``index`` towards the leaves
		until it ranks at or above both children

		Only the first ``size`` items take part,
		which defaults to the whole store.

		:math:`O(\log{k})` where `k` is the size of the subtree
		'''
		if size is None:
			size = len(self._items)
		while True:
			largest = index
			left, right = 2 * index + 1, 2 * index + 2
			if left < size and self._compare(left, largest) > 0:
				largest = left
			if right < size and self._compare(right, largest) > 0:
				largest = right
			if largest == index: return
			self._swap(index, largest)
			index = largest

	def heapify(self) -> None:
		r'''
		Restore the invariant over the whole store, bottom-up

		:math:`O(n)`
		'''
		size = len(self._items)
		for index in range(size // 2 - 1, -1, -1):
			self.sift_down(index, size)

	def push(self, item:T) -> None:
		r'''
		Insert an item

		:math:`O(\log{n})`
		'''
		self._items.append(item)
		self.sift_up(len(self._items) - 1)

	def pop(self) -> T:
		r'''
		Remove and return the maximum

		:math:`O(\log{n})`

		:raises EmptyQueueError: if the store is empty
		'''
		items = self._items
		if not items:
			raise EmptyQueueError('pop from empty heap')
		top = items[0]
		last = items.pop()
		if items:
			items[0] = last
			self.sift_down(0, len(items))
		return top

	def peek(self) -> T:
		r'''
		Return the maximum without removing it

		:math:`O(1)`

		:raises EmptyQueueError: if the store is empty

		>>> HeapStore().peek()
		Traceback (most recent call last):
		...
		EmptyQueueError: ...
		'''
		if not self._items:
			raise EmptyQueueError('peek from empty heap')
		return self._items[0]

	def copy(self) -> HeapStore[T]:
		clone: HeapStore[T] = HeapStore(self._comparator)
		clone._items = self._items.copy()
		return clone

	def clear(self) -> None:
		self._items.clear()

	def __len__(self) -> int:
		return len(self._items)

	def __bool__(self) -> bool:
		return bool(self._items)

	def __iter__(self) -> Iterator[T]:
		# storage order, not priority order
		return iter(self._items)

	def __repr__(self) -> str:
		return '{}({})'.format(type(self).__name__, self._items)

from __future__ import annotations

from typing import *

from ._pqueue import PriorityQueue

from lenses import hooks

T = TypeVar('T')

# hooks never mutate the queue they are given

@hooks.contains_add.register(PriorityQueue)
def _pqueue_contains_add(self:PriorityQueue[T], item:T) -> PriorityQueue[T]:
	queue = self.copy()
	queue.enqueue(item)
	return queue
@hooks.contains_remove.register(PriorityQueue)
def _pqueue_contains_remove(self:PriorityQueue[T], item:T) -> PriorityQueue[T]:
	return PriorityQueue((i for i in self.elements(False) if item != i), self.comparator)
@hooks.to_iter.register(PriorityQueue)
def _pqueue_to_iter(self:PriorityQueue[T]) -> Iterator[T]:
	return iter(self.elements())
@hooks.from_iter.register(PriorityQueue)
def _pqueue_from_iter(self:PriorityQueue[T], items:Iterator[T]) -> PriorityQueue[T]:
	return PriorityQueue(items, self.comparator)

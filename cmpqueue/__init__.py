from ._version import __version__
from ._utility import Comparable, Comparator, EmptyQueueError, \
	natural_order, default_comparator, reverse_order
from ._heapstore import HeapStore
from ._pqueue import PriorityQueue, PriorityQueueView, pqueue, pq

__all__ = (
	'pq', 'pqueue', 'PriorityQueue', 'PriorityQueueView', 'HeapStore',
	'Comparable', 'Comparator', 'EmptyQueueError',
	'natural_order', 'default_comparator', 'reverse_order',
)

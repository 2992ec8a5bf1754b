from cmpqueue import HeapStore, EmptyQueueError, default_comparator, reverse_order

from hypothesis import given, strategies as st

import pytest

def check_order(store):
	'''
	check the heap order of HeapStore
	'''
	assert isinstance(store, HeapStore)
	items, compare = store._items, store._comparator
	for index in range(len(items)):
		for child in (2 * index + 1, 2 * index + 2):
			if child < len(items):
				assert compare(items[index], items[child]) >= 0

def check_store(store):
	'''
	check invariants of HeapStore
	'''
	check_order(store)
	return list(sorted(store._items))

def drain(store):
	acc = []
	while store:
		acc.append(store.pop())
	return acc

comparators = st.sampled_from([default_comparator, reverse_order()])

@given(st.lists(st.integers()))
def test_heapify(items):
	store = HeapStore(items=items)
	assert len(store) == len(items)
	assert check_store(store) == sorted(items)

@given(st.lists(st.integers()), comparators)
def test_push(items, comparator):
	store = HeapStore(comparator)
	for n, item in enumerate(items):
		store.push(item)
		assert len(store) == n + 1
		check_store(store)
	assert check_store(store) == sorted(items)

@given(st.lists(st.integers()), comparators)
def test_pop(items, comparator):
	store = HeapStore(comparator, items)
	popped = []
	while store:
		popped.append(store.pop())
		check_store(store)
	expected = sorted(items, reverse=comparator is default_comparator)
	assert popped == expected

@given(st.lists(st.integers(), min_size=1))
def test_peek(items):
	store = HeapStore(items=items)
	assert store.peek() == max(items)
	assert len(store) == len(items)

def test_empty():
	store = HeapStore()
	assert not store
	assert len(store) == 0
	with pytest.raises(EmptyQueueError): store.peek()
	with pytest.raises(EmptyQueueError): store.pop()
	with pytest.raises(IndexError): store.pop()

def test_pop_last():
	store = HeapStore(items=['only'])
	assert store.pop() == 'only'
	assert not store
	assert list(store) == []

def test_heapify_layout():
	assert list(HeapStore(items=[3, 4, 1, 7, 6, 4])) == [7, 6, 4, 4, 3, 1]
	assert list(HeapStore(items=[1, 2, 3])) == [3, 2, 1]

def test_heapify_copies_input():
	items = [1, 2, 3]
	store = HeapStore(items=items)
	store.push(4)
	assert items == [1, 2, 3]

@given(st.lists(st.integers()), st.integers(0, 20))
def test_sift_down_bounded(items, size):
	store = HeapStore(items=items)
	size = min(size, len(store))
	if size == 0: return
	store._items[0] = min(items) - 1
	store.sift_down(0, size)
	assert store._items[size:] == HeapStore(items=items)._items[size:]
	prefix = HeapStore()
	prefix._items = store._items[:size]
	check_store(prefix)

@given(st.lists(st.integers()), st.integers())
def test_sift_up(items, item):
	store = HeapStore(items=items)
	store._items.append(item)
	store.sift_up(len(store) - 1)
	assert check_store(store) == sorted(items + [item])

@given(st.lists(st.integers()))
def test_copy(items):
	store = HeapStore(items=items)
	clone = store.copy()
	assert clone.comparator is store.comparator
	clone.push(0)
	assert len(clone) == len(store) + 1
	assert drain(store) == sorted(items, reverse=True)

@given(st.lists(st.integers()))
def test_clear(items):
	store = HeapStore(items=items)
	store.clear()
	assert len(store) == 0
	store.push(1)
	assert store.peek() == 1

def test_repr():
	assert repr(HeapStore(items=[1, 2, 3])) == 'HeapStore([3, 2, 1])'
	assert repr(HeapStore()) == 'HeapStore([])'

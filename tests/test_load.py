import threading
from concurrent.futures import ThreadPoolExecutor

import pytest

from id_allocator import (
	BoundedUniqueIdAllocator,
	CapacityExhaustedError,
	SynchronizedIdAllocator,
	UniqueIdAllocator,
)


def test_concurrent_allocate_no_duplicates_and_contiguous():
	gen = SynchronizedIdAllocator(UniqueIdAllocator())

	n = 1000
	results = []
	lock = threading.Lock()

	def work():
		val = gen.allocate()
		with lock:
			results.append(val)

	with ThreadPoolExecutor(max_workers=64) as ex:
		for _ in range(n):
			ex.submit(work)

	assert len(results) == n
	assert len(set(results)) == n  # uniqueness
	assert set(results) == set(range(n))
	assert len(gen) == n


def test_heavy_concurrent_mixed_workload():
	"""
	Simulate heavy concurrent access with a mix of allocations, ranged allocations
	and reclaims against a bounded allocator. Ids held at any moment stay unique
	and the pool is conserved once every worker is done.
	"""
	capacity = 256
	inner = BoundedUniqueIdAllocator(capacity)
	gen = SynchronizedIdAllocator(inner)

	held = set()
	lock = threading.Lock()
	errors = []

	def do_cycle(k: int):
		try:
			vals = gen.get_id_range(k)
		except CapacityExhaustedError:
			return
		with lock:
			if held & set(vals):
				errors.append(vals)
			held.update(vals)
		with lock:
			held.difference_update(vals)
		for val in vals:
			gen.reclaim(val)

	ranges = [1, 2, 3, 5, 7, 10, 20]
	with ThreadPoolExecutor(max_workers=32) as ex:
		for _ in range(200):
			for k in ranges:
				ex.submit(do_cycle, k)

	assert errors == []
	assert len(gen) == 0
	assert sorted(inner.get_free_ids()) == list(range(capacity))


def test_wrapped_errors_propagate_unchanged():
	gen = SynchronizedIdAllocator(BoundedUniqueIdAllocator(1))
	gen.allocate()

	with pytest.raises(CapacityExhaustedError):
		gen.allocate()
	with gen.locked() as inner:
		assert inner.get_used_ids() == [0]


def test_variant_calls_run_under_the_wrapper_lock():
	gen = SynchronizedIdAllocator(BoundedUniqueIdAllocator(4))
	gen.get_id_range(2)
	gen.reclaim(0)

	with gen.locked() as inner:
		assert inner.get_free_ids() == [2, 3, 0]
		assert inner.get_used_percentage() == 25.0
		# the lock is held for the whole block
		assert not gen._lock.acquire(blocking=False)
	assert gen._lock.acquire(blocking=False)
	gen._lock.release()

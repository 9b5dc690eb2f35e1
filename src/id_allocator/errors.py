from typing import Optional


class IdAllocatorError(Exception):
	"""Base class for every error raised by an allocator."""


class InvalidCapacityError(IdAllocatorError, ValueError):
	def __init__(self, capacity: object, message: Optional[str] = None):
		self.capacity = capacity
		super().__init__(message or f"capacity must be a positive integer, got {capacity!r}")


class CapacityExhaustedError(IdAllocatorError, RuntimeError):
	def __init__(self, capacity: int):
		self.capacity = capacity
		super().__init__(f"Maximum ID limit reached: all {capacity} ids are in use")


class InvalidReclaimError(IdAllocatorError, ValueError):
	def __init__(self, id_value: object, reason: str = "ID not currently allocated"):
		self.id_value = id_value
		self.reason = reason
		super().__init__(f"{reason}: {id_value!r}")

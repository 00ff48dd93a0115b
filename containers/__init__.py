"""
BudgetKit Linear Containers
===========================
Array-backed stack and circular-buffer queue with capacity doubling.

Components:
  - stack: ArrayStack (pop/peek on empty raise EmptyStackError)
  - queue: ArrayQueue (dequeue/peek on empty return None)

The two empty conventions are deliberate and callers rely on both.
"""

from containers.stack import ArrayStack, EmptyStackError, DEFAULT_CAPACITY
from containers.queue import ArrayQueue

__all__ = ["ArrayStack", "ArrayQueue", "EmptyStackError", "DEFAULT_CAPACITY"]

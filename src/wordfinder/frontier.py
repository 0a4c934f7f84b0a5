"""In-memory URL frontier with bounded admission."""

from collections import deque


class Frontier:
    """
    FIFO queue of pending URLs plus the set of every URL ever admitted.

    The bound caps admissions, not completed fetches: once page_bound URLs
    have been admitted no further URL is accepted, and a URL stays in the
    visited set after it is dequeued.
    """

    def __init__(self, page_bound: int):
        if page_bound < 1:
            raise ValueError(f"page_bound must be positive, got {page_bound}")
        self.page_bound = page_bound
        self._queue: deque[str] = deque()
        self._visited: set[str] = set()
        self.dequeued = 0

    def admit(self, url: str) -> bool:
        """Add a URL to the frontier. Returns False if seen or full."""
        if url in self._visited or self.is_full():
            return False
        self._visited.add(url)
        self._queue.append(url)
        return True

    def next(self) -> str | None:
        """Pop the oldest pending URL."""
        if not self._queue:
            return None
        self.dequeued += 1
        return self._queue.popleft()

    def is_full(self) -> bool:
        return len(self._visited) >= self.page_bound

    def visited_count(self) -> int:
        return len(self._visited)

    def stats(self) -> dict:
        """Get frontier statistics."""
        return {
            "admitted": len(self._visited),
            "dequeued": self.dequeued,
            "pending": len(self._queue),
        }

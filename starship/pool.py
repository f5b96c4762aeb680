"""
Growable pool of reusable entities

Slots are recycled instead of allocated per frame. A pool only ever grows:
``acquire`` hands out the first inactive slot and appends a fresh one when
every slot is in use. There is no release call; an entity returns to the
pool by clearing its own ``active`` flag.
"""

from typing import Callable, Generic, Iterator, List, TypeVar

T = TypeVar("T")


class Pool(Generic[T]):
    """Pool of entities built by ``factory``"""

    def __init__(self, factory: Callable[[], T], size: int = 0):
        if size < 0:
            raise ValueError(f"Pool size must be non-negative, got {size}")
        self.factory = factory
        self.items: List[T] = [factory() for _ in range(size)]

    def acquire(self) -> T:
        """Return an inactive entity; the caller activates and initializes it"""
        for item in self.items:
            if not item.active:
                return item
        item = self.factory()
        self.items.append(item)
        return item

    def active(self) -> Iterator[T]:
        """Active entities in insertion order"""
        return (item for item in self.items if item.active)

    def count_active(self) -> int:
        return sum(1 for item in self.items if item.active)

    def deactivate_all(self):
        for item in self.items:
            item.active = False

    def __iter__(self) -> Iterator[T]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

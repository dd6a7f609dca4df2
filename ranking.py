from typing import Callable, List, Optional, Sequence, Set

from ordered_counter import Entry, OrderedCounter
from utils import normalize


class FrequencyRanker:
    """
    Answers frequency questions over an alphabetically sorted list of entries.

    Picks for the most and least frequent words come from repeated scans of
    the sorted list, so among equal counts the alphabetically earlier word
    is always chosen first.
    """

    DEFAULT_K: int = 5

    def __init__(self, entries: Sequence[Entry], counter: Optional[OrderedCounter] = None):
        """
        Initializes the ranker.

        Args:
            entries (Sequence[Entry]): Entries in ascending key order, as
                produced by `OrderedCounter.to_sorted_sequence()`.
            counter (Optional[OrderedCounter]): When given, `frequency()`
                uses a tree lookup instead of scanning `entries`.
        """
        self.entries: Sequence[Entry] = entries
        self.counter: Optional[OrderedCounter] = counter

    def frequency(self, word: str) -> int:
        """
        Returns how many times `word` occurred, or 0 if it never did.
        The lookup is case-insensitive, matching how words were counted.
        """
        word = normalize(word)
        if self.counter is not None:
            entry = self.counter.find(word)
            return entry.count if entry is not None else 0

        for entry in self.entries:
            if entry.key == word:
                return entry.count
        return 0

    def most_frequent(self, k: int = DEFAULT_K) -> List[Entry]:
        """
        Returns up to `k` entries with the highest counts, highest first.

        Args:
            k (int): How many entries to return. Fewer are returned if the
                list holds fewer than `k` entries.

        Returns:
            List[Entry]: Entries in non-increasing count order; ties keep
                         alphabetical order.
        """
        return self._select(k, lambda count, best: count > best, lambda count, limit: count <= limit)

    def least_frequent(self, k: int = DEFAULT_K) -> List[Entry]:
        """Returns up to `k` entries with the lowest counts, lowest first."""
        return self._select(k, lambda count, best: count < best, lambda count, limit: count >= limit)

    def _select(self, k: int,
                better: Callable[[int, int], bool],
                within: Callable[[int, int], bool]) -> List[Entry]:
        """
        Runs `k` thresholded scans. Each scan takes the first entry, in list
        order, that is not yet picked, lies within the previous pick's count,
        and beats every other candidate.
        """
        if k < 0:
            raise ValueError("k must be a non-negative integer.")

        picked: List[Entry] = []
        picked_keys: Set[str] = set()
        limit: Optional[int] = None

        for _ in range(k):
            best: Optional[Entry] = None
            for entry in self.entries:
                if entry.key in picked_keys:
                    continue
                if limit is not None and not within(entry.count, limit):
                    continue
                if best is None or better(entry.count, best.count):
                    best = entry
            if best is None:
                break
            picked.append(best)
            picked_keys.add(best.key)
            limit = best.count

        return picked

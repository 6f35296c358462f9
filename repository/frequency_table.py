# filename: frequency_table.py

from collections import Counter

from huffman_errors import write_to_sink


class FrequencyTable:
    """Occurrence counts per distinct word."""

    def __init__(self, words=()):
        self.counts = Counter()
        self.update(words)

    def add(self, word):
        self.counts[word] += 1

    def update(self, words):
        self.counts.update(words)

    def contains(self, word):
        return word in self.counts

    def count_of(self, word):
        return self.counts.get(word)

    @property
    def size(self):
        return len(self.counts)

    def __len__(self):
        return len(self.counts)

    def sorted_pairs(self):
        """(word, count) pairs ascending by word; this is the tree builder input."""
        return sorted(self.counts.items())

    def by_frequency(self):
        return sorted(self.counts.items(), key=lambda item: (-item[1], item[0]))

    def min_frequency(self):
        return min(self.counts.values()) if self.counts else None

    def max_frequency(self):
        return max(self.counts.values()) if self.counts else None

    def write_frequencies(self, stream):
        lines = [f"{count:>10} {word}\n" for word, count in self.by_frequency()]
        if lines:
            write_to_sink(stream, "".join(lines))

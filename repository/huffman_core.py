# filename: huffman_core.py

from loguru import logger

from priority_selector import PrioritySelector


class HuffmanNode:
    """
    A leaf carries a word; an internal node carries two children and no word.

    ``key`` breaks ties between equal weights: a leaf's key is its word, an
    internal node's key is the smaller of its children's keys.
    """

    __slots__ = ("word", "weight", "key", "left", "right")

    def __init__(self, word, weight, key=None, left=None, right=None):
        self.word = word
        self.weight = weight
        self.key = word if key is None else key
        self.left = left
        self.right = right

    @classmethod
    def merge(cls, left, right):
        return cls(
            None,
            left.weight + right.weight,
            key=min(left.key, right.key),
            left=left,
            right=right,
        )

    @property
    def is_leaf(self):
        return self.left is None and self.right is None

    def __lt__(self, other):
        # "Less" means extracted sooner: lighter first, then the larger key.
        if self.weight != other.weight:
            return self.weight < other.weight
        return self.key > other.key

    def __repr__(self):
        if self.is_leaf:
            return f"HuffmanNode({self.word!r}, {self.weight})"
        return f"HuffmanNode(<internal {self.key!r}>, {self.weight})"


def walk_leaves(root):
    """Yield (leaf, code) in preorder, left subtree before right."""
    if root is None:
        return
    if root.is_leaf:
        # A lone leaf still needs a one-bit code.
        yield root, "0"
        return
    stack = [(root, "")]
    while stack:
        node, prefix = stack.pop()
        if node.is_leaf:
            yield node, prefix
            continue
        # Right is pushed first so the left subtree is emitted first.
        if node.right is not None:
            stack.append((node.right, prefix + "1"))
        if node.left is not None:
            stack.append((node.left, prefix + "0"))


class CodingTree:
    def __init__(self, root=None, merges=0):
        self.root = root
        self.merges = merges

    def is_empty(self):
        return self.root is None

    def leaves(self):
        return [leaf.word for leaf, _ in walk_leaves(self.root)]

    def leaf_count(self):
        return sum(1 for _ in walk_leaves(self.root))

    def height(self):
        if self.root is None:
            return 0
        best = 0
        stack = [(self.root, 1)]
        while stack:
            node, depth = stack.pop()
            best = max(best, depth)
            for child in (node.left, node.right):
                if child is not None:
                    stack.append((child, depth + 1))
        return best


class HuffmanLogic:
    def build_tree(self, pairs):
        """Build a coding tree from (word, count) pairs sorted by word."""
        leaves = [HuffmanNode(word, count) for word, count in pairs]
        if not leaves:
            return CodingTree()
        if len(leaves) == 1:
            return CodingTree(leaves[0])

        priority_queue = PrioritySelector(leaves)
        merges = 0
        # First extraction becomes the left child ('0'), second the right ('1').
        while priority_queue.size >= 2:
            left = priority_queue.extract_min()
            right = priority_queue.extract_min()
            merged = HuffmanNode.merge(left, right)
            logger.debug(f"merge #{merges + 1}: {left.key!r} + {right.key!r}")
            priority_queue.insert(merged)
            merges += 1

        root = priority_queue.extract_min()
        logger.debug(f"built tree of {len(leaves)} leaves with {merges} merges")
        return CodingTree(root, merges)

    def generate_codes(self, tree):
        return {leaf.word: code for leaf, code in walk_leaves(tree.root)}

from typing import Any, Iterator, List, Tuple


class TrieNode:
    """
    A single node in the trie.

    Attributes:
        children (dict[str, TrieNode]):
            Mapping from a character to the next TrieNode.
        is_end (bool):
            True if this node marks the end of a stored word.
        payload (Any):
            Value associated with the word ending here. Only meaningful
            while is_end is True.
    """
    __slots__ = ("children", "is_end", "payload")

    def __init__(self):
        self.children = {}
        self.is_end = False
        self.payload = None


class Trie:
    """
    A prefix tree mapping string keys to arbitrary payloads.

    Supports insertion, exact lookup, prefix checks and completion,
    deletion with pruning of unused nodes, enumeration, counting and
    reset. Traversals use explicit stacks, so key length is not limited
    by the interpreter's recursion limit.

    Not thread-safe: callers sharing a trie between threads must
    serialize every operation themselves (e.g. with one lock around it).
    """

    def __init__(self):
        """Initialize an empty trie."""
        self.root = TrieNode()

    # -------------------------------------------------------------
    # Core Operations
    # -------------------------------------------------------------

    def insert(self, word: str, payload: Any = None) -> None:
        """
        Insert a word into the trie, replacing its payload if the word
        is already present.

        Args:
            word (str): The word to insert. The empty string marks the root.
            payload (Any): Value to associate with the word.

        Returns:
            None
        """
        node = self.root
        for ch in word:
            if ch not in node.children:
                node.children[ch] = TrieNode()
            node = node.children[ch]
        node.is_end = True
        node.payload = payload

    def search(self, word: str, default: Any = None) -> Tuple[Any, bool]:
        """
        Look up a word.

        Args:
            word (str): The word to search for.
            default (Any): Payload returned when the word is absent.

        Returns:
            tuple[Any, bool]: (payload, True) if the word is stored,
            otherwise (default, False). A word that only exists as a
            prefix of other words is not found.
        """
        node = self._find(word)
        if node is None or not node.is_end:
            return default, False
        return node.payload, True

    def starts_with(self, prefix: str) -> bool:
        """
        Check if the path for the given prefix exists in the trie.

        Args:
            prefix (str): The prefix to test.

        Returns:
            bool: True if at least one word begins with the prefix.
        """
        return self._find(prefix) is not None

    def delete(self, word: str) -> bool:
        """
        Delete a word from the trie and prune the nodes it leaves unused.

        Pruning walks back up the path and stops at the first ancestor
        that is itself a word or still has other children. The root is
        never removed.

        Args:
            word (str): The word to delete.

        Returns:
            bool: True if the word was deleted,
                  False if the word was not present.
        """
        node = self.root
        path = []
        for ch in word:
            child = node.children.get(ch)
            if child is None:
                return False
            path.append((node, ch))
            node = child

        if not node.is_end:
            return False
        node.is_end = False
        node.payload = None

        while path and not node.is_end and not node.children:
            parent, ch = path.pop()
            del parent.children[ch]
            node = parent
        return True

    def clear(self) -> None:
        """Remove every word, leaving a single empty root."""
        self.root = TrieNode()

    # -------------------------------------------------------------
    # Enumeration
    # -------------------------------------------------------------

    def autocomplete(self, prefix: str) -> List[Tuple[str, Any]]:
        """
        Retrieve every (word, payload) pair whose word starts with prefix.

        The prefix itself is included when it is a stored word. Order is
        not significant.

        Args:
            prefix (str): The prefix to match.

        Returns:
            list[tuple[str, Any]]: Matching pairs, empty if none.
        """
        node = self._find(prefix)
        if node is None:
            return []
        return self._collect(node, prefix)

    def get_all_words(self) -> List[Tuple[str, Any]]:
        """Return every stored (word, payload) pair."""
        return self._collect(self.root, "")

    def words_with_prefix(self, prefix: str) -> List[str]:
        """
        Retrieve all words in the trie that share a given prefix.

        Args:
            prefix (str): The prefix to match.

        Returns:
            list[str]: All words that begin with the prefix.
        """
        return [word for word, _ in self.autocomplete(prefix)]

    def count_words(self) -> int:
        """Count the stored words by walking every node."""
        count = 0
        stack = [self.root]
        while stack:
            node = stack.pop()
            if node.is_end:
                count += 1
            stack.extend(node.children.values())
        return count

    def walk(self) -> Iterator[Tuple[int, str, TrieNode, bool]]:
        """
        Walk every edge in pre-order, children sorted by character.

        Yields:
            tuple[int, str, TrieNode, bool]: (depth, char, node, is_last),
            where depth is 1 for children of the root and is_last marks
            the last sibling under the same parent.
        """
        stack = self._edges(self.root, 1)
        stack.reverse()
        while stack:
            depth, ch, node, is_last = stack.pop()
            yield depth, ch, node, is_last
            edges = self._edges(node, depth + 1)
            edges.reverse()
            stack.extend(edges)

    def __iter__(self):
        """
        Iterate over all words stored in the trie.

        Yields:
            str: Next word in the trie.
        """
        for word, _ in self.get_all_words():
            yield word

    def __len__(self):
        return self.count_words()

    def __contains__(self, word):
        return self.search(word)[1]

    # -------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------

    def _find(self, prefix):
        node = self.root
        for ch in prefix:
            node = node.children.get(ch)
            if node is None:
                return None
        return node

    @staticmethod
    def _collect(start, prefix):
        out = []
        stack = [(start, prefix)]
        while stack:
            node, path = stack.pop()
            if node.is_end:
                out.append((path, node.payload))
            # reversed so children pop in insertion order
            for ch, nxt in reversed(node.children.items()):
                stack.append((nxt, path + ch))
        return out

    @staticmethod
    def _edges(node, depth):
        chars = sorted(node.children)
        last = len(chars) - 1
        return [(depth, ch, node.children[ch], i == last) for i, ch in enumerate(chars)]

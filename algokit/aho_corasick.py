"""Aho-Corasick automaton for finding dictionary words in a text."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import Iterator


@dataclass
class _Node:
    parent: int
    char: str
    children: dict[str, int] = field(default_factory=dict)
    suffix: int = 0
    end: int = 0
    word: int = -1


class AhoCorasick:
    """Trie of dictionary words with suffix and dictionary links."""

    def __init__(self) -> None:
        self._nodes = [_Node(0, "")]
        self._lengths: dict[int, int] = {}
        self._duplicates: dict[int, list[int]] = {}
        self._built = False

    def insert(self, word: str, idx: int) -> None:
        """Add ``word`` under identifier ``idx``."""
        if not word:
            raise ValueError("word must not be empty")
        cur = 0
        for ch in word:
            nxt = self._nodes[cur].children.get(ch)
            if nxt is None:
                nxt = len(self._nodes)
                self._nodes[cur].children[ch] = nxt
                self._nodes.append(_Node(cur, ch))
            cur = nxt
        self._lengths[idx] = len(word)
        node = self._nodes[cur]
        if node.word != -1:
            self._duplicates.setdefault(node.word, []).append(idx)
        else:
            node.word = idx
        self._built = False

    def build(self) -> None:
        """Compute the links; call after inserting all words."""
        nodes = self._nodes
        queue = deque(nodes[0].children.values())
        for child in queue:
            node = nodes[child]
            node.suffix = 0
            node.end = child if node.word != -1 else 0
        while queue:
            cur = queue.popleft()
            node = nodes[cur]
            if node.parent != 0:
                link = nodes[node.parent].suffix
                while node.char not in nodes[link].children and link > 0:
                    link = nodes[link].suffix
                node.suffix = nodes[link].children.get(node.char, 0)
                node.end = cur if node.word != -1 else nodes[node.suffix].end
            queue.extend(node.children.values())
        self._built = True

    def find_all(self, text: str) -> Iterator[tuple[int, int]]:
        """Yield ``(word id, start index)`` for each occurrence in ``text``."""
        if not self._built:
            raise RuntimeError("must build trie before processing")
        nodes = self._nodes
        cur = 0
        for i, ch in enumerate(text):
            while ch not in nodes[cur].children and cur > 0:
                cur = nodes[cur].suffix
            cur = nodes[cur].children.get(ch, cur)
            end = nodes[cur].end
            while end > 0:
                word = nodes[end].word
                for idx in (word, *self._duplicates.get(word, ())):
                    yield idx, i - self._lengths[idx] + 1
                end = nodes[nodes[end].suffix].end
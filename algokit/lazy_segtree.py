"""Segment tree with lazy propagation of range updates."""

from __future__ import annotations

from typing import Any, Callable, Iterable, Union


class LazySegTree:
    """Range updates and range products over a monoid acted on by maps.

    ``op`` and ``e()`` form the monoid of segment values. ``mapping(f, x)``
    applies the update ``f`` to a segment value. ``composition(f, g)`` is
    the update that applies ``g`` first and then ``f``. ``id_()`` is the
    update that changes nothing.
    """

    def __init__(self, data: Union[int, Iterable[Any]],
                 op: Callable[[Any, Any], Any], e: Callable[[], Any],
                 mapping: Callable[[Any, Any], Any],
                 composition: Callable[[Any, Any], Any],
                 id_: Callable[[], Any]) -> None:
        values = [e() for _ in range(data)] if isinstance(data, int) else list(data)
        self._op = op
        self._e = e
        self._mapping = mapping
        self._composition = composition
        self._id = id_
        self._n = len(values)
        self._log = max(self._n - 1, 0).bit_length()
        self._size = 1 << self._log
        self._d = [e() for _ in range(2 * self._size)]
        self._lz = [id_() for _ in range(self._size)]
        self._d[self._size:self._size + self._n] = values
        for i in range(self._size - 1, 0, -1):
            self._update(i)

    def __len__(self) -> int:
        return self._n

    def _update(self, k: int) -> None:
        self._d[k] = self._op(self._d[2 * k], self._d[2 * k + 1])

    def _all_apply(self, k: int, f: Any) -> None:
        self._d[k] = self._mapping(f, self._d[k])
        if k < self._size:
            self._lz[k] = self._composition(f, self._lz[k])

    def _push(self, k: int) -> None:
        self._all_apply(2 * k, self._lz[k])
        self._all_apply(2 * k + 1, self._lz[k])
        self._lz[k] = self._id()

    def _push_path(self, p: int) -> None:
        for i in range(self._log, 0, -1):
            self._push(p >> i)

    def _check_pos(self, p: int) -> None:
        if not 0 <= p < self._n:
            raise IndexError("position out of range")

    def _check_range(self, l: int, r: int) -> None:
        if not 0 <= l <= r <= self._n:
            raise IndexError("invalid range")

    def set(self, p: int, x: Any) -> None:
        self._check_pos(p)
        p += self._size
        self._push_path(p)
        self._d[p] = x
        for i in range(1, self._log + 1):
            self._update(p >> i)

    def get(self, p: int) -> Any:
        self._check_pos(p)
        p += self._size
        self._push_path(p)
        return self._d[p]

    def _push_bounds(self, l: int, r: int) -> None:
        for i in range(self._log, 0, -1):
            if ((l >> i) << i) != l:
                self._push(l >> i)
            if ((r >> i) << i) != r:
                self._push((r - 1) >> i)

    def prod(self, l: int, r: int) -> Any:
        """Product over [l, r)."""
        self._check_range(l, r)
        if l == r:
            return self._e()
        l += self._size
        r += self._size
        self._push_bounds(l, r)
        op, d = self._op, self._d
        sml, smr = self._e(), self._e()
        while l < r:
            if l & 1:
                sml = op(sml, d[l])
                l += 1
            if r & 1:
                r -= 1
                smr = op(d[r], smr)
            l >>= 1
            r >>= 1
        return op(sml, smr)

    def all_prod(self) -> Any:
        return self._d[1]

    def apply(self, p: int, f: Any) -> None:
        """Apply the update ``f`` to position ``p``."""
        self._check_pos(p)
        p += self._size
        self._push_path(p)
        self._d[p] = self._mapping(f, self._d[p])
        for i in range(1, self._log + 1):
            self._update(p >> i)

    def apply_range(self, l: int, r: int, f: Any) -> None:
        """Apply the update ``f`` to every position in [l, r)."""
        self._check_range(l, r)
        if l == r:
            return
        l += self._size
        r += self._size
        self._push_bounds(l, r)
        l2, r2 = l, r
        while l2 < r2:
            if l2 & 1:
                self._all_apply(l2, f)
                l2 += 1
            if r2 & 1:
                r2 -= 1
                self._all_apply(r2, f)
            l2 >>= 1
            r2 >>= 1
        for i in range(1, self._log + 1):
            if ((l >> i) << i) != l:
                self._update(l >> i)
            if ((r >> i) << i) != r:
                self._update((r - 1) >> i)

    def max_right(self, l: int, g: Callable[[Any], bool]) -> int:
        """Largest ``r`` with ``g(prod(l, r))`` true, for monotone ``g``."""
        if not 0 <= l <= self._n:
            raise IndexError("position out of range")
        if not g(self._e()):
            raise ValueError("predicate must hold for the identity")
        if l == self._n:
            return self._n
        op, d, size = self._op, self._d, self._size
        l += size
        self._push_path(l)
        sm = self._e()
        while True:
            while l % 2 == 0:
                l >>= 1
            if not g(op(sm, d[l])):
                while l < size:
                    self._push(l)
                    l *= 2
                    if g(op(sm, d[l])):
                        sm = op(sm, d[l])
                        l += 1
                return l - size
            sm = op(sm, d[l])
            l += 1
            if (l & -l) == l:
                return self._n

    def min_left(self, r: int, g: Callable[[Any], bool]) -> int:
        """Smallest ``l`` with ``g(prod(l, r))`` true, for monotone ``g``."""
        if not 0 <= r <= self._n:
            raise IndexError("position out of range")
        if not g(self._e()):
            raise ValueError("predicate must hold for the identity")
        if r == 0:
            return 0
        op, d, size = self._op, self._d, self._size
        r += size
        self._push_path(r - 1)
        sm = self._e()
        while True:
            r -= 1
            while r > 1 and r % 2:
                r >>= 1
            if not g(op(d[r], sm)):
                while r < size:
                    self._push(r)
                    r = 2 * r + 1
                    if g(op(d[r], sm)):
                        sm = op(d[r], sm)
                        r -= 1
                return r + 1 - size
            sm = op(d[r], sm)
            if (r & -r) == r:
                return 0
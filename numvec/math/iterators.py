# numvec/math/iterators.py
"""
Двусторонние ограниченные итераторы по компонентам вектора.

    * Iter     – разделяемый: отдаёт текущие значения компонент;
    * IntoIter – владеющий: работает по снимку (копии) компонент;
    * IterMut  – изменяемый: отдаёт Slot‑ы, через которые можно писать
                 обратно в вектор. Держит эксклюзивный «заём» вектора.

Все три ходят курсором (front_index, back_index, remaining): remaining
уменьшается на единицу при каждой выдаче с любого конца и один решает,
когда итерация закончена, поэтому концы не пересекаются и ни один слот
не выдаётся дважды.
"""

import weakref
from typing import Optional

from numvec.core.errors import BorrowError

_CLOSED = "Mutable iterator is closed; its slots are no longer writable"


class _Cursor:
    __slots__ = ("front_index", "back_index", "remaining")

    def __init__(self, length: int):
        self.front_index = 0
        self.back_index = length - 1
        # None – итерация закончена окончательно (fused)
        self.remaining: Optional[int] = length

    def _take(self) -> bool:
        if self.remaining is None:
            return False
        if self.remaining == 0:
            self.remaining = None
            return False
        self.remaining -= 1
        return True

    def take_front(self) -> Optional[int]:
        if not self._take():
            return None
        index = self.front_index
        self.front_index += 1
        return index

    def take_back(self) -> Optional[int]:
        if not self._take():
            return None
        index = self.back_index
        self.back_index -= 1
        return index

    def __len__(self) -> int:
        return self.remaining or 0


class _BoundedIter:
    """Общая механика: next() спереди, next_back() сзади, len() = остаток."""

    __slots__ = ("_cursor",)

    def __init__(self, length: int):
        self._cursor = _Cursor(length)

    def _fetch(self, index: int):
        raise NotImplementedError

    def _finish(self) -> None:
        pass

    def __iter__(self):
        return self

    def __next__(self):
        index = self._cursor.take_front()
        if index is None:
            self._finish()
            raise StopIteration
        return self._fetch(index)

    def next_back(self):
        """Следующий элемент с конца; StopIteration, когда элементы кончились."""
        index = self._cursor.take_back()
        if index is None:
            self._finish()
            raise StopIteration
        return self._fetch(index)

    def __reversed__(self) -> "_Backward":
        return _Backward(self)

    def __len__(self) -> int:
        return len(self._cursor)

    def __length_hint__(self) -> int:
        return len(self._cursor)


class _Backward:
    """Обратный адаптер: делит курсор с исходным итератором."""

    __slots__ = ("_source",)

    def __init__(self, source: _BoundedIter):
        self._source = source

    def __iter__(self):
        return self

    def __next__(self):
        return self._source.next_back()

    def next_back(self):
        return next(self._source)

    def __reversed__(self) -> _BoundedIter:
        return self._source

    def __len__(self) -> int:
        return len(self._source)


# ---------------------------------------------------------------
# Iter – разделяемое чтение
# ---------------------------------------------------------------
class Iter(_BoundedIter):
    __slots__ = ("_vector",)

    def __init__(self, vector):
        super().__init__(len(vector))
        self._vector = vector

    def _fetch(self, index: int):
        return self._vector._get(index)


# ---------------------------------------------------------------
# IntoIter – по собственной копии
# ---------------------------------------------------------------
class IntoIter(_BoundedIter):
    __slots__ = ("_values",)

    def __init__(self, vector):
        super().__init__(len(vector))
        self._values = vector.as_np()

    def _fetch(self, index: int):
        return self._values[index]


# ---------------------------------------------------------------
# IterMut – эксклюзивный доступ на запись
# ---------------------------------------------------------------
class Slot:
    """
    Изменяемая ссылка на одну компоненту вектора.

    Итератор держится слабой ссылкой: брошенный IterMut (break, одиночный
    next()) уничтожается сразу, и слоты после этого только читают.
    """

    __slots__ = ("_owner", "_vector", "index")

    def __init__(self, owner: "IterMut", index: int):
        self._owner = weakref.ref(owner)
        self._vector = owner._vector
        self.index = index

    @property
    def value(self):
        return self._vector._get(self.index)

    @value.setter
    def value(self, new_value) -> None:
        owner = self._owner()
        if owner is None:
            raise BorrowError(_CLOSED)
        owner._write(self.index, new_value)

    def get(self):
        return self.value

    def set(self, new_value) -> None:
        self.value = new_value

    def __repr__(self):
        return f"Slot(index={self.index}, value={self.value!r})"


class IterMut(_BoundedIter):
    """
    Изменяемый итератор. Пока он жив, вектор нельзя ни менять другими
    путями, ни открывать на нём новые итераторы (BorrowError).
    Заём снимается при исчерпании, close(), выходе из `with` или когда
    на итератор не остаётся ссылок.
    """

    __slots__ = ("_vector", "_live", "__weakref__")

    def __init__(self, vector):
        self._live = False
        super().__init__(len(vector))
        self._vector = vector
        vector._acquire(self)
        self._live = True

    @property
    def live(self) -> bool:
        return self._live

    def _fetch(self, index: int) -> Slot:
        return Slot(self, index)

    def _write(self, index: int, value) -> None:
        if not self._live:
            raise BorrowError(_CLOSED)
        self._vector._store(index, value)

    def _finish(self) -> None:
        self.close()

    def close(self) -> None:
        if self._live:
            self._live = False
            self._vector._release(self)

    def __del__(self):
        if getattr(self, "_live", False):
            self.close()

    def __enter__(self) -> "IterMut":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

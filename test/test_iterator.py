import runtime_path  # isort:skip

import numpy as np
import pytest

from ndlayout import BroadcastingIterator, IncompatibleShapes, IteratorInvalidated, Layout, NPArray, PyArray

def filled(shape, layout=Layout.ROW_MAJOR):
  arr = PyArray(shape, layout)
  arr.broadcast_iter().assign(range(arr.size))
  return arr

def test_iterate_own_shape():
  arr = filled((2, 3))
  assert list(arr) == list(range(6))
  assert list(arr.storage_iter()) == list(range(6))
  arr = filled((2, 3), Layout.COLUMN_MAJOR)
  assert list(arr) == list(range(6))
  assert list(arr.storage_iter()) == [0, 3, 1, 4, 2, 5]
  assert arr.tolist() == [[0, 1, 2], [3, 4, 5]]

def test_iterate_broadcast_shape():
  arr = filled((3, 1))
  assert arr.strides == (1, 0)
  values = list(arr.broadcast_iter((2, 3, 4)))
  assert len(values) == 24
  assert values == [i for _ in range(2) for i in range(3) for _ in range(4)]
  offsets = list(arr.broadcast_iter((3, 4)).offsets())
  assert offsets == [i for i in range(3) for _ in range(4)]

def test_iterate_matches_numpy():
  for shape, target in (
          [(3, 1), (2, 3, 5)],
          [(1, 4), (3, 4)],
          [(2, 1, 3), (2, 4, 3)],
          [(), (2, 2)],
          [(4,), (3, 4)]):
    nparr = np.arange(int(np.prod(shape))).reshape(shape).astype(np.float32)
    for layout in (Layout.ROW_MAJOR, Layout.COLUMN_MAJOR):
      arr = NPArray(nparr, layout=layout)
      expected = np.broadcast_to(nparr, target).ravel()
      assert np.array_equal(np.array(list(arr.broadcast_iter(target))), expected)

def test_iterate_explicit_strides():
  arr = PyArray()
  arr.reshape((2, 2), (1, 2))
  arr.broadcast_iter().assign(["a", "b", "c", "d"])
  assert list(arr.storage_iter()) == ["a", "c", "b", "d"]
  assert list(arr) == ["a", "b", "c", "d"]

def test_iterate_scalar_and_empty():
  arr = PyArray(())
  arr[()] = 3
  assert list(arr) == [3]
  assert list(arr.broadcast_iter((2, 2))) == [3] * 4
  assert list(PyArray((3, 0))) == []
  assert list(PyArray((3,)).broadcast_iter((0, 3))) == []

def test_iterator_restart():
  arr = filled((2, 2))
  it = iter(arr)
  assert list(it) == [0, 1, 2, 3]
  assert list(it) == []
  assert list(iter(arr)) == [0, 1, 2, 3]

def test_iterator_length_hint():
  it = filled((2, 3)).broadcast_iter((4, 2, 3))
  assert it.__length_hint__() == 24
  next(it)
  assert it.__length_hint__() == 23
  assert "position=1/24" in repr(it)

def test_iterate_incompatible():
  arr = PyArray((3, 2))
  for shape in ((3, 1), (2,), (4, 2), (2, 3, 3)):
    with pytest.raises(IncompatibleShapes):
      arr.broadcast_iter(shape)
  with pytest.raises(IncompatibleShapes):
    BroadcastingIterator(arr, (2, 2))

def test_iterator_invalidated():
  arr = filled((2, 3))
  it = arr.broadcast_iter((2, 2, 3))
  offsets = it.offsets()
  next(offsets)
  arr.reshape((2, 3), Layout.COLUMN_MAJOR)
  with pytest.raises(IteratorInvalidated):
    next(offsets)
  with pytest.raises(IteratorInvalidated):
    next(it)

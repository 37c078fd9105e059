from ndlayout.broadcast import broadcast_shapes
from ndlayout.errors import IncompatibleShapes, IteratorInvalidated
from ndlayout.shape import validate_shape
from ndlayout.utils.math import prod


class BroadcastingIterator:
  """
  Walk the logical positions of `shape` over the storage of `arr`, last axis fastest.

  `shape` defaults to the array's own shape and may be any shape the array
  broadcasts to (trailing-aligned). Leading axes the array lacks and axes where
  the array has extent 1 carry stride 0, so their storage slot is revisited
  once per logical position. Stepping uses the strides and wrapping uses the
  backstrides, so no offset is recomputed from scratch.

  The iterator is bound to the array's generation: reshaping the array while
  the iterator is alive makes the next step raise IteratorInvalidated.
  """

  def __init__(self, arr, shape=None):
    self.arr = arr
    self.shape = arr.shape if shape is None else validate_shape(shape)
    if broadcast_shapes(self.shape, arr.shape) != self.shape:
      raise IncompatibleShapes(f"Can not iterate array of shape {arr.shape} as {self.shape}")
    lead = len(self.shape) - arr.ndim
    self.strides = (0,) * lead + arr.strides
    self.backstrides = (0,) * lead + arr.backstrides
    self.generation = arr.generation

    self.index = [0] * len(self.shape)
    self.offset = 0
    self.count, self.total = 0, prod(self.shape)

  def __repr__(self):
    return f"<{self.__class__.__name__} shape={self.shape} position={self.count}/{self.total}>"

  def __iter__(self):
    return self

  def __length_hint__(self):
    return self.total - self.count

  def __next__(self):
    return self.arr.data()[self._next_offset()]

  def _next_offset(self):
    if self.arr.generation != self.generation:
      raise IteratorInvalidated(f"Array reshaped to {self.arr.shape} while iterating over {self.shape}")
    if self.count >= self.total:
      raise StopIteration
    offset = self.offset
    self.count += 1
    for i in range(len(self.shape) - 1, -1, -1):
      if self.index[i] < self.shape[i] - 1:
        self.index[i] += 1
        self.offset += self.strides[i]
        break
      self.index[i] = 0
      self.offset -= self.backstrides[i]
    return offset

  def offsets(self):
    while True:
      try:
        offset = self._next_offset()
      except StopIteration:
        return
      yield offset

  def assign(self, values):
    storage = self.arr.data()
    for offset, value in zip(self.offsets(), values):
      storage[offset] = value

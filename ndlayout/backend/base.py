from ndlayout.broadcast import broadcast_shape as broadcast_into
from ndlayout.env import BOUNDSCHECK, DEBUG
from ndlayout.iterator import BroadcastingIterator
from ndlayout.layout import Layout
from ndlayout.shape import (ArrayShape, ArrayStrides, checked_data_offset, data_offset, data_size,
                            validate_shape, validate_strides)
from ndlayout.utils.array import calculate_contiguity


def adapt_strides(shape, strides, backstrides, i):
  if shape[i] == 1:
    strides[i] = 0
    backstrides[i] = 0
  else:
    backstrides[i] = strides[i] * (shape[i] - 1)

def layout_strides(shape, layout):
  """Derive (strides, backstrides, storage size) of `shape` stored in `layout` order."""
  n = len(shape)
  strides, backstrides = ArrayStrides(), ArrayStrides()
  strides.resize(n)
  backstrides.resize(n)
  if n == 0:
    return strides, backstrides, 1
  if layout is Layout.ROW_MAJOR:
    strides[n-1] = 1
    for i in range(n-1, 0, -1):
      strides[i-1] = strides[i] * shape[i]
      adapt_strides(shape, strides, backstrides, i)
    size = strides.front() * shape[0]
    adapt_strides(shape, strides, backstrides, 0)
  elif layout is Layout.COLUMN_MAJOR:
    strides[0] = 1
    for i in range(1, n):
      strides[i] = strides[i-1] * shape[i-1]
      adapt_strides(shape, strides, backstrides, i-1)
    size = strides.back() * shape[n-1]
    adapt_strides(shape, strides, backstrides, n-1)
  else:
    raise ValueError(f"Invalid layout {layout}")
  return strides, backstrides, size


class Array:
  """
  Shape, strides and backstrides of an N-dimensional array over flat storage.

  Subclasses provide the storage through `data_impl()`; anything with `len`,
  `resize(n)`, integer indexing and iteration will do. The base only asks the
  storage to resize to the element count of a new shape and maps coordinates
  to flat offsets into it.

  The triple (shape, strides, backstrides) is only replaced as a whole by
  `reshape`; accessors hand out tuples. Every reshape bumps `generation`, which
  invalidates live broadcasting iterators.
  """

  def __init__(self):
    self._shape = ArrayShape()
    self._strides = ArrayStrides()
    self._backstrides = ArrayStrides()
    self.generation = 0

  def __repr__(self):
    return (f"<{self.__class__.__name__} shape={self.shape} strides={self.strides} size={self.size}>")

  def data_impl(self):
    raise NotImplementedError

  def data(self):
    return self.data_impl()

  @property
  def size(self):
    return len(self.data())

  def dimension(self):
    return len(self._shape)

  @property
  def ndim(self):
    return len(self._shape)

  @property
  def shape(self):
    return self._shape.to_tuple()

  @property
  def strides(self):
    return self._strides.to_tuple()

  @property
  def backstrides(self):
    return self._backstrides.to_tuple()

  @property
  def c_contiguous(self):
    return calculate_contiguity(self.shape, self.strides)[0]

  @property
  def f_contiguous(self):
    return calculate_contiguity(self.shape, self.strides)[1]

  def reshape(self, shape, layout=Layout.ROW_MAJOR):
    """
    Replace the shape and derive strides from `layout`, or adopt `layout` verbatim
    when a stride sequence is passed instead. Storage is resized to the product of
    the extents (one element for a 0-d array) before the new triple is published.
    """
    shape = validate_shape(shape)
    if isinstance(layout, Layout):
      strides, backstrides, size = layout_strides(shape, layout)
    else:
      strides = ArrayStrides(validate_strides(shape, layout))
      backstrides = ArrayStrides()
      backstrides.resize(len(shape))
      for i in range(len(shape)):
        adapt_strides(shape, strides, backstrides, i)
      size = data_size(shape)
    self.data().resize(size)
    self._shape, self._strides, self._backstrides = ArrayShape(shape), strides, backstrides
    self.generation += 1
    if DEBUG: print(f"[DEBUG] reshape {self.shape} strides={self.strides} backstrides={self.backstrides} size={size}")
    return self

  # ##### Element Access #####
  def offset(self, *coords):
    if BOUNDSCHECK:
      return checked_data_offset(self._shape, self._strides, *coords)
    return data_offset(self._strides, *coords)

  def __call__(self, *coords):
    return self.data()[data_offset(self._strides, *coords)]

  def at(self, *coords):
    return self.data()[checked_data_offset(self._shape, self._strides, *coords)]

  def __getitem__(self, key):
    key = key if isinstance(key, tuple) else (key,)
    return self.data()[self.offset(*key)]

  def __setitem__(self, key, value):
    key = key if isinstance(key, tuple) else (key,)
    self.data()[self.offset(*key)] = value

  # ##### Broadcasting #####
  def broadcast_shape(self, running):
    return broadcast_into(self._shape, running)

  # ##### Iteration #####
  def storage_iter(self):
    return iter(self.data())

  def broadcast_iter(self, shape=None):
    return BroadcastingIterator(self, shape)

  def __iter__(self):
    return self.broadcast_iter()

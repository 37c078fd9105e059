from numbers import Integral

from ndlayout.errors import DimensionMismatch, InvalidShape, OutOfBounds
from ndlayout.utils.math import prod


class ArrayShape:
  """Resizable sequence of sizes, used for shapes, strides and backstrides alike."""

  __hash__ = None

  def __init__(self, values=()):
    self._data = [int(v) for v in values]

  def __repr__(self):
    return f"{self.__class__.__name__}({self._data})"

  def __len__(self):
    return len(self._data)

  def __iter__(self):
    return iter(self._data)

  def __getitem__(self, idx):
    return self._data[idx]

  def __setitem__(self, idx, value):
    self._data[idx] = value

  def __eq__(self, other):
    if isinstance(other, (ArrayShape, tuple, list)):
      return tuple(self._data) == tuple(other)
    return NotImplemented

  def resize(self, n, value=0):
    if n < len(self._data):
      del self._data[n:]
    else:
      self._data.extend([value] * (n - len(self._data)))

  def front(self):
    return self._data[0]

  def back(self):
    return self._data[-1]

  def copy(self):
    return self.__class__(self._data)

  def to_tuple(self):
    return tuple(self._data)

ArrayStrides = ArrayShape


def validate_shape(shape):
  shape = tuple(shape)
  for i, d in enumerate(shape):
    if isinstance(d, bool) or not isinstance(d, Integral):
      raise InvalidShape(f"Extent {d!r} of axis {i} in shape {shape} is not an integer")
    if d < 0:
      raise InvalidShape(f"Extent {d} of axis {i} in shape {shape} is negative")
  return tuple(int(d) for d in shape)

def validate_strides(shape, strides):
  strides = tuple(strides)
  if len(strides) != len(shape):
    raise DimensionMismatch(f"Got {len(strides)} strides {strides} for shape {shape}")
  for i, s in enumerate(strides):
    if isinstance(s, bool) or not isinstance(s, Integral):
      raise InvalidShape(f"Stride {s!r} of axis {i} in strides {strides} is not an integer")
    if s < 0:
      raise InvalidShape(f"Stride {s} of axis {i} in strides {strides} is negative")
  return tuple(int(s) for s in strides)

def data_size(shape):
  return prod(shape)

def data_offset(strides, *coords):
  if len(coords) != len(strides):
    raise DimensionMismatch(f"Got {len(coords)} coordinates {coords} for a {len(strides)}-d array")
  offset = 0
  for s, c in zip(strides, coords):
    offset += s * c
  return offset

def checked_data_offset(shape, strides, *coords):
  if len(coords) != len(shape):
    raise DimensionMismatch(f"Got {len(coords)} coordinates {coords} for shape {tuple(shape)}")
  normalized = []
  for i, (c, d) in enumerate(zip(coords, shape)):
    if c < 0: c += d
    if not 0 <= c < d:
      raise OutOfBounds(f"Coordinate {coords[i]} out of bounds for axis {i} with extent {d}")
    normalized.append(c)
  return data_offset(strides, *normalized)

__all__ = [
  "DimensionMismatch",
  "IncompatibleShapes",
  "InvalidShape",
  "IteratorInvalidated",
  "NDLayoutError",
  "OutOfBounds",
]


class NDLayoutError(Exception):
  """Base error which all ndlayout errors are sub-classed from."""


class DimensionMismatch(NDLayoutError, ValueError):
  """Raised when a coordinate tuple or a strides sequence does not match the dimensionality."""


class IncompatibleShapes(NDLayoutError, ValueError):
  """Raised when two shapes can not be aligned under broadcasting rules."""


class InvalidShape(NDLayoutError, ValueError):
  """Raised when a reshape receives negative or non-integer extents, or negative strides."""


class OutOfBounds(NDLayoutError, IndexError):
  """Raised by checked element access when a coordinate lies outside its axis."""


class IteratorInvalidated(NDLayoutError, RuntimeError):
  """Raised when an array is reshaped while one of its iterators is alive."""

import functools

from ndlayout.env import DEBUG
from ndlayout.errors import IncompatibleShapes
from ndlayout.shape import ArrayShape


def _merge(shape, running):
  # https://numpy.org/doc/stable/user/basics.broadcasting.html
  shape, running = tuple(shape), tuple(running)
  if len(shape) > len(running):
    running = shape[:len(shape) - len(running)] + running
  merged = list(running)
  offset = len(running) - len(shape)
  for i, a in enumerate(shape):
    b = merged[offset + i]
    if a == b or a == 1:
      continue
    if b != 1:
      raise IncompatibleShapes(f"Error broadcasting shape {shape} against {running}: axis {offset+i} has {a} vs {b}")
    merged[offset + i] = a
  return tuple(merged)

def broadcast_shape(shape, running):
  """
  Fold `shape` into the mutable accumulator `running` (an ArrayShape or a list).

  `running` is grown with the leading extents of `shape` when it has fewer axes,
  and every trailing-aligned axis of extent 1 takes the other side's extent. It
  is only written back when the whole merge succeeds, so an IncompatibleShapes
  error leaves it untouched.

  Returns True when `shape` equals the resulting running shape, i.e. the operand
  can be walked without broadcasting.
  """
  merged = _merge(shape, running)
  if isinstance(running, ArrayShape):
    running.resize(len(merged))
  else:
    del running[:]
    running.extend([0] * len(merged))
  for i, d in enumerate(merged):
    running[i] = d
  trivial = tuple(shape) == merged
  if DEBUG: print(f"[DEBUG] broadcast {tuple(shape)} -> {merged} trivial={trivial}")
  return trivial

def broadcast_shapes(*shapes):
  return functools.reduce(lambda running, shape: _merge(shape, running), shapes, ())

def calculate_contiguity(shape, strides):
  # https://github.com/numpy/numpy/blob/93a97649aa0aefc0ee8ee5fc7cb78063bfe67255/numpy/core/src/multiarray/flagsobject.c#L115
  assert len(shape) == len(strides)
  if 0 in shape:
    return True, True
  def is_contiguous(axes):
    nitems = 1
    for i in axes:
      # degenerate axes carry stride 0 and never break contiguity
      if shape[i] == 1: continue
      if strides[i] != nitems: return False
      nitems *= shape[i]
    return True
  ndim = len(shape)
  return is_contiguous(range(ndim-1, -1, -1)), is_contiguous(range(ndim))

import numpy as np


class Storage:
  """Flat element container an array sizes and interprets but never owns the layout of."""

  def __repr__(self):
    return f"<{self.__class__.__name__} size={len(self)}>"

  def __len__(self): raise NotImplementedError
  def __iter__(self): raise NotImplementedError
  def __getitem__(self, idx): raise NotImplementedError
  def __setitem__(self, idx, value): raise NotImplementedError
  def resize(self, n): raise NotImplementedError


class ListStorage(Storage):
  def __init__(self, size=0, fill=0):
    self.fill = fill
    self._data = [fill] * size

  def __len__(self):
    return len(self._data)

  def __iter__(self):
    return iter(self._data)

  def __getitem__(self, idx):
    return self._data[idx]

  def __setitem__(self, idx, value):
    self._data[idx] = value

  def resize(self, n):
    if n < len(self._data):
      del self._data[n:]
    else:
      self._data.extend([self.fill] * (n - len(self._data)))


class NPStorage(Storage):
  def __init__(self, size=0, dtype=np.float32):
    self.dtype = dtype
    self._data = np.zeros(size, dtype=dtype)

  @property
  def buffer(self):
    return self._data

  def __len__(self):
    return self._data.shape[0]

  def __iter__(self):
    return iter(self._data)

  def __getitem__(self, idx):
    return self._data[idx]

  def __setitem__(self, idx, value):
    self._data[idx] = value

  def resize(self, n):
    if n == len(self):
      return
    # NOTE: keep the existing prefix, new slots are zero
    data = np.zeros(n, dtype=self.dtype)
    keep = min(n, len(self))
    data[:keep] = self._data[:keep]
    self._data = data

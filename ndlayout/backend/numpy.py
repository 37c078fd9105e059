import numpy as np

from ndlayout.backend.base import Array
from ndlayout.layout import Layout
from ndlayout.storage import NPStorage
from ndlayout.utils.math import prod


class NPArray(Array):
  def __init__(self, data=None, shape=None, dtype=np.float32, layout=Layout.ROW_MAJOR):
    super().__init__()
    self.dtype = dtype
    self.__storage = NPStorage(dtype=dtype)
    if data is not None:
      data = np.asarray(data, dtype=dtype)
      shape = data.shape
    if shape is not None:
      self.reshape(shape, layout)
    if data is not None:
      # logical order walks the last axis fastest whatever the storage layout
      self.broadcast_iter().assign(data.ravel(order="C"))

  def __repr__(self):
    return f"<{self.__class__.__name__} dtype={np.dtype(self.dtype).name} shape={self.shape} strides={self.strides}>"

  def data_impl(self):
    return self.__storage

  def numpy(self, shape=None):
    it = self.broadcast_iter(shape)
    return np.fromiter(it, dtype=self.dtype, count=prod(it.shape)).reshape(it.shape)

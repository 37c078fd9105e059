from ndlayout.backend.base import Array
from ndlayout.layout import Layout
from ndlayout.storage import ListStorage


class PyArray(Array):
  def __init__(self, shape=None, layout=Layout.ROW_MAJOR, fill=0):
    super().__init__()
    self.__storage = ListStorage(fill=fill)
    if shape is not None:
      self.reshape(shape, layout)

  def data_impl(self):
    return self.__storage

  def tolist(self):
    def nest(axis, values):
      if axis == self.ndim:
        return next(values)
      return [nest(axis + 1, values) for _ in range(self.shape[axis])]
    return nest(0, iter(self))

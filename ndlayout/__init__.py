from ndlayout.backend.base import Array
from ndlayout.backend.numpy import NPArray
from ndlayout.backend.pylist import PyArray
from ndlayout.broadcast import broadcast_shape, broadcast_shapes
from ndlayout.errors import (DimensionMismatch, IncompatibleShapes, InvalidShape, IteratorInvalidated,
                             NDLayoutError, OutOfBounds)
from ndlayout.iterator import BroadcastingIterator
from ndlayout.layout import Layout
from ndlayout.shape import ArrayShape, ArrayStrides, checked_data_offset, data_offset, data_size
from ndlayout.storage import ListStorage, NPStorage, Storage

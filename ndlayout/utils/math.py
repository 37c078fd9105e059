import functools
import operator


def prod(seq):
  return functools.reduce(operator.mul, seq, 1)

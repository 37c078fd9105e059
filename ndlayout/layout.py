from enum import Enum

# ROW_MAJOR: last axis varies fastest in storage; COLUMN_MAJOR: first axis does
Layout = Enum("Layout", ["ROW_MAJOR", "COLUMN_MAJOR"])

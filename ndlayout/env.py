import os

DEBUG = int(os.getenv("DEBUG", "0"))
BOUNDSCHECK = int(os.getenv("BOUNDSCHECK", "0"))  # checked offsets for __getitem__/__setitem__

assert BOUNDSCHECK in (0, 1), f"BOUNDSCHECK={BOUNDSCHECK} not supported!"

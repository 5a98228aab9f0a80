"""Scan a string into tokens in 3 lines — zero config, zero deps."""

from dfalex import tokenize

for token in tokenize("i in int intx"):
    print(token)

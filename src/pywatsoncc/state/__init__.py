"""State layer.

Holds the two pieces of shared mutable state of a connection: the variable
store fed by status polls and the last-writer-wins health indicator.
"""

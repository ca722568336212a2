"""
selection_trail: ancestry trails for document selections.

Given a selection endpoint (a node and an offset) in a document tree, build
the root-first list of descriptors leading down to it.
"""

__version__ = "0.1.0"

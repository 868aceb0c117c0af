"""
Graphwalk: depth-first reachability queries over small in-memory graphs.

Graphwalk walks externally owned graphs and answers questions about them:
- Which reachable words are shorter than k, and which is the longest
- Which reachable vertices loop back to themselves
- Whether one airport can be reached from another
- Which values of an adjacency map cannot be reached from a start

Usage:
    from graphwalk.core.graph import build_vertices, longest_word, unreachable

    graph = {"cat": ["elephant"], "elephant": ["dog"], "dog": ["cat"]}
    vertices = build_vertices(graph)
    longest_word(vertices["cat"])  # "elephant"
    unreachable(graph, "dog")  # set()
"""

__version__ = "0.1.0"

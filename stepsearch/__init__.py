"""Steppable search engines (DFS, DLS, UCS, 8-puzzle BFS/DFS/A*) for teaching and visualisation."""

__version__ = "0.1.0"

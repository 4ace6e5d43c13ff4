"""Utility functions for treepack.

This package contains helpers used around the packers:
- sizing: Block ordering, gaps and bin size calculations
- layout: numpy based inspection of packed layouts
"""

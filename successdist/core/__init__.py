"""
successdist.core
================

Shared building blocks: typed names, the argument error and the input
validation policy used by every query in `successdist.stats`.
"""

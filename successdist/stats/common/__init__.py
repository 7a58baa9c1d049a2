"""
successdist.stats.common
========================

Family-agnostic algorithms.

The functions here know nothing about argument validation or about which
distribution family is being queried; `successdist.stats.distributions`
composes them into the public queries.
"""

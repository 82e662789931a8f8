"""
Cost calculators.

Pure Python math over catalog snapshots. No I/O, no caching.
Given products, materials and explicit PricingSettings, produce cost
results with rounded totals, raw totals and breakdowns.
"""

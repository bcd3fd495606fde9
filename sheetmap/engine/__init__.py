"""
Sheetmap engine: metadata discovery, eligibility, titles and flattening.
"""

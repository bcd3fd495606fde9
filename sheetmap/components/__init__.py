"""
Sheetmap - Pluggable components
"""

"""
Value objects produced by the signal engine.
"""

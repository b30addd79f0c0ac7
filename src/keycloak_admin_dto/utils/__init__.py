"""
Utilities package - helpers for transport code consuming the models.
"""

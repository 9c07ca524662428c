"""
Package: utils
Description: Shared helpers for the delivery task creator.
"""

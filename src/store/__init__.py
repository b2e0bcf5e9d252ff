"""Pixel output layer.

This module serializes flipped pixels back to delimited text.
"""

"""Core shared components.

This module holds configuration, constants, errors, and typed models.
Every other layer depends on it and it depends on no other layer.
"""

"""Person index layer.

This module joins the two source datasets into an immutable index.
It memoizes the built index for the lifetime of its owner.
"""

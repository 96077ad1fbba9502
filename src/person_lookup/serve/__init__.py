"""Person lookup serving components.

This module exposes the lookup facade and the default record mapper.
It answers identity queries from the memoized person index.
"""

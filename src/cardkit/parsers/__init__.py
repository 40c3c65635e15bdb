#  Copyright (c) 2025 Tom Villani, Ph.D.
"""HTML import for cardkit documents.

Per-variant modules build tag-indexed matcher maps; :mod:`cardkit.parsers.html`
walks an HTML fragment and dispatches elements through them.
"""

#  Copyright (c) 2025 Tom Villani, Ph.D.
"""HTML renderers for cardkit nodes.

Per-variant modules render one card for the web or email target;
:mod:`cardkit.renderers.html` renders a whole document.
"""

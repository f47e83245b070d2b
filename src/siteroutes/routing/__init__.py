"""Routing: the static route table and the exact-match router.

Routes are registered during setup and compiled into an immutable
lookup structure when the app freezes.
"""

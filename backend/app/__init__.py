"""Weekly Focus Application Package — weekly goals, daily progress, weekly reflections.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""

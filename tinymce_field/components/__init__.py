"""
Field components.

Each component is a functional core: host collaborators arrive as ports,
nothing is read from ambient application state.
"""

"""API layer - routes, dependencies, middleware and response shaping"""

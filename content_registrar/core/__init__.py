"""
Core registrar system: registry, middleware chain, data contract and dispatch
"""

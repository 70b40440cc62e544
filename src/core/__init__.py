"""
Core domain models, wire contracts and shared primitives.

This module contains the foundational building blocks that are independent
of the host runtime (stores, routers, genesis).
"""

"""FRA Atlas engine — layer store, map presentation, and smart rules.

Everything here is in-memory and framework-free; the FastAPI app in
``app`` wires one ``AtlasSession`` per application instance.
"""

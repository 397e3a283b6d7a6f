"""
Generators — produce project files from a resolved configuration.

Each generator module exposes ``generate_*()`` functions that return
``GeneratedFile`` instances. Generators are pure: writing is left to
the scaffold orchestrator.
"""

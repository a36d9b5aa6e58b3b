"""
Generators — produce config files from a language template.

Each generator module exposes a ``generate_*()`` function that returns
a ``GeneratedFile`` instance.
"""

"""Format-specific parsers, imported lazily by the dispatcher.

Where: src/musicmeta/features/parsers/__init__.py
What: Namespace for one mutagen backed parser module per container family.
Why: Modules are resolved through ``importlib`` on demand, so nothing is re-exported here.
"""

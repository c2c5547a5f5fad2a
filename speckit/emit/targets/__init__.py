# speckit/emit/targets/__init__.py
"""Language emitters. Every module here is scanned by the emitter registry."""

# speckit/logging/tags.py
"""
Central place for logging subsystem tags.

Tags prefix log messages so output stays searchable across modules.
"""

CONTRACT = "[CONTRACT]"
EMIT = "[EMIT]"
PLAN = "[PLAN]"
GUARD = "[GUARD]"
SYNC = "[SYNC]"
CLI = "[CLI]"

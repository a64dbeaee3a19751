# rfcli/logging/tags.py
"""
Logging subsystem tags.

Prefix log messages with these so output stays greppable.
"""

CACHE = "[CACHE]"
INDEX = "[INDEX]"
SELECTOR = "[SELECTOR]"
PAGER = "[PAGER]"
SESSION = "[SESSION]"
TLDR = "[TLDR]"
HTTP = "[HTTP]"
CLI = "[CLI]"
CONFIG = "[CONFIG]"

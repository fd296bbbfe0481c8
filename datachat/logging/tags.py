# datachat/logging/tags.py
"""
Subsystem tags for log messages.

Used as message prefixes so log output stays searchable, e.g.
    logger.info(f"{INGEST} Imported table: {name}")
"""

INGEST = "[INGEST]"
DB = "[DB]"
LLM = "[LLM]"
CHAT = "[CHAT]"
CONFIG = "[CONFIG]"
CLI = "[CLI]"
API = "[API]"

"""Domain layer — typed record, parsers, rules, and the signing schema.

This layer depends only on stdlib, pydantic, and eth-utils.
It must never import from services, infrastructure, commands, or config.
"""

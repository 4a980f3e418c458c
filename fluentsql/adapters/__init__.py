"""Execution gateways that run rendered statements against a database.

Adapters are imported explicitly (``from fluentsql.adapters.aiosqlite import ...``) so
that their driver packages remain optional.
"""

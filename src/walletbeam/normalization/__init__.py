"""Parsing and canonicalization of GMGN followed-wallet payloads."""

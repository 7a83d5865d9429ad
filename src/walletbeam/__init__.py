"""walletbeam: convert followed-wallet exports between tracking tools.

The package parses a GMGN "followings" payload, normalizes every wallet into a
canonical record, and renders the collection as a GMGN import list or an Axiom
import list. Everything runs in-process; nothing is persisted.
"""

"""Command line entry points for WalletBeam."""

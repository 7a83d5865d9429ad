"""Service layer for WalletBeam conversions."""

"""Streamlit front end for WalletBeam."""

"""Session state helpers for the converter page."""

from __future__ import annotations

from typing import Any

import streamlit as st

from walletbeam.services.wallet_list import WalletListService
from walletbeam.settings import get_settings

SETTINGS = get_settings()


def ensure_session_defaults() -> None:
    """Populate Streamlit session state with the converter defaults."""

    defaults: dict[str, Any] = {
        "wallet_service": None,
        "paste_input": "",
        "editing_address": None,
    }
    for key, value in defaults.items():
        st.session_state.setdefault(key, value)
    if st.session_state["wallet_service"] is None:
        st.session_state["wallet_service"] = WalletListService(settings=SETTINGS)


def get_service() -> WalletListService:
    ensure_session_defaults()
    return st.session_state["wallet_service"]


__all__ = ["ensure_session_defaults", "get_service"]

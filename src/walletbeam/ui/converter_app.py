"""Streamlit converter page.

Run:
    streamlit run src/walletbeam/ui/converter_app.py

Paste the GMGN "followings" API response, review and edit the wallets, then
copy or download the GMGN or Axiom import list.
"""

from __future__ import annotations

import html

import streamlit as st

from walletbeam.derivation import format_profit_ratio, format_signed_profit, generate_pixel_avatar
from walletbeam.normalization.schema import CanonicalWalletRecord
from walletbeam.services.wallet_list import EXPORT_CONTENT_TYPE, ExportFormat, SortField, WalletEdit
from walletbeam.ui.state import ensure_session_defaults, get_service

SORT_LABELS = {
    SortField.TOTAL_PROFIT: "Total profit",
    SortField.TOTAL_PROFIT_RATIO: "Profit ratio",
}


def _avatar_html(record: CanonicalWalletRecord) -> str:
    source = record.avatar_url or generate_pixel_avatar(record.address)
    fallback = generate_pixel_avatar(record.address)
    return (
        f'<img src="{html.escape(source)}" width="40" height="40" '
        f"onerror=\"this.onerror=null;this.src='{fallback}'\" "
        'style="border-radius:6px;image-rendering:pixelated" />'
    )


def _render_input() -> None:
    service = get_service()
    st.subheader("1. Paste GMGN data")
    st.text_area("GMGN followings response", key="paste_input", height=200)
    if st.button("Process", type="primary"):
        service.process(st.session_state["paste_input"])
        st.session_state["editing_address"] = None


def _render_sort_controls() -> None:
    service = get_service()
    columns = st.columns(len(SORT_LABELS))
    for column, (field, label) in zip(columns, SORT_LABELS.items()):
        marker = ""
        if service.collection.sort_field is field:
            marker = " ▲" if service.collection.sort_direction.value == "ascending" else " ▼"
        if column.button(f"{label}{marker}", key=f"sort_{field.value}"):
            service.sort_by(field)
            st.rerun()


def _render_edit_row(record: CanonicalWalletRecord) -> None:
    service = get_service()
    placeholder = f"Default: {record.twitter_display_name}" if record.twitter_display_name else "Add a note"
    annotation = st.text_input(
        "Note",
        value=record.custom_annotation or "",
        placeholder=placeholder,
        key=f"edit_note_{record.address}",
    )
    twitter = st.text_input(
        "Twitter username",
        value=record.twitter_username or "",
        key=f"edit_twitter_{record.address}",
    )
    save, cancel = st.columns(2)
    if save.button("Save", key=f"save_{record.address}"):
        service.edit(
            record.address,
            WalletEdit.from_form(record, custom_annotation=annotation, twitter_username=twitter),
        )
        st.session_state["editing_address"] = None
        st.rerun()
    if cancel.button("Cancel", key=f"cancel_{record.address}"):
        st.session_state["editing_address"] = None
        st.rerun()


def _render_wallet_row(record: CanonicalWalletRecord) -> None:
    service = get_service()
    avatar, identity, profit, ratio, actions = st.columns([1, 5, 2, 2, 2])
    avatar.markdown(_avatar_html(record), unsafe_allow_html=True)

    if st.session_state.get("editing_address") == record.address:
        with identity:
            st.caption(record.address)
            _render_edit_row(record)
    else:
        badges = " `KOL`" if record.is_kol else ""
        if record.twitter_display_name and not record.has_custom_annotation:
            badges += " _[twitter]_"
        identity.markdown(f"**{record.display_name}**{badges}")
        identity.caption(record.address)

    if record.total_profit is not None:
        profit.markdown(format_signed_profit(record.total_profit))
    if record.total_profit_ratio is not None:
        ratio.markdown(format_profit_ratio(record.total_profit_ratio))

    edit_col, delete_col = actions.columns(2)
    if edit_col.button("Edit", key=f"edit_{record.address}"):
        st.session_state["editing_address"] = record.address
        st.rerun()
    if delete_col.button("Delete", key=f"delete_{record.address}"):
        service.delete(record.address)
        st.rerun()


def _render_exports() -> None:
    service = get_service()
    st.subheader("3. Export")
    formats = list(ExportFormat)
    selected = st.radio(
        "Preview format",
        formats,
        index=formats.index(service.preview_format),
        format_func=lambda fmt: fmt.label,
        horizontal=True,
    )
    if selected is not service.preview_format:
        service.select_format(selected)
    st.code(service.preview, language="json" if service.preview_format is ExportFormat.AXIOM else "text")

    columns = st.columns(2 * len(formats))
    for index, fmt in enumerate(formats):
        if columns[2 * index].button(f"Copy {fmt.label}", key=f"copy_{fmt.value}"):
            service.copy(fmt)
            st.rerun()
        columns[2 * index + 1].download_button(
            f"Download {fmt.label}",
            data=service.render(fmt),
            file_name=fmt.filename,
            mime=EXPORT_CONTENT_TYPE,
            key=f"download_{fmt.value}",
        )


def _start_over() -> None:
    get_service().reset()
    st.session_state["paste_input"] = ""
    st.session_state["editing_address"] = None


def main() -> None:
    st.set_page_config(page_title="WalletBeam", page_icon="👻", layout="wide")
    ensure_session_defaults()
    service = get_service()

    st.title("WalletBeam")
    st.caption("Move GMGN followed wallets into GMGN or Axiom import lists.")
    _render_input()

    if service.status:
        if "failed" in service.status:
            st.error(service.status)
        else:
            st.success(service.status)

    if not len(service.collection):
        st.info("Process GMGN data to see your wallets here.")
        return

    st.subheader(f"2. Review wallets ({len(service.collection)})")
    _render_sort_controls()
    for record in service.records:
        _render_wallet_row(record)

    _render_exports()

    st.button("Start over", on_click=_start_over)


main()

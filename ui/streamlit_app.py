# Role: Streamlit converter page.
# - Backend is authoritative (catalog + conversion + state snapshot).
# - This page only renders inputs, the busy spinner, the result line and the last error.

from __future__ import annotations

import os
import uuid
from typing import Any, Dict, List, Optional

import requests
import streamlit as st

BACKEND_URL = os.getenv("BACKEND_URL", "http://127.0.0.1:8000").rstrip("/")


# ----------------------------
# Session helpers
# ----------------------------
def ensure_session() -> None:
    if "session_id" not in st.session_state:
        st.session_state["session_id"] = str(uuid.uuid4())
    if "busy" not in st.session_state:
        st.session_state["busy"] = False
    if "currencies" not in st.session_state:
        st.session_state["currencies"] = None
    if "base" not in st.session_state:
        st.session_state["base"] = "EUR"
    if "target" not in st.session_state:
        st.session_state["target"] = "USD"
    if "last" not in st.session_state:
        st.session_state["last"] = None


# ----------------------------
# Backend calls
# ----------------------------
def fetch_currencies(session_id: str) -> Optional[List[Dict[str, str]]]:
    try:
        r = requests.get(f"{BACKEND_URL}/currencies", params={"session_id": session_id}, timeout=30)
        if r.status_code != 200:
            return None
        return r.json()
    except requests.RequestException:
        return None


def send_conversion(session_id: str, amount: str, base: str, target: str) -> Dict[str, Any]:
    resp = requests.post(
        f"{BACKEND_URL}/convert",
        json={"session_id": session_id, "amount": amount, "base_currency": base, "target_currency": target},
        timeout=45,
    )
    resp.raise_for_status()
    return resp.json()


# ----------------------------
# Widgets
# ----------------------------
def _swap() -> None:
    st.session_state["base"], st.session_state["target"] = st.session_state["target"], st.session_state["base"]


def render_pickers(currencies: List[Dict[str, str]]) -> None:
    codes = [c["code"] for c in currencies]
    labels = {c["code"]: c["display_name"] for c in currencies}

    # Keep the defaults selectable even if the catalog is missing them.
    for key in ("base", "target"):
        if st.session_state[key] not in labels:
            codes.append(st.session_state[key])
            labels[st.session_state[key]] = st.session_state[key]

    st.selectbox("Base currency", codes, key="base", format_func=lambda c: labels.get(c, c))
    st.selectbox("Target currency", codes, key="target", format_func=lambda c: labels.get(c, c))
    st.button("⇄ Swap", on_click=_swap, disabled=st.session_state["busy"])


def render_result() -> None:
    last = st.session_state.get("last")
    if not last:
        return
    if last.get("ok"):
        st.success(
            f"{last['amount']} {last['base_currency']} = {last['converted_amount']} {last['target_currency']}"
        )
    elif last.get("error_message"):
        st.error(last["error_message"])


# ----------------------------
# Main
# ----------------------------
def main() -> None:
    st.set_page_config(page_title="Currency Converter", page_icon="💱")
    st.title("💱 Currency Converter")

    ensure_session()

    if st.session_state["currencies"] is None:
        st.session_state["currencies"] = fetch_currencies(st.session_state["session_id"])

    currencies = st.session_state["currencies"]
    if currencies is None:
        st.error("Unable to fetch currency data. Please try again later.")
        currencies = []

    amount = st.text_input("Amount", placeholder="Enter amount")
    render_pickers(currencies)

    if not st.button("Convert", type="primary", disabled=st.session_state["busy"]):
        render_result()
        return

    st.session_state["busy"] = True
    try:
        with st.spinner("Converting..."):
            st.session_state["last"] = send_conversion(
                st.session_state["session_id"], amount, st.session_state["base"], st.session_state["target"]
            )
    except requests.RequestException:
        st.session_state["last"] = {
            "ok": False,
            "error_message": f"I couldn't reach the backend. Make sure the API is running on {BACKEND_URL}.",
        }
    finally:
        st.session_state["busy"] = False

    render_result()


if __name__ == "__main__":
    main()

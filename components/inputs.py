"""Streamlit input components for the installment calculator form."""

import streamlit as st

from src.installment import MONTH_NAMES
from src.state import CalculatorState

STATE_KEY = "calculator_state"
PRINCIPAL_KEY = "calculator_principal"
DOWN_PAYMENT_KEY = "calculator_down_payment"
START_MONTH_KEY = "calculator_start_month"


def get_calculator_state(current_month: int) -> CalculatorState:
    """Return the session's calculator state, creating it on first render.

    Args:
        current_month: Zero-based month to start from when the page is first
            opened. Ignored on later reruns of the same session.
    """
    if STATE_KEY not in st.session_state:
        state = CalculatorState.at_mount(current_month)
        st.session_state[STATE_KEY] = state
        _sync_widgets(state)

    return st.session_state[STATE_KEY]


def _sync_widgets(state: CalculatorState) -> None:
    """Push state values into the widgets' session keys."""
    st.session_state[PRINCIPAL_KEY] = state.principal_text
    st.session_state[DOWN_PAYMENT_KEY] = state.down_payment_text
    st.session_state[START_MONTH_KEY] = state.start_month


def _on_principal_change() -> None:
    state = st.session_state[STATE_KEY]
    state.set_principal_text(st.session_state[PRINCIPAL_KEY])
    # Show the canonical text in place of what was typed
    st.session_state[PRINCIPAL_KEY] = state.principal_text


def _on_down_payment_change() -> None:
    state = st.session_state[STATE_KEY]
    state.set_down_payment_text(st.session_state[DOWN_PAYMENT_KEY])
    st.session_state[DOWN_PAYMENT_KEY] = state.down_payment_text


def _on_start_month_change() -> None:
    st.session_state[STATE_KEY].select_start_month(st.session_state[START_MONTH_KEY])


def _on_reset() -> None:
    state = st.session_state[STATE_KEY]
    state.reset()
    _sync_widgets(state)


def installment_input_form() -> None:
    """Create the price, down payment and start month inputs plus reset button.

    Widget values live in st.session_state and are written back to the
    CalculatorState from their callbacks, so the state is up to date
    before the rest of the page renders.
    """
    col1, col2 = st.columns(2)

    with col1:
        st.text_input(
            "Harga Barang",
            key=PRINCIPAL_KEY,
            placeholder="Masukkan harga barang",
            on_change=_on_principal_change,
        )

    with col2:
        st.text_input(
            "Uang Muka (Opsional)",
            key=DOWN_PAYMENT_KEY,
            placeholder="Masukkan uang muka",
            on_change=_on_down_payment_change,
        )

    col1, col2 = st.columns([1, 2], vertical_alignment="bottom")

    with col1:
        st.selectbox(
            "Mulai Bayar",
            options=list(range(len(MONTH_NAMES))),
            format_func=lambda index: MONTH_NAMES[index],
            key=START_MONTH_KEY,
            on_change=_on_start_month_change,
        )

    with col2:
        st.button(
            "Ulangi",
            key="calculator_reset",
            help="Reset calculator",
            on_click=_on_reset,
        )

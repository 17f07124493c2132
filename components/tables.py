"""Streamlit summary and table display components."""


import pandas as pd
import streamlit as st

from src.currency import format_amount
from src.installment import MARGIN_RATE, InstallmentPlan


def display_plan_summary(plan: InstallmentPlan) -> None:
    """Display the headline figures of an installment plan."""
    st.subheader("Rincian cicilan")

    col1, col2 = st.columns(2)

    with col1:
        st.metric("Harga Barang", format_amount(plan.principal))
        st.metric("Uang Muka", format_amount(plan.down_payment))
        st.metric(f"Laba ({MARGIN_RATE:.0%})", format_amount(plan.margin_amount))

    with col2:
        st.metric("Cicilan Per Bulan", format_amount(plan.monthly_installment))
        st.metric("Total Pembayaran", format_amount(plan.grand_total))


def format_schedule_table(schedule: pd.DataFrame) -> pd.DataFrame:
    """Rename and format schedule columns for display.

    Args:
        schedule: DataFrame from schedule_to_dataframe

    Returns:
        DataFrame with Bulan, Cicilan and Sisa Cicilan columns as text
    """
    display_df = schedule.rename(columns={
        'month': 'Bulan',
        'amount': 'Cicilan',
        'balance': 'Sisa Cicilan',
    })

    display_df = display_df[['Bulan', 'Cicilan', 'Sisa Cicilan']].copy()

    display_df['Cicilan'] = display_df['Cicilan'].apply(format_amount)
    # never show a negative balance
    display_df['Sisa Cicilan'] = display_df['Sisa Cicilan'].clip(lower=0).apply(format_amount)

    return display_df


def display_schedule_table(schedule: pd.DataFrame) -> None:
    """Display the month-by-month installment table."""
    st.dataframe(
        format_schedule_table(schedule),
        use_container_width=True,
        hide_index=True,
    )

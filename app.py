"""Installment Calculator - Streamlit Application."""


from datetime import date

import streamlit as st

from components.charts import create_balance_chart
from components.inputs import get_calculator_state, installment_input_form
from components.tables import display_plan_summary, display_schedule_table
from src.installment import TERM_MONTHS, schedule_to_dataframe

# Page configuration
st.set_page_config(
    page_title="Kalkulator Cicilan",
    page_icon="🧮",
    layout="centered",
)

# Custom CSS
st.markdown("""
<style>
    .stMetric {
        background-color: #f0f2f6;
        padding: 10px;
        border-radius: 5px;
    }
    .stMetric label, .stMetric [data-testid="stMetricValue"] {
        color: #262730 !important;
    }
</style>
""", unsafe_allow_html=True)


def installment_calculator_page(current_month: int):
    """Installment form, summary and monthly schedule."""
    st.title("Kalkulator Cicilan")

    st.markdown(f"""
    Hitung cicilan {TERM_MONTHS} bulan dengan laba tetap dari harga barang dan uang muka.
    """)

    state = get_calculator_state(current_month)
    installment_input_form()

    plan = state.plan
    if not plan.has_schedule:
        return

    st.divider()
    display_plan_summary(plan)

    schedule = schedule_to_dataframe(plan.schedule())

    tab1, tab2 = st.tabs(["Tabel Cicilan", "Grafik Sisa Cicilan"])

    with tab1:
        display_schedule_table(schedule)

    with tab2:
        fig = create_balance_chart(schedule)
        st.plotly_chart(fig, use_container_width=True)

    # Download button
    csv = schedule.to_csv(index=False)
    st.download_button(
        "Unduh Rincian (CSV)",
        csv,
        "rincian_cicilan.csv",
        "text/csv",
    )


def main():
    """Main application entry point."""
    # Month the page was opened in; reset returns here
    installment_calculator_page(current_month=date.today().month - 1)


if __name__ == "__main__":
    main()

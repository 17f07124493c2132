"""Plotly chart components for installment visualization."""

import plotly.graph_objects as go
import pandas as pd


def create_balance_chart(schedule: pd.DataFrame) -> go.Figure:
    """Create bar chart of installments with the remaining balance overlaid."""
    fig = go.Figure()

    fig.add_trace(go.Bar(
        x=schedule['month'],
        y=schedule['amount'],
        name='Cicilan',
        marker_color='#2ca02c',
        hovertemplate='%{x}<br>Cicilan: Rp %{y:,.0f}<extra></extra>',
    ))

    fig.add_trace(go.Scatter(
        x=schedule['month'],
        y=schedule['balance'],
        name='Sisa Cicilan',
        mode='lines+markers',
        line=dict(color='#1f77b4', width=2),
        hovertemplate='%{x}<br>Sisa Cicilan: Rp %{y:,.0f}<extra></extra>',
    ))

    fig.update_layout(
        title='Sisa Cicilan per Bulan',
        xaxis_title='Bulan',
        yaxis_title='Jumlah (Rp)',
        hovermode='x unified',
        legend=dict(
            yanchor='top',
            y=0.99,
            xanchor='right',
            x=0.99,
        ),
        # keep chronological order even when the months wrap past December
        xaxis=dict(type='category', categoryorder='array', categoryarray=list(schedule['month'])),
        yaxis=dict(tickformat=',.0f'),
    )

    return fig

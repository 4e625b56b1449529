"""Plotly chart builders for repayment aggregations."""

from __future__ import annotations

import pandas as pd
import plotly.express as px
import plotly.graph_objects as go
import streamlit as st

from src.dashboard.components.formatting import apply_plot_layout_hygiene, plot_axis_number_format

TYPE_COLOR_MAP = {
    'INTEREST': '#3b82f6',
    'PRINCIPAL+INTEREST': '#10b981',
}


def build_monthly_totals_figure(monthly_df: pd.DataFrame) -> go.Figure:
    """Bar chart of monthly totals; x order follows the frame's chronological order."""
    fig = px.bar(
        monthly_df,
        x='label',
        y='amount',
        title='Monthly Repayment Totals',
        labels={'label': 'Month', 'amount': 'Amount (before TDS)'},
    )
    fig.update_xaxes(type='category', categoryorder='array', categoryarray=list(monthly_df['label']))
    return plot_axis_number_format(fig, y_axes=['yaxis'])


def build_distribution_figure(distribution_df: pd.DataFrame, title: str) -> go.Figure:
    """Donut chart of a name/amount distribution."""
    fig = px.pie(
        distribution_df,
        names='name',
        values='amount',
        title=title,
        hole=0.4,
        color='name',
        color_discrete_map=TYPE_COLOR_MAP,
    )
    fig.update_traces(textinfo='percent+label')
    return apply_plot_layout_hygiene(fig)


def render_repayment_charts(
    monthly_df: pd.DataFrame,
    type_df: pd.DataFrame,
    product_df: pd.DataFrame,
) -> None:
    """Render monthly totals and the two distributions."""
    st.subheader('Repayment Analytics')
    if monthly_df.empty and type_df.empty and product_df.empty:
        st.info('No repayment data available for plotting.')
        return

    if monthly_df.empty:
        st.caption('No dated repayments to chart by month.')
    else:
        st.plotly_chart(build_monthly_totals_figure(monthly_df), width='stretch', key='chart_monthly')

    c1, c2 = st.columns(2)
    with c1:
        if not type_df.empty:
            st.plotly_chart(
                build_distribution_figure(type_df, 'Repayment Type Distribution'),
                width='stretch',
                key='chart_type_distribution',
            )
    with c2:
        if not product_df.empty:
            st.plotly_chart(
                build_distribution_figure(product_df, 'Product Distribution'),
                width='stretch',
                key='chart_product_distribution',
            )

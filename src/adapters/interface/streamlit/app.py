"""Streamlit dashboard entry point."""

from collections.abc import Sequence
from datetime import date
from decimal import Decimal
import os

import streamlit as st
import altair as alt

from src.application.use_cases.get_cashflow_overview import (
    GetCashflowOverviewUseCase,
)
from src.application.use_cases.get_projections import GetProjectionsUseCase
from src.domain.errors import CashflowError
from src.domain.models import (
    AggregationResult,
    CategoryTotal,
    ExplicitPeriod,
    MonthlyBucket,
    PeriodPreset,
    ProjectionResult,
    RecentEntry,
    TenantScope,
)
from src.infrastructure.container import (
    build_ledger_repository,
    build_settings,
)
from src.infrastructure.logging.logger import get_usage_logger

PERIOD_OPTIONS = {
    "Last 30 days": PeriodPreset.LAST_30_DAYS,
    "Last 3 months": PeriodPreset.LAST_3_MONTHS,
    "Last 6 months": PeriodPreset.LAST_6_MONTHS,
    "Last 12 months": PeriodPreset.LAST_12_MONTHS,
}
CUSTOM_PERIOD = "Custom"
RECENT_KIND_LABELS = {"inflow": "Inflow", "outflow": "Outflow"}


def _fetch_overview(
    tenant: str,
    period: str | None,
    start_date: date | None,
    end_date: date | None,
    today: date,
) -> AggregationResult:
    """Fetch the cash-flow overview for the tenant and period."""
    settings = build_settings()
    use_case = GetCashflowOverviewUseCase(
        build_ledger_repository(settings=settings),
        trailing_months=settings.trailing_months,
        category_limit=settings.top_categories,
    )
    selector = (
        ExplicitPeriod(start=start_date, end=end_date)
        if period is None
        else period
    )
    return use_case.execute(TenantScope.parse(tenant), selector, today)


@st.cache_data(show_spinner=False)
def _load_overview(
    tenant: str,
    period: str | None,
    start_date: date | None,
    end_date: date | None,
    today: date,
    schema_version: int = 1,
) -> AggregationResult:
    """Cached wrapper around _fetch_overview."""
    _ = schema_version
    return _fetch_overview(tenant, period, start_date, end_date, today)


def _fetch_projections(tenant: str, today: date) -> ProjectionResult:
    """Fetch the projections of both ledgers as of today."""
    use_case = GetProjectionsUseCase(build_ledger_repository())
    return use_case.execute(TenantScope.parse(tenant), today)


@st.cache_data(show_spinner=False)
def _load_projections(
    tenant: str,
    today: date,
    schema_version: int = 1,
) -> ProjectionResult:
    """Cached wrapper around _fetch_projections."""
    _ = schema_version
    return _fetch_projections(tenant, today)


def _format_amount(value: Decimal) -> str:
    """Format money values for display."""
    return f"{value:,.2f}"


def _format_delta(value: Decimal) -> str:
    """Format delta values for display."""
    sign = "+" if value >= 0 else ""
    return f"{sign}{value:,.2f}"


def _horizon_label(horizon_days: int | None) -> str:
    return "All upcoming" if horizon_days is None else f"{horizon_days} days"


def _prepare_monthly_chart_data(
    series: Sequence[MonthlyBucket],
) -> list[dict[str, str | float]]:
    """Flatten monthly buckets into one row per month and ledger."""
    data: list[dict[str, str | float]] = []
    for bucket in series:
        data.append(
            {
                "month": bucket.month.label,
                "kind": "Inflows",
                "amount": float(bucket.inflows),
                "amount_label": _format_amount(bucket.inflows),
            }
        )
        data.append(
            {
                "month": bucket.month.label,
                "kind": "Outflows",
                "amount": float(bucket.outflows),
                "amount_label": _format_amount(bucket.outflows),
            }
        )
    return data


def _prepare_donut_chart_data(
    categories: Sequence[CategoryTotal],
    max_categories: int = 6,
) -> tuple[list[dict[str, str | float]], Decimal]:
    """Prepare donut chart data with a Top-N + Other grouping.

    Args:
        categories: Outflow totals by category, largest first.
        max_categories: Maximum categories to keep before grouping into Other.

    Returns:
        Tuple with Altair-ready chart data and the total amount.
    """
    sorted_items = sorted(
        categories,
        key=lambda item: item.total,
        reverse=True,
    )
    top_items = sorted_items[:max_categories]
    other_items = sorted_items[max_categories:]
    other_total = sum(
        (item.total for item in other_items),
        start=Decimal("0"),
    )
    if other_items and other_total != 0:
        top_items = [
            *top_items,
            CategoryTotal(category="Other", total=other_total),
        ]
    total_amount = sum(
        (item.total for item in sorted_items),
        start=Decimal("0"),
    )
    data: list[dict[str, str | float]] = []
    for item in top_items:
        share = (
            (item.total / total_amount) * Decimal("100")
            if total_amount
            else Decimal("0")
        )
        data.append(
            {
                "category": item.category,
                "amount": float(item.total),
                "amount_label": _format_amount(item.total),
                "share_label": f"{share:.1f}%",
            }
        )
    return data, total_amount


def _projection_rows(result: ProjectionResult) -> list[dict[str, str]]:
    """Return one table row per horizon with both ledgers side by side."""
    rows = []
    paired = zip(result.inflows.buckets, result.outflows.buckets)
    for inflow, outflow in paired:
        rows.append(
            {
                "Horizon": _horizon_label(inflow.horizon_days),
                "Inflows": f"{_format_amount(inflow.total)} ({inflow.count})",
                "Outflows": (
                    f"{_format_amount(outflow.total)} ({outflow.count})"
                ),
                "Net": _format_delta(inflow.total - outflow.total),
            }
        )
    return rows


def _recent_rows(entries: Sequence[RecentEntry]) -> list[dict[str, str]]:
    """Return table rows for the recent entries list."""
    return [
        {
            "Date": entry.due_date.isoformat(),
            "Type": RECENT_KIND_LABELS[entry.kind.value],
            "Description": entry.description or "—",
            "Category": entry.category,
            "Amount": _format_amount(entry.amount),
        }
        for entry in entries
    ]


def _render_monthly_chart(series: Sequence[MonthlyBucket]) -> None:
    """Render grouped bars of inflows and outflows per month."""
    st.subheader("Monthly cash flow")
    data = _prepare_monthly_chart_data(series)
    chart = alt.Chart(alt.Data(values=data)).mark_bar(
        cornerRadiusTopLeft=4,
        cornerRadiusTopRight=4,
    ).encode(
        x=alt.X("month:N", title=None),
        xOffset=alt.XOffset("kind:N"),
        y=alt.Y("amount:Q", title="Amount"),
        color=alt.Color(
            "kind:N",
            scale=alt.Scale(
                domain=["Inflows", "Outflows"],
                range=["#2e7d32", "#e76f51"],
            ),
            legend=alt.Legend(orient="bottom", title=None),
        ),
        tooltip=[
            alt.Tooltip("month:N"),
            alt.Tooltip("kind:N"),
            alt.Tooltip("amount_label:N"),
        ],
    ).properties(
        height=320,
    ).configure_view(
        stroke=None
    )
    st.altair_chart(chart, width="stretch")


def _render_category_chart(
    categories: Sequence[CategoryTotal],
    title: str,
    max_categories: int = 6,
    chart_size: int = 300,
    legend_columns: int = 2,
) -> None:
    """Render a donut chart of outflow totals by category.

    Args:
        categories: Outflow totals by category.
        title: Chart title to display above the donut.
        max_categories: Maximum categories before grouping into Other.
        chart_size: Width/height for the chart canvas.
        legend_columns: Column count of the legend.
    """
    st.subheader(title)
    if not categories:
        st.info("No outflows in the selected period.")
        return
    data, _ = _prepare_donut_chart_data(
        categories,
        max_categories=max_categories,
    )
    hover = alt.selection_point(
        name="hover",
        fields=["category"],
        on="view:mouseover",
        clear="view:mouseout",
        empty=False,
    )
    base = alt.Chart(alt.Data(values=data)).mark_arc(
        innerRadius=chart_size * 0.4,
        cornerRadius=8,
        padAngle=0.02,
        stroke="#0f1115",
        strokeWidth=2,
    ).encode(
        theta=alt.Theta("amount:Q"),
        color=alt.Color(
            "category:N",
            legend=alt.Legend(
                orient="bottom",
                title=None,
                direction="horizontal",
                columns=legend_columns,
                labelLimit=180,
            ),
        ),
        opacity=alt.condition(
            hover,
            alt.value(1.0),
            alt.value(0.25),
        ),
        order=alt.Order("amount:Q", sort="descending"),
        tooltip=[
            alt.Tooltip("category:N"),
            alt.Tooltip("amount_label:N"),
            alt.Tooltip("share_label:N"),
        ],
    )
    hover_text = alt.Chart(alt.Data(values=data)).transform_filter(
        hover
    ).mark_text(
        align="center",
        baseline="middle",
        fontSize=16,
        fontWeight="bold",
    ).encode(
        text="amount_label:N"
    )
    chart = alt.layer(base, hover_text).add_params(hover).properties(
        width=chart_size,
        height=chart_size,
    ).configure_view(
        stroke=None
    )
    st.altair_chart(chart, width="stretch")


def _render_balances(overview: AggregationResult) -> None:
    """Render the balance metrics row."""
    opening_col, inflow_col, outflow_col, closing_col = st.columns(4)
    opening_col.metric(
        "Opening balance",
        _format_amount(overview.opening_balance),
    )
    inflow_col.metric(
        "Inflows",
        _format_amount(overview.period_inflows),
        f"{overview.balance.period_inflow_count} entries",
        delta_color="off",
    )
    outflow_col.metric(
        "Outflows",
        _format_amount(overview.period_outflows),
        f"{overview.balance.period_outflow_count} entries",
        delta_color="off",
    )
    closing_col.metric(
        "Closing balance",
        _format_amount(overview.closing_balance),
        _format_delta(overview.period_net),
    )


def main() -> None:
    """Render the Streamlit app."""
    st.set_page_config(page_title="Cash Flow Dashboard", layout="wide")
    st.title("Cash Flow Dashboard")

    tenant = st.sidebar.text_input(
        "Tenant",
        value=os.getenv("DASHBOARD_TENANT", ""),
    ).strip()
    period_label = st.sidebar.selectbox(
        "Period",
        [*PERIOD_OPTIONS, CUSTOM_PERIOD],
        index=2,
    )
    today = date.today()
    start_date = end_date = None
    period = None
    if period_label == CUSTOM_PERIOD:
        start_date = st.sidebar.date_input("Start date", value=today)
        end_date = st.sidebar.date_input("End date", value=today)
    else:
        period = PERIOD_OPTIONS[period_label].value

    if not tenant:
        st.warning("Set a tenant (or 'all') to load the dashboard.")
        return

    get_usage_logger().info(
        f"Dashboard viewed tenant={tenant} period={period_label}"
    )
    try:
        overview = _load_overview(
            tenant,
            period,
            start_date,
            end_date,
            today,
        )
        projections = _load_projections(tenant, today)
    except (CashflowError, ValueError) as exc:
        st.error(str(exc))
        return

    st.caption(
        f"{overview.as_of.start.isoformat()} to "
        f"{overview.as_of.end.isoformat()}"
    )
    _render_balances(overview)

    chart_left, chart_right = st.columns(2)
    with chart_left:
        _render_monthly_chart(overview.monthly_series)
    with chart_right:
        _render_category_chart(
            overview.category_breakdown,
            "Outflows by category",
        )

    st.subheader("Projections")
    st.dataframe(
        _projection_rows(projections),
        width="stretch",
        hide_index=True,
    )
    st.subheader("Recent entries")
    if not overview.recent_entries:
        st.info("No entries in the selected period.")
        return
    st.dataframe(
        _recent_rows(overview.recent_entries),
        width="stretch",
        hide_index=True,
    )


if __name__ == "__main__":  # pragma: no cover
    main()

"""Tests for the Streamlit app module."""

from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock

from src.adapters.interface.streamlit import app
from src.domain.errors import StoreUnavailable
from src.domain.models import (
    AggregationResult,
    BalanceSummary,
    CategoryTotal,
    LedgerKind,
    MonthKey,
    MonthlyBucket,
    PeriodWindow,
    RecentEntry,
    TenantScope,
)
from src.domain.services.projections import compute_projection


def _overview() -> AggregationResult:
    return AggregationResult(
        tenant_scope=TenantScope.for_tenant("t1"),
        as_of=PeriodWindow(date(2024, 1, 1), date(2024, 1, 31)),
        balance=BalanceSummary(
            opening_balance=Decimal("100.00"),
            period_inflows=Decimal("1000.00"),
            period_outflows=Decimal("400.00"),
            period_net=Decimal("600.00"),
            closing_balance=Decimal("700.00"),
            period_inflow_count=1,
            period_outflow_count=1,
        ),
        monthly_series=[
            MonthlyBucket(
                month=MonthKey(2024, 1),
                inflows=Decimal("1000.00"),
                outflows=Decimal("400.00"),
            )
        ],
        category_breakdown=[
            CategoryTotal(category="Rent", total=Decimal("400.00"))
        ],
        recent_entries=[
            RecentEntry(
                id="out",
                kind=LedgerKind.OUTFLOW,
                due_date=date(2024, 1, 20),
                amount=Decimal("400.00"),
                description="",
                category="Rent",
            )
        ],
    )


def test_fetch_overview_invokes_use_case(monkeypatch):
    """_fetch_overview should wire settings, repository and use case."""
    captured = {}

    class _FakeUseCase:
        def __init__(self, repository, trailing_months, category_limit):
            captured["init"] = (repository, trailing_months, category_limit)

        def execute(self, tenant_scope, selector, today):
            captured["execute"] = (tenant_scope, selector, today)
            return "overview"

    settings = MagicMock(trailing_months=3, top_categories=4)
    monkeypatch.setattr(app, "build_settings", lambda: settings)
    monkeypatch.setattr(
        app,
        "build_ledger_repository",
        lambda settings=None: "repository",
    )
    monkeypatch.setattr(app, "GetCashflowOverviewUseCase", _FakeUseCase)

    result = app._fetch_overview(
        "t1",
        None,
        date(2024, 1, 1),
        date(2024, 1, 31),
        date(2024, 2, 1),
    )

    assert result == "overview"
    assert captured["init"] == ("repository", 3, 4)
    scope, selector, today = captured["execute"]
    assert scope == TenantScope.for_tenant("t1")
    assert selector.start == date(2024, 1, 1)
    assert today == date(2024, 2, 1)


def test_load_projections_uses_fetch(monkeypatch):
    """The cached loader should delegate to _fetch_projections."""
    monkeypatch.setattr(
        app,
        "_fetch_projections",
        lambda tenant, today: (tenant, today),
    )

    assert app._load_projections("all", date(2024, 1, 1)) == (
        "all",
        date(2024, 1, 1),
    )


def test_prepare_monthly_chart_data_flattens_buckets():
    """Each month yields one row per ledger."""
    data = app._prepare_monthly_chart_data(_overview().monthly_series)

    assert data == [
        {
            "month": "2024-01",
            "kind": "Inflows",
            "amount": 1000.0,
            "amount_label": "1,000.00",
        },
        {
            "month": "2024-01",
            "kind": "Outflows",
            "amount": 400.0,
            "amount_label": "400.00",
        },
    ]


def test_prepare_donut_chart_data_groups_other():
    """Categories beyond the limit are grouped into Other."""
    categories = [
        CategoryTotal(category="Rent", total=Decimal("500")),
        CategoryTotal(category="Food", total=Decimal("300")),
        CategoryTotal(category="Fuel", total=Decimal("150")),
        CategoryTotal(category="Gym", total=Decimal("50")),
    ]

    data, total = app._prepare_donut_chart_data(categories, max_categories=2)

    assert total == Decimal("1000")
    assert [row["category"] for row in data] == ["Rent", "Food", "Other"]
    assert data[-1]["amount"] == 200.0
    assert data[0]["share_label"] == "50.0%"


def test_projection_rows_pair_ledgers():
    """Projection rows show both ledgers for each horizon."""
    projection = compute_projection([], [], date(2024, 1, 1))

    rows = app._projection_rows(projection)

    assert [row["Horizon"] for row in rows] == [
        "30 days",
        "60 days",
        "90 days",
        "All upcoming",
    ]
    assert rows[0]["Net"] == "+0.00"


def test_recent_rows_format_entries():
    """Recent entries are rendered with labels and amounts."""
    rows = app._recent_rows(_overview().recent_entries)

    assert rows == [
        {
            "Date": "2024-01-20",
            "Type": "Outflow",
            "Description": "—",
            "Category": "Rent",
            "Amount": "400.00",
        }
    ]


class _FakeColumn:
    def __init__(self, owner) -> None:
        self._owner = owner

    def metric(self, label, value, delta=None, **kwargs):
        self._owner.metrics.append((label, value, delta))

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        return False


class _FakeSidebar:
    def __init__(self, tenant: str, period: str) -> None:
        self._tenant = tenant
        self._period = period

    def text_input(self, label, value=""):
        return self._tenant

    def selectbox(self, label, options, index=0):
        return self._period

    def date_input(self, label, value=None):
        return value


class _FakeStreamlit:
    def __init__(self, tenant: str = "t1", period: str = "Last 6 months"):
        self.sidebar = _FakeSidebar(tenant, period)
        self.metrics: list[tuple] = []
        self.warnings: list[str] = []
        self.errors: list[str] = []
        self.dataframes: list = []
        self.charts: list = []

    def set_page_config(self, **kwargs):
        self.config_kwargs = kwargs

    def title(self, text: str):
        self.title_text = text

    def caption(self, text: str):
        self.caption_text = text

    def subheader(self, text: str):
        pass

    def info(self, text: str):
        pass

    def warning(self, text: str):
        self.warnings.append(text)

    def error(self, text: str):
        self.errors.append(text)

    def columns(self, count: int):
        return [_FakeColumn(self) for _ in range(count)]

    def dataframe(self, data, **kwargs):
        self.dataframes.append((data, kwargs))

    def altair_chart(self, chart, **kwargs):
        self.charts.append(chart)


def test_main_renders_dashboard(monkeypatch):
    """main should render metrics, charts and tables."""
    fake_st = _FakeStreamlit()
    monkeypatch.setattr(app, "st", fake_st)
    monkeypatch.setattr(app, "get_usage_logger", lambda: MagicMock())
    monkeypatch.setattr(
        app,
        "_load_overview",
        lambda *args, **kwargs: _overview(),
    )
    monkeypatch.setattr(
        app,
        "_load_projections",
        lambda *args, **kwargs: compute_projection([], [], date(2024, 1, 1)),
    )

    app.main()

    assert fake_st.title_text == "Cash Flow Dashboard"
    assert fake_st.errors == []
    assert ("Closing balance", "700.00", "+600.00") in fake_st.metrics
    assert len(fake_st.charts) == 2
    projection_rows, kwargs = fake_st.dataframes[0]
    assert len(projection_rows) == 4
    assert kwargs["hide_index"] is True
    assert fake_st.dataframes[1][0][0]["Category"] == "Rent"


def test_main_warns_without_tenant(monkeypatch):
    """main should ask for a tenant before loading data."""
    fake_st = _FakeStreamlit(tenant="")
    monkeypatch.setattr(app, "st", fake_st)
    loader = MagicMock()
    monkeypatch.setattr(app, "_load_overview", loader)

    app.main()

    assert fake_st.warnings
    loader.assert_not_called()


def test_main_reports_query_errors(monkeypatch):
    """Store failures are shown as errors."""
    def _failing(*args, **kwargs):
        raise StoreUnavailable("ledger offline")

    fake_st = _FakeStreamlit()
    monkeypatch.setattr(app, "st", fake_st)
    monkeypatch.setattr(app, "get_usage_logger", lambda: MagicMock())
    monkeypatch.setattr(app, "_load_overview", _failing)

    app.main()

    assert fake_st.errors == ["ledger offline"]
    assert fake_st.metrics == []

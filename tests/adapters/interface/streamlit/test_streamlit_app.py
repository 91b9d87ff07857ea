"""Tests for the Streamlit app module."""

from datetime import date
from decimal import Decimal
from types import SimpleNamespace

from finsight.adapters.interface.streamlit import app
from finsight.domain.models import (
    Category,
    CategorySpending,
    LoanPortfolio,
    SavingsGoal,
    SavingsProgress,
    Transaction,
)
from finsight.infrastructure.settings import FinSightSettings


def test_fetch_overview_invokes_use_case(monkeypatch):
    """_fetch_overview should wire both repositories into the use case."""
    captured = {}

    class _FakeUseCase:
        def __init__(self, transaction_repository, planning_repository):
            captured["repos"] = (transaction_repository, planning_repository)

        def execute(self, user_id, year, month):
            captured["args"] = (user_id, year, month)
            return "overview"

    monkeypatch.setattr(app, "build_transaction_repository", lambda: "tx")
    monkeypatch.setattr(app, "build_planning_repository", lambda: "plan")
    monkeypatch.setattr(app, "GetMonthlyOverviewUseCase", _FakeUseCase)

    result = app._fetch_overview("u1", 2024, 5)

    assert result == "overview"
    assert captured == {"repos": ("tx", "plan"), "args": ("u1", 2024, 5)}


def test_load_transactions_uses_fetch(monkeypatch):
    """The cached loader should delegate to _fetch_transactions."""
    monkeypatch.setattr(app, "_fetch_transactions", lambda user_id: [user_id])

    assert app._load_transactions("cached-user") == ["cached-user"]


def _spending(name: str, amount: str, percentage: str) -> CategorySpending:
    return CategorySpending(
        category=Category(id=name, user_id="u1", name=name, color="#111111"),
        amount=Decimal(amount),
        percentage=Decimal(percentage),
    )


def test_prepare_donut_chart_data_groups_tail_into_other():
    spending = [
        _spending("Rent", "500", "50"),
        _spending("Food", "300", "30"),
        _spending("Fun", "150", "15"),
        _spending("Misc", "50", "5"),
    ]

    rows = app._prepare_donut_chart_data(spending, "USD", max_categories=2)

    assert [row["category"] for row in rows] == ["Rent", "Food", "Other"]
    assert rows[0]["amount_label"] == "$500.00"
    assert rows[0]["share_label"] == "50.0%"
    assert rows[2]["amount"] == 200.0
    assert rows[2]["share_label"] == "20.0%"
    assert rows[2]["color"] == "#6b7280"


def test_format_helpers():
    assert app._format_currency(Decimal("1234.5"), "INR") == "₹1,234.50"
    assert app._format_currency(Decimal("3"), "CHF") == "CHF 3.00"
    assert app._format_change(Decimal("12.345")) == "+12.3% vs last"
    assert app._format_change(Decimal("-4")) == "-4.0% vs last"


class _FakeColumn:
    def __init__(self) -> None:
        self.metrics: list[tuple] = []

    def __enter__(self):
        return self

    def __exit__(self, *_exc):
        return False

    def metric(self, label, value, delta=None, **_kwargs):
        self.metrics.append((label, value, delta))


class _FakeSidebar:
    def __init__(self, page: str) -> None:
        self.page = page

    def selectbox(self, label, options, **_kwargs):
        return self.page


class _FakeStreamlit:
    def __init__(self, page: str = "Planning") -> None:
        self.config_called = False
        self.title_text = None
        self.warnings: list[str] = []
        self.downloads: list[dict] = []
        self.progress_calls: list[tuple] = []
        self.created_columns: list[_FakeColumn] = []
        self.sidebar = _FakeSidebar(page)

    def set_page_config(self, **kwargs):
        self.config_called = True

    def title(self, text: str):
        self.title_text = text

    def warning(self, text: str):
        self.warnings.append(text)

    def columns(self, count: int):
        columns = [_FakeColumn() for _ in range(count)]
        self.created_columns.extend(columns)
        return columns

    def progress(self, value, text=None):
        self.progress_calls.append((value, text))

    def download_button(self, label, data, file_name, mime):
        self.downloads.append(
            {"label": label, "data": data, "file_name": file_name, "mime": mime}
        )


def test_download_sink_renders_button(monkeypatch):
    fake_st = _FakeStreamlit()
    monkeypatch.setattr(app, "st", fake_st)

    app.StreamlitDownloadSink("Export CSV").deliver(
        "Date\n2024-01-01",
        "text/csv;charset=utf-8;",
        "transactions-2024-01-01.csv",
    )

    assert fake_st.downloads == [
        {
            "label": "Export CSV",
            "data": b"Date\n2024-01-01",
            "file_name": "transactions-2024-01-01.csv",
            "mime": "text/csv;charset=utf-8;",
        }
    ]


def test_main_warns_without_user(monkeypatch):
    """main should ask for a user before loading data."""
    fake_st = _FakeStreamlit()
    monkeypatch.setattr(app, "st", fake_st)
    monkeypatch.setattr(
        app,
        "FinSightSettings",
        SimpleNamespace(from_env=lambda: FinSightSettings()),
    )

    app.main()

    assert fake_st.config_called
    assert fake_st.title_text == "FinSight"
    assert fake_st.warnings == ["Set FINSIGHT_USER_ID to load your data."]


def test_main_renders_planning_page(monkeypatch):
    """The planning page shows EMI, debt, savings and goal progress."""
    fake_st = _FakeStreamlit(page="Planning")
    planning = SimpleNamespace(
        portfolio=LoanPortfolio(
            total_emi=Decimal("250"),
            total_debt=Decimal("4000"),
            loan_count=1,
            credit_card_count=0,
        ),
        progress=SavingsProgress(
            total_saved=Decimal("600"),
            total_target=Decimal("800"),
            completed_count=0,
            goal_count=1,
            overall_progress=Decimal("75"),
        ),
        goals=[
            SavingsGoal(
                id="g1",
                user_id="u1",
                name="Laptop",
                target_amount=Decimal("800"),
                current_amount=Decimal("600"),
                icon="laptop",
            )
        ],
    )
    monkeypatch.setattr(app, "st", fake_st)
    monkeypatch.setattr(
        app,
        "FinSightSettings",
        SimpleNamespace(
            from_env=lambda: FinSightSettings(currency="EUR", user_id="u1")
        ),
    )
    monkeypatch.setattr(app, "_fetch_planning", lambda user_id: planning)

    app.main()

    metrics = [m for column in fake_st.created_columns for m in column.metrics]
    assert metrics == [
        ("Monthly EMI", "€250.00", None),
        ("Total Debt", "€4,000.00", None),
        ("Total Saved", "€600.00", "75% of target"),
    ]
    assert fake_st.progress_calls[0][0] == 0.75
    assert fake_st.progress_calls[0][1].endswith("Laptop")
    assert fake_st.warnings == []


def test_export_buttons_use_filtered_rows_without_reloading(monkeypatch):
    """Downloads are built from the rows on screen, not a fresh query."""
    fake_st = _FakeStreamlit()
    monkeypatch.setattr(app, "st", fake_st)

    def _no_repository():
        raise AssertionError("export must not query the repository")

    monkeypatch.setattr(app, "build_transaction_repository", _no_repository)
    filtered = [
        Transaction(
            id="t1",
            user_id="u1",
            amount=Decimal("42.50"),
            kind="expense",
            date=date(2024, 5, 6),
            description="Groceries",
        )
    ]

    app._render_export_buttons(filtered)

    assert [d["label"] for d in fake_st.downloads] == [
        "Export CSV",
        "Export Excel",
    ]
    csv_download, xls_download = fake_st.downloads
    assert csv_download["mime"] == "text/csv;charset=utf-8;"
    assert csv_download["file_name"].endswith(".csv")
    assert csv_download["data"].decode("utf-8").splitlines()[1] == (
        "2024-05-06,expense,Uncategorized,42.5,Groceries,No,"
    )
    assert xls_download["mime"] == "application/vnd.ms-excel"
    assert b"Groceries" in xls_download["data"]


def test_export_buttons_skip_empty_selection(monkeypatch):
    fake_st = _FakeStreamlit()
    monkeypatch.setattr(app, "st", fake_st)

    app._render_export_buttons([])

    assert fake_st.downloads == []

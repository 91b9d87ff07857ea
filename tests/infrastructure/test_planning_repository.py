"""Tests for the SQLAlchemy planning and category repositories."""

from datetime import date
from decimal import Decimal
from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest
from sqlalchemy import create_engine, text
from sqlalchemy.exc import DBAPIError

from finsight.domain.models import SavingsGoal
from finsight.infrastructure.categories_repository import (
    SqlAlchemyCategoryRepository,
)
from finsight.infrastructure.planning_repository import (
    SqlAlchemyPlanningRepository,
)


def _db_port(conn: MagicMock) -> MagicMock:
    engine = MagicMock()
    engine.connect.return_value.__enter__.return_value = conn
    engine.begin.return_value.__enter__.return_value = conn
    db_port = MagicMock()
    db_port.get_engine.return_value = engine
    return db_port


def test_fetch_profile_defaults_when_missing() -> None:
    conn = MagicMock()
    conn.execute.return_value.first.return_value = None
    repository = SqlAlchemyPlanningRepository(_db_port(conn))

    profile = repository.fetch_profile("u1")

    assert profile.user_id == "u1"
    assert profile.currency == "INR"
    assert profile.low_fund_threshold == Decimal("100")


def test_fetch_profile_maps_row() -> None:
    conn = MagicMock()
    conn.execute.return_value.first.return_value = SimpleNamespace(
        user_id="u1",
        full_name="Ada",
        currency="EUR",
        monthly_budget=1500,
        low_fund_threshold=None,
    )
    repository = SqlAlchemyPlanningRepository(_db_port(conn))

    profile = repository.fetch_profile("u1")

    assert profile.full_name == "Ada"
    assert profile.monthly_budget == Decimal("1500")
    assert profile.low_fund_threshold == Decimal("100")


def test_fetch_monthly_income_returns_none_without_row() -> None:
    conn = MagicMock()
    conn.execute.return_value.first.return_value = None
    repository = SqlAlchemyPlanningRepository(_db_port(conn))

    assert repository.fetch_monthly_income("u1", 2024, 3) is None
    _, params = conn.execute.call_args.args
    assert params == {"user_id": "u1", "year": 2024, "month": 3}


def test_save_monthly_income_runs_in_transaction() -> None:
    conn = MagicMock()
    db_port = _db_port(conn)
    repository = SqlAlchemyPlanningRepository(db_port)

    repository.save_monthly_income("u1", 2024, 3, Decimal("2000"))

    db_port.get_engine.return_value.begin.assert_called_once()
    query, params = conn.execute.call_args.args
    assert "ON CONFLICT (user_id, month, year)" in str(query)
    assert params["amount"] == Decimal("2000")


def test_fetch_loan_raises_when_missing() -> None:
    conn = MagicMock()
    conn.execute.return_value.first.return_value = None
    repository = SqlAlchemyPlanningRepository(_db_port(conn))

    with pytest.raises(LookupError, match="Missing loan"):
        repository.fetch_loan("u1", "l1")


def test_fetch_loans_maps_rows() -> None:
    conn = MagicMock()
    conn.execute.return_value.all.return_value = [
        SimpleNamespace(
            id=5,
            user_id="u1",
            name="Visa",
            total_amount=2000,
            monthly_emi=100,
            remaining_balance="850.25",
            loan_type="credit_card",
            is_active=True,
            start_date=date(2023, 1, 1),
        )
    ]
    repository = SqlAlchemyPlanningRepository(_db_port(conn))

    loans = repository.fetch_loans("u1")

    assert loans[0].id == "5"
    assert loans[0].remaining_balance == Decimal("850.25")
    assert loans[0].loan_type == "credit_card"


def test_update_savings_goal_sends_new_amount() -> None:
    conn = MagicMock()
    repository = SqlAlchemyPlanningRepository(_db_port(conn))
    goal = SavingsGoal(
        id="g1",
        user_id="u1",
        name="Bike",
        target_amount=Decimal("300"),
        current_amount=Decimal("300"),
        is_completed=True,
    )

    repository.update_savings_goal(goal)

    _, params = conn.execute.call_args.args
    assert params == {
        "user_id": "u1",
        "goal_id": "g1",
        "current_amount": Decimal("300"),
        "is_completed": True,
    }


def test_fetch_category_raises_when_missing() -> None:
    conn = MagicMock()
    conn.execute.return_value.first.return_value = None
    repository = SqlAlchemyCategoryRepository(_db_port(conn))

    with pytest.raises(LookupError, match="Missing category"):
        repository.fetch_category("u1", "c1")


def test_fetch_categories_maps_rows() -> None:
    conn = MagicMock()
    conn.execute.return_value.all.return_value = [
        SimpleNamespace(
            id=1,
            user_id="u1",
            name="Rent",
            icon="home",
            color=None,
            kind="expense",
            category_group="fixed",
            is_default=True,
        )
    ]
    repository = SqlAlchemyCategoryRepository(_db_port(conn))

    categories = repository.fetch_categories("u1")

    assert categories[0].id == "1"
    assert categories[0].color == "#6366f1"
    assert categories[0].group == "fixed"
    assert categories[0].is_default is True


def test_delete_category_detaches_and_guards_default_rows() -> None:
    """The detach and the guarded delete run inside one transaction."""
    conn = MagicMock()
    conn.execute.return_value.rowcount = 3
    db_port = _db_port(conn)
    repository = SqlAlchemyCategoryRepository(db_port)

    assert repository.delete_category("u1", "c1") == 3

    engine = db_port.get_engine.return_value
    engine.begin.assert_called_once()
    engine.connect.assert_not_called()
    (detach, detach_params), (delete, delete_params) = [
        call.args for call in conn.execute.call_args_list
    ]
    assert "UPDATE transactions" in str(detach)
    assert "is_default = false" in str(delete)
    assert detach_params == delete_params == {
        "user_id": "u1",
        "category_id": "c1",
    }


def test_delete_category_failure_exits_the_shared_transaction() -> None:
    """A failing delete leaves the single begin block with the error."""
    conn = MagicMock()
    conn.execute.side_effect = [MagicMock(rowcount=2), RuntimeError("boom")]
    db_port = _db_port(conn)
    repository = SqlAlchemyCategoryRepository(db_port)

    with pytest.raises(RuntimeError, match="boom"):
        repository.delete_category("u1", "c1")

    begin = db_port.get_engine.return_value.begin
    begin.assert_called_once()
    exc_type = begin.return_value.__exit__.call_args.args[0]
    assert exc_type is RuntimeError


def test_delete_category_rolls_back_detach_when_delete_fails(tmp_path) -> None:
    """Transactions keep their category when the delete is rejected."""
    engine = create_engine(f"sqlite:///{tmp_path / 'finsight.db'}")
    with engine.begin() as conn:
        conn.execute(
            text(
                "CREATE TABLE categories (id TEXT, user_id TEXT, "
                "is_default BOOLEAN)"
            )
        )
        conn.execute(
            text(
                "CREATE TABLE transactions (id TEXT, user_id TEXT, "
                "category_id TEXT)"
            )
        )
        conn.execute(
            text(
                "CREATE TRIGGER reject_delete BEFORE DELETE ON categories "
                "BEGIN SELECT RAISE(ABORT, 'category in use'); END"
            )
        )
        conn.execute(text("INSERT INTO categories VALUES ('c1', 'u1', 0)"))
        conn.execute(
            text("INSERT INTO transactions VALUES ('t1', 'u1', 'c1')")
        )
    db_port = MagicMock()
    db_port.get_engine.return_value = engine
    repository = SqlAlchemyCategoryRepository(db_port)

    with pytest.raises(DBAPIError):
        repository.delete_category("u1", "c1")

    with engine.connect() as conn:
        category_id = conn.execute(
            text("SELECT category_id FROM transactions WHERE id = 't1'")
        ).scalar_one()
        remaining = conn.execute(
            text("SELECT COUNT(*) FROM categories")
        ).scalar_one()
    engine.dispose()
    assert category_id == "c1"
    assert remaining == 1

"""Pytest configuration and fixtures."""

from datetime import datetime, timedelta, timezone

import pytest

from ofkt.core.models import FileAlias


@pytest.fixture
def now():
    """Fixed reference time for boost calculations."""
    return datetime(2025, 6, 30, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def make_alias():
    """Factory for aliases last opened 100 days ago (no recency boost)."""

    def _make(name, path=None, tags=None, is_favorite=False, accessed_days_ago=100, now=None):
        now = now or datetime.now(timezone.utc)
        return FileAlias(
            name=name,
            path=path or f"/path/to/{name}",
            tags=tags or [],
            is_favorite=is_favorite,
            last_accessed=now - timedelta(days=accessed_days_ago),
        )

    return _make


@pytest.fixture
def accounting_aliases(make_alias):
    """Aliases laid out in dated accounting folders."""
    return [
        make_alias("trial_balance", "C:/2025年度/会計/試算表/202506/balance.xlsx"),
        make_alias("report", "C:/2025年度/会計/報告書/202506/report.docx"),
        make_alias("budget", "C:/2025年度/会計/予算/202507/budget.xlsx"),
    ]

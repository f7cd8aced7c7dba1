import sys
from pathlib import Path
from typing import List

import pytest
import pytest_asyncio

# Ensure project root is on sys.path so `import ubp_poller` works when running pytest from root.
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from ubp_poller.db.base import create_engine, create_session_factory  # noqa: E402
from ubp_poller.db.init import create_tables  # noqa: E402
from ubp_poller.db.models import Account  # noqa: E402
from ubp_poller.transactions.config import PollerConfig  # noqa: E402

from tests.fakes import FakeUnionBank, FakeWebhook  # noqa: E402


@pytest.fixture
def db_path(tmp_path) -> Path:
    """Fresh SQLite file per test."""
    return tmp_path / "ubp.db"


@pytest_asyncio.fixture
async def engine(db_path):
    """Async engine with the accounts and records tables created."""
    engine = create_engine(str(db_path))
    await create_tables(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return create_session_factory(engine)


def build_account(index: int) -> Account:
    return Account(
        id=f"acct-{index}",
        number=f"10{index}000012345",
        name=f"Payroll {index}",
        client_id=f"client-{index}",
        client_secret=f"secret-{index}",
        username=f"user{index}",
        password=f"pass{index}",
        partner_id=f"partner-{index}",
    )


@pytest_asyncio.fixture
async def accounts(session_factory) -> List[Account]:
    """Two accounts stored in insertion order."""
    rows = [build_account(1), build_account(2)]
    async with session_factory() as session:
        for row in rows:
            session.add(row)
            await session.flush()
        await session.commit()
    return rows


@pytest.fixture
def poller_config() -> PollerConfig:
    return PollerConfig(
        proxy_url="http://proxy.internal:3128",
        webhook_url="https://hooks.slack.test/services/T000/B000/XXX",
    )


@pytest.fixture
def fake_bank() -> FakeUnionBank:
    return FakeUnionBank()


@pytest.fixture
def fake_webhook() -> FakeWebhook:
    return FakeWebhook()

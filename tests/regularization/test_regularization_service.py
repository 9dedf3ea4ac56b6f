import asyncio
from datetime import date

import pytest

from attendance_dashboard.core.exceptions import BackendError, DateOutOfWindowError
from attendance_dashboard.regularization.service import RegularizationService
from fakes import InMemoryRegularizations


def test_submit_sends_validated_request(clock):
    repo = InMemoryRegularizations()
    service = RegularizationService(repo, now=clock)

    receipt = asyncio.run(service.submit("2024-03-04", "Medical leave 2024"))

    assert receipt.message == "Regularization request submitted"
    assert receipt.request.work_date == date(2024, 3, 4)
    assert repo.requests == [receipt.request]


def test_submit_uses_clock_for_today(clock):
    repo = InMemoryRegularizations()
    service = RegularizationService(repo, now=clock)

    assert service.today() == date(2024, 3, 15)
    with pytest.raises(DateOutOfWindowError):
        asyncio.run(service.submit("2024-03-16", "Overtime"))
    assert repo.requests == []


def test_submit_with_explicit_today(clock):
    repo = InMemoryRegularizations()
    service = RegularizationService(repo, now=clock)

    receipt = asyncio.run(service.submit("2024-04-02", "Overtime", today=date(2024, 4, 3)))

    assert receipt.request.work_date == date(2024, 4, 2)


def test_submit_propagates_backend_error(clock):
    repo = InMemoryRegularizations()
    repo.error = BackendError("Duplicate request", status_code=409)
    service = RegularizationService(repo, now=clock)

    with pytest.raises(BackendError, match="Duplicate request"):
        asyncio.run(service.submit("2024-03-04", "Medical leave"))

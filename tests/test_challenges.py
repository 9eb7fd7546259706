"""Tests for the personal challenge ledger."""

from datetime import datetime

import pytest

from habit_forge.errors import (
    CapacityExceededError,
    ChallengeNotFoundError,
    ValidationError,
    WindowExpiredError,
)
from habit_forge.models.challenge import ChallengeStatus
from habit_forge.services.challenges import ChallengeFilter


class TestCreate:
    """Tests for ChallengeLedger.create."""

    def test_new_challenge_is_active_and_stamped(self, ledger, clock, make_candidate):
        challenge = ledger.create(make_candidate())

        assert challenge.status == ChallengeStatus.ACTIVE
        assert challenge.created_at == clock.now()
        assert challenge.completed_at is None
        assert challenge.stake == 500

    def test_most_recent_first(self, ledger, make_candidate):
        first = ledger.create(make_candidate(exercise="Plank"))
        second = ledger.create(make_candidate(exercise="Squats"))

        assert [c.id for c in ledger.challenges] == [second.id, first.id]

    def test_sixth_active_rejected(self, ledger, make_candidate):
        for _ in range(5):
            ledger.create(make_candidate())

        with pytest.raises(CapacityExceededError):
            ledger.create(make_candidate())
        assert len(ledger.challenges) == 5

    def test_capacity_checked_before_validation(self, ledger, make_candidate):
        for _ in range(5):
            ledger.create(make_candidate())

        with pytest.raises(CapacityExceededError):
            ledger.create(make_candidate(exercise=""))

    def test_capacity_frees_after_transition(self, ledger, make_candidate):
        created = [ledger.create(make_candidate()) for _ in range(5)]
        ledger.set_status(created[0].id, ChallengeStatus.FAIL)

        ledger.create(make_candidate())
        assert ledger.active_count == 5
        assert len(ledger.challenges) == 6

    def test_invalid_candidate_adds_nothing(self, ledger, make_candidate):
        with pytest.raises(ValidationError):
            ledger.create(make_candidate(per_week="9"))
        assert ledger.challenges == ()


class TestSetStatus:
    """Tests for ChallengeLedger.set_status."""

    def test_success_sets_completion_time(self, ledger, clock, make_candidate):
        challenge = ledger.create(make_candidate())
        clock.advance(days=2)

        ledger.set_status(challenge.id, "success")

        assert challenge.status == ChallengeStatus.SUCCESS
        assert challenge.completed_at == clock.now()

    def test_reopen_clears_completion_time(self, ledger, make_candidate):
        challenge = ledger.create(make_candidate())
        ledger.set_status(challenge.id, ChallengeStatus.FAIL)
        ledger.set_status(challenge.id, ChallengeStatus.ACTIVE)

        assert challenge.status == ChallengeStatus.ACTIVE
        assert challenge.completed_at is None

    def test_any_transition_allowed(self, ledger, make_candidate):
        challenge = ledger.create(make_candidate())
        ledger.set_status(challenge.id, ChallengeStatus.SUCCESS)
        ledger.set_status(challenge.id, ChallengeStatus.FAIL)
        assert challenge.status == ChallengeStatus.FAIL

    def test_unknown_status(self, ledger, make_candidate):
        challenge = ledger.create(make_candidate())
        with pytest.raises(ValidationError):
            ledger.set_status(challenge.id, "paused")
        assert challenge.status == ChallengeStatus.ACTIVE

    def test_unknown_id(self, ledger):
        with pytest.raises(ChallengeNotFoundError):
            ledger.set_status("missing", ChallengeStatus.SUCCESS)


class TestRemove:
    """Tests for the 12 hour deletion window."""

    def test_remove_inside_window(self, ledger, clock, make_candidate):
        challenge = ledger.create(make_candidate())
        clock.advance(hours=11, minutes=59, seconds=59)

        ledger.remove(challenge.id)
        assert ledger.challenges == ()

    def test_remove_at_window_end_fails(self, ledger, clock, make_candidate):
        challenge = ledger.create(make_candidate())
        clock.advance(hours=12)

        with pytest.raises(WindowExpiredError):
            ledger.remove(challenge.id)
        assert len(ledger.challenges) == 1

    def test_remove_ignores_status(self, ledger, make_candidate):
        challenge = ledger.create(make_candidate())
        ledger.set_status(challenge.id, ChallengeStatus.SUCCESS)

        ledger.remove(challenge.id)
        assert ledger.challenges == ()

    def test_remove_unknown(self, ledger):
        with pytest.raises(ChallengeNotFoundError):
            ledger.remove("missing")


class TestFilterAndPaginate:
    """Tests for read views."""

    def test_active_filter(self, ledger, make_candidate):
        done = ledger.create(make_candidate())
        open_one = ledger.create(make_candidate())
        ledger.set_status(done.id, ChallengeStatus.SUCCESS)

        assert [c.id for c in ledger.filter(ChallengeFilter.ACTIVE)] == [open_one.id]
        assert len(ledger.filter("all")) == 2

    def test_month_filter_uses_completion_month(self, ledger, clock, make_candidate):
        challenge = ledger.create(make_candidate())
        clock.set(datetime(2026, 11, 3, 9, 0))
        ledger.set_status(challenge.id, ChallengeStatus.SUCCESS)

        # Created in October, completed in November
        assert ledger.filter(ChallengeFilter.SUCCESS) == [challenge]
        assert ledger.filter(ChallengeFilter.FAIL) == []

    def test_month_filter_excludes_previous_months(self, ledger, clock, make_candidate):
        challenge = ledger.create(make_candidate())
        ledger.set_status(challenge.id, ChallengeStatus.FAIL)
        assert ledger.filter(ChallengeFilter.FAIL) == [challenge]

        clock.set(datetime(2026, 12, 1))
        assert ledger.filter(ChallengeFilter.FAIL) == []

    def test_same_month_previous_year_excluded(self, ledger, clock, make_candidate):
        challenge = ledger.create(make_candidate())
        ledger.set_status(challenge.id, ChallengeStatus.SUCCESS)

        clock.set(datetime(2027, 10, 21))
        assert ledger.filter(ChallengeFilter.SUCCESS) == []

    def test_paginate(self, ledger, make_candidate):
        for i in range(5):
            challenge = ledger.create(make_candidate(exercise=f"Ex {i}"))
            if i < 3:
                ledger.set_status(challenge.id, ChallengeStatus.SUCCESS)
        ledger.create(make_candidate(exercise="Ex 5"))
        ledger.create(make_candidate(exercise="Ex 6"))

        first = ledger.paginate(ChallengeFilter.ALL, page=1)
        assert first.total_count == 7
        assert first.total_pages == 2
        assert [c.exercise for c in first.items] == ["Ex 6", "Ex 5", "Ex 4", "Ex 3", "Ex 2"]

        second = ledger.paginate(ChallengeFilter.ALL, page=2)
        assert [c.exercise for c in second.items] == ["Ex 1", "Ex 0"]

    def test_page_is_clamped(self, ledger, make_candidate):
        for _ in range(3):
            ledger.create(make_candidate())

        assert ledger.paginate(page=99).page == 1
        assert ledger.paginate(page=0).page == 1
        assert len(ledger.paginate(page=-3).items) == 3

    def test_empty_view_has_one_page(self, ledger):
        page = ledger.paginate(ChallengeFilter.ACTIVE, page=4)
        assert page.page == 1
        assert page.total_pages == 1
        assert page.items == []

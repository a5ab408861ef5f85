"""Unit tests for the Participation entity."""

from datetime import datetime, timedelta, timezone

import pytest

from calendart.domain.entities import Participation
from calendart.domain.errors import InvalidStatusError
from calendart.domain.value_objects import ParticipationStatus, Role
from tests.fixtures.entities import EPOCH
from tests.helpers.time_asserts import assert_between, assert_strict_utc

# pylint: disable=magic-value-comparison,protected-access


class TestParticipationInitialization:
    """Tests for the Participation construction."""

    @staticmethod
    def test_defaults(user, event, fixed_clock):
        """Test that a default participation is a tentative participant."""
        participation = Participation(event, user, clock=fixed_clock)

        assert participation.event is event
        assert participation.user is user
        assert participation.role == Role.PARTICIPANT == 0b01
        assert participation.status is ParticipationStatus.TENTATIVE
        assert participation.status == 0
        assert participation.invited_at == EPOCH
        assert participation.answered_at is None
        assert not participation.has_answered()

    @staticmethod
    def test_explicit_role_and_status(user, event):
        """Test that the given role and status are kept."""
        participation = Participation(
            event,
            user,
            Role.PARTICIPANT | Role.MANAGER,
            ParticipationStatus.ACCEPTED,
        )

        assert participation.role == 0b11
        assert participation.status is ParticipationStatus.ACCEPTED

    @staticmethod
    def test_status_given_as_int(user, event):
        """Test that a raw integer status is normalized to the enum."""
        participation = Participation(event, user, status=-1)

        assert participation.status is ParticipationStatus.DECLINED

    @staticmethod
    def test_invited_at_defaults_to_utc_now(user, event):
        """Test that without a clock the invitation time is the current UTC time."""
        before = datetime.now(timezone.utc)
        participation = Participation(event, user)
        after = datetime.now(timezone.utc)

        assert_strict_utc(participation.invited_at)
        assert_between(participation.invited_at, before, after)

    @staticmethod
    def test_invited_at_is_read_only(user, event):
        """Test that the invitation time cannot be reassigned."""
        participation = Participation(event, user)

        with pytest.raises(AttributeError):
            participation.invited_at = EPOCH  # type: ignore[misc]

    @staticmethod
    def test_registers_event_with_user(user, event):
        """Test that creating a participation links the event to the user."""
        Participation(event, user)

        assert user.events == (event,)

    @staticmethod
    def test_registration_is_idempotent(user, event):
        """Test that a second participation on the same pair keeps one event."""
        Participation(event, user, Role.PARTICIPANT)
        Participation(event, user, Role.MANAGER)

        assert user.events == (event,)

    @staticmethod
    def test_invalid_status_leaves_user_untouched(user, event):
        """Test that a rejected status does not link the event to the user."""
        with pytest.raises(InvalidStatusError):
            Participation(event, user, status=2)

        assert user.events == ()


class TestParticipationAnswer:
    """Tests for the answer time of a participation."""

    @staticmethod
    def test_set_answered_at_defaults_to_now(user, event, fixed_clock):
        """Test that answering without a date uses the clock."""
        participation = Participation(event, user, clock=fixed_clock)
        answered = fixed_clock.advance(timedelta(hours=2))

        result = participation.set_answered_at()

        assert result is participation
        assert participation.answered_at == answered
        assert participation.has_answered()

    @staticmethod
    def test_set_answered_at_with_date(user, event):
        """Test that an explicit answer time is kept as is."""
        participation = Participation(event, user)
        moment = datetime(2024, 5, 4, 12, 0, tzinfo=timezone.utc)

        participation.set_answered_at(moment)

        assert participation.answered_at == moment

    @staticmethod
    def test_answering_does_not_change_status(user, event):
        """Test that a participation may be answered and remain tentative."""
        participation = Participation(event, user)

        participation.set_answered_at()

        assert participation.has_answered()
        assert participation.status is ParticipationStatus.TENTATIVE


class TestParticipationRole:
    """Tests for the role of a participation."""

    @staticmethod
    def test_set_role_chains(user, event):
        """Test that set_role replaces the mask and returns the participation."""
        participation = Participation(event, user)

        assert participation.set_role(Role.MANAGER) is participation
        assert participation.role == Role.MANAGER

    @staticmethod
    def test_role_is_not_validated(user, event):
        """Test that any integer is accepted as a role."""
        participation = Participation(event, user, role=0b1000)
        participation.role = 0b1100

        assert participation.role == 0b1100

    @staticmethod
    def test_has_role(user, event):
        """Test that has_role checks every requested bit."""
        participation = Participation(event, user, Role.PARTICIPANT | Role.MANAGER)

        assert participation.has_role(Role.MANAGER)
        assert participation.has_role(Role.PARTICIPANT | Role.MANAGER)
        participation.set_role(Role.PARTICIPANT)
        assert not participation.has_role(Role.MANAGER)
        assert not participation.has_role(Role.PARTICIPANT | Role.MANAGER)


class TestParticipationStatus:
    """Tests for the status of a participation."""

    @staticmethod
    def test_available_statuses():
        """Test that statuses are listed from declined to accepted."""
        assert Participation.get_available_statuses() == (
            ParticipationStatus.DECLINED,
            ParticipationStatus.TENTATIVE,
            ParticipationStatus.ACCEPTED,
        )

    @staticmethod
    @pytest.mark.parametrize("status", [-1, 0, 1, *ParticipationStatus])
    def test_set_status_accepts_valid_values(user, event, status):
        """Test that every available status can be set."""
        participation = Participation(event, user)

        assert participation.set_status(status) is participation
        assert participation.status == status
        assert isinstance(participation.status, ParticipationStatus)

    @staticmethod
    def test_all_transitions_allowed(user, event):
        """Test that any status may follow any other."""
        participation = Participation(event, user)

        for current in ParticipationStatus:
            for target in ParticipationStatus:
                participation.set_status(current).set_status(target)
                assert participation.status is target

    @staticmethod
    @pytest.mark.parametrize("value", [2, -2, 100, True, False, "1", 1.0, None])
    def test_set_status_rejects_other_values(user, event, value):
        """Test that values outside the whitelist are rejected and change nothing."""
        participation = Participation(event, user, status=ParticipationStatus.ACCEPTED)

        with pytest.raises(InvalidStatusError) as exc_info:
            participation.set_status(value)

        assert exc_info.value.value is value
        assert exc_info.value.allowed == (-1, 0, 1)
        assert participation.status is ParticipationStatus.ACCEPTED

    @staticmethod
    def test_status_setter_validates(user, event):
        """Test that assigning the status property goes through validation."""
        participation = Participation(event, user)

        participation.status = ParticipationStatus.DECLINED
        assert participation.status is ParticipationStatus.DECLINED

        with pytest.raises(InvalidStatusError):
            participation.status = 3
        assert participation.status is ParticipationStatus.DECLINED

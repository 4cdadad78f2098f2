"""
Unit tests for domain entities.
"""

import dataclasses

import pytest

from ooh_tracker.domain.entities.customer import Customer
from ooh_tracker.domain.entities.engineer import Engineer
from ooh_tracker.domain.entities.job import JobAlert
from ooh_tracker.domain.exceptions.validation_error import (
    RequiredFieldError,
    ValidationError,
)
from ooh_tracker.domain.value_objects.engineer_status import EngineerStatus
from ooh_tracker.domain.value_objects.milestone import AlertType, Milestone
from tests.conftest import T0, minutes


class TestJob:
    """Test Job entity."""

    def test_new_job_has_no_milestones(self, make_job):
        job = make_job()

        assert job.date_accepted is None
        assert job.date_on_site is None
        assert job.date_completed is None
        assert job.is_completed is False
        assert job.next_milestone is Milestone.ACCEPTED
        assert job.alerts == ()

    @pytest.mark.parametrize("field_name", ["customer", "site", "description"])
    @pytest.mark.parametrize("blank", ["", "   "])
    def test_rejects_blank_required_fields(self, make_job, field_name, blank):
        with pytest.raises(RequiredFieldError) as exc_info:
            make_job(**{field_name: blank})
        assert exc_info.value.field_name == field_name

    def test_milestones_must_be_monotonic(self, make_job):
        with pytest.raises(ValidationError):
            make_job(
                date_accepted=T0 + minutes(20),
                date_on_site=T0 + minutes(10),
            )

    def test_milestone_cannot_precede_date_logged(self, make_job):
        with pytest.raises(ValidationError):
            make_job(date_accepted=T0 - minutes(1))

    def test_later_milestone_requires_earlier(self, make_job):
        with pytest.raises(ValidationError):
            make_job(date_completed=T0 + minutes(60))

    def test_equal_timestamps_are_allowed(self, make_job):
        job = make_job(date_accepted=T0, date_on_site=T0, date_completed=T0)
        assert job.is_completed is True
        assert job.next_milestone is None

    def test_job_is_immutable(self, make_job):
        job = make_job()
        with pytest.raises(dataclasses.FrozenInstanceError):
            job.status = "red"

    def test_alert_lookup(self, make_job):
        alert = JobAlert(type=AlertType.ACCEPTED, message="late", timestamp=T0)
        job = make_job(alerts=[alert])

        assert job.alerts == (alert,)
        assert job.alert(alert.id) is alert
        assert job.alert("missing") is None
        assert job.has_alert_of_type(AlertType.ACCEPTED) is True
        assert job.has_alert_of_type(AlertType.OVERDUE) is False

    def test_alert_ids_must_be_unique_within_job(self, make_job):
        first = JobAlert(type=AlertType.ACCEPTED, message="late", timestamp=T0)
        copy = JobAlert(
            id=first.id, type=AlertType.ONSITE, message="late", timestamp=T0
        )

        with pytest.raises(ValidationError):
            make_job(alerts=[first, copy])

    def test_appending_duplicate_alert_id_is_rejected(self, make_job):
        first = JobAlert(type=AlertType.ACCEPTED, message="late", timestamp=T0)
        job = make_job(alerts=[first])

        with pytest.raises(ValidationError):
            dataclasses.replace(
                job,
                alerts=job.alerts
                + (JobAlert(id=first.id, type=AlertType.ONSITE, message="m", timestamp=T0),),
            )

    def test_to_dict_serialises_timestamps_as_iso(self, make_job):
        job = make_job(date_accepted=T0 + minutes(5))
        data = job.to_dict()

        assert data["date_logged"] == "2024-01-15T09:00:00+00:00"
        assert data["date_accepted"] == "2024-01-15T09:05:00+00:00"
        assert data["date_completed"] is None
        assert data["sla"] == {"accept_sla": 30, "onsite_sla": 90, "completed_sla": 180}


class TestJobAlert:
    def test_alert_ids_are_unique(self):
        first = JobAlert(type=AlertType.ACCEPTED, message="m", timestamp=T0)
        second = JobAlert(type=AlertType.ACCEPTED, message="m", timestamp=T0)
        assert first.id != second.id

    def test_acknowledge(self):
        alert = JobAlert(type=AlertType.ONSITE, message="m", timestamp=T0)
        acknowledged = alert.acknowledge()

        assert alert.acknowledged is False
        assert acknowledged.acknowledged is True
        assert acknowledged.same_record(alert)
        assert acknowledged.acknowledge() is acknowledged


class TestCustomer:
    def test_sites_are_a_set(self):
        customer = Customer(id=1, name="Northgate Housing", sites=["Elm Court", "Elm Court"])

        assert customer.sites == frozenset({"Elm Court"})
        assert customer.has_site("Elm Court") is True
        assert customer.has_site("elm court") is False

    def test_add_site(self):
        customer = Customer(id=1, name="Northgate Housing")
        customer.add_site("Birch House")
        assert customer.to_dict()["sites"] == ["Birch House"]

    def test_requires_name(self):
        with pytest.raises(RequiredFieldError):
            Customer(id=1, name=" ")


class TestEngineer:
    def test_on_call(self):
        engineer = Engineer(name="Sam Patel")
        assert engineer.is_on_call is True

        engineer.update_status(EngineerStatus.ONSITE)
        assert engineer.is_on_call is False

    def test_requires_name(self):
        with pytest.raises(RequiredFieldError):
            Engineer(name="")

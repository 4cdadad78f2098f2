"""
Unit tests for the application factory and route registration.
"""

import importlib

import pytest

from ooh_tracker.api.app import create_app


@pytest.mark.parametrize(
    "module_name",
    [
        "ooh_tracker",
        "ooh_tracker.main",
        "ooh_tracker.api.routes.alerts",
        "ooh_tracker.api.routes.customers",
        "ooh_tracker.api.routes.engineers",
        "ooh_tracker.api.routes.health",
        "ooh_tracker.api.routes.jobs",
        "ooh_tracker.api.routes.reports",
    ],
)
def test_module_imports(module_name):
    assert importlib.import_module(module_name) is not None


def test_all_routes_registered():
    app = create_app()
    paths = {route.path for route in app.routes}

    assert {
        "/api/v1/health/",
        "/api/v1/jobs/",
        "/api/v1/jobs/{job_id}/sla",
        "/api/v1/jobs/{job_id}/alerts/{alert_id}/acknowledge",
        "/api/v1/alerts/sweep",
        "/api/v1/customers/{name}/jobs",
        "/api/v1/engineers/{name}",
        "/api/v1/reports/shift",
        "/api/v1/reports/dashboard",
    } <= paths


def test_shift_report_requires_date(client):
    response = client.get("/api/v1/reports/shift")

    assert response.status_code == 422

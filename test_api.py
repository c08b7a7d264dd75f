#!/usr/bin/env python3
"""
Tests for the distance HTTP endpoints.
"""

import os
import sys

import pytest
from fastapi.testclient import TestClient

# Add package to path
sys.path.insert(0, os.path.dirname(__file__))

from intl_distance.config import settings
from intl_distance.main import app


@pytest.fixture
def client():
    with TestClient(app) as test_client:
        yield test_client


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {
        "status": "healthy",
        "app": settings.APP_NAME,
        "version": settings.APP_VERSION,
    }


def test_config_info(client):
    response = client.get("/config")

    assert response.status_code == 200
    assert response.json()["default_locale"] == settings.DEFAULT_LOCALE


def test_distance_picks_unit(client):
    response = client.get(
        "/api/distance",
        params={"date": "1986-04-04T11:30:00", "base_date": "1986-04-04T10:30:00", "locale": "en"},
    )

    assert response.status_code == 200
    assert response.json() == {"value": 1, "unit": "hour", "text": "in 1 hour"}


def test_distance_with_unit_and_locale(client):
    response = client.get(
        "/api/distance",
        params={
            "date": "1986-04-04T11:30:00",
            "base_date": "1986-04-04T10:30:00",
            "unit": "minute",
            "locale": "es",
            "numeric": "always",
        },
    )

    assert response.status_code == 200
    assert response.json() == {"value": 60, "unit": "minute", "text": "dentro de 60 minutos"}


def test_distance_with_locale_list(client):
    response = client.get(
        "/api/distance",
        params=[
            ("date", "1987-04-04T10:30:00"),
            ("base_date", "1986-04-04T10:30:00"),
            ("unit", "quarter"),
            ("locale", "xx"),
            ("locale", "en"),
            ("locale_matcher", "lookup"),
        ],
    )

    assert response.status_code == 200
    assert response.json()["text"] == "in 4 quarters"


def test_distance_rejects_unknown_unit(client):
    response = client.get(
        "/api/distance",
        params={"date": "1986-04-04T11:30:00", "base_date": "1986-04-04T10:30:00", "unit": "fortnight"},
    )

    assert response.status_code == 422


def test_distance_rejects_malformed_locale(client):
    response = client.get(
        "/api/distance",
        params={"date": "1986-04-04T11:30:00", "base_date": "1986-04-04T10:30:00", "locale": "en_US"},
    )

    assert response.status_code == 400
    assert "locale" in response.json()["detail"]


def test_distance_rejects_mixed_timezones(client):
    response = client.get(
        "/api/distance",
        params={"date": "1986-04-04T11:30:00Z", "base_date": "1986-04-04T10:30:00"},
    )

    assert response.status_code == 400


def test_distance_requires_both_instants(client):
    response = client.get("/api/distance", params={"date": "1986-04-04T11:30:00"})

    assert response.status_code == 422

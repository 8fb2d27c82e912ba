"""Tests for the ASGI entrypoint."""

import importlib

from fastapi import FastAPI


def test_asgi_module_exposes_app(monkeypatch) -> None:
    monkeypatch.setenv("SUPABASE_URL", "https://example.supabase.co")
    monkeypatch.setenv("SUPABASE_SERVICE_KEY", "header.payload.signature")

    module = importlib.import_module("daily_diet.api.asgi")

    assert isinstance(module.app, FastAPI)
    assert any(route.path == "/snacks/summary" for route in module.app.routes)

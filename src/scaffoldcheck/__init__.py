"""Smoke-test harness for backend project scaffolding."""

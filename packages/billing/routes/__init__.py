"""Billing API routes."""

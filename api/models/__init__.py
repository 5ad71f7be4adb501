"""Modelos de request/response de la API."""
